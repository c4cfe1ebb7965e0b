"""
분개 항목 (LedgerEntry)

복식부기 분개의 한 다리(leg). 생성 후 불변.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from core.ledger.types import AccountType, FinancialCategory, JournalSide

ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerEntry:
    """분개 항목

    차변 또는 대변 중 정확히 하나만 0보다 크다.
    같은 journal_id를 가진 항목들이 하나의 거래(분개)를 이룬다.
    """

    entry_id: str
    date: date
    description: str
    debit: Decimal
    credit: Decimal
    account_id: str
    account_type: AccountType
    category: FinancialCategory
    journal_id: str

    # 역분개인 경우 원 분개 ID
    reversal_of: str | None = None

    def __post_init__(self) -> None:
        if self.debit < ZERO or self.credit < ZERO:
            raise ValueError(
                f"음수 금액은 허용되지 않습니다: {self.entry_id} "
                f"(debit={self.debit}, credit={self.credit})"
            )
        if (self.debit > ZERO) == (self.credit > ZERO):
            raise ValueError(
                f"차변/대변 중 하나만 0보다 커야 합니다: {self.entry_id} "
                f"(debit={self.debit}, credit={self.credit})"
            )

    @property
    def side(self) -> JournalSide:
        """차변/대변 구분"""
        return JournalSide.DEBIT if self.debit > ZERO else JournalSide.CREDIT

    @property
    def amount(self) -> Decimal:
        """다리 금액 (방향 무관)"""
        return self.debit if self.debit > ZERO else self.credit

    @property
    def net(self) -> Decimal:
        """차변 - 대변"""
        return self.debit - self.credit

    def to_dict(self) -> dict[str, Any]:
        """직렬화용 dict (금액은 문자열, 날짜는 ISO)"""
        data = asdict(self)
        data["date"] = self.date.isoformat()
        data["debit"] = str(self.debit)
        data["credit"] = str(self.credit)
        data["account_type"] = self.account_type.value
        data["category"] = self.category.value
        return data

"""
시산표 / 재무상태표 (Neraca)

계정별 잔액을 자산/부채/자본 버킷으로 집계하고
당기 손익을 자본에 합산한다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from core.ledger.entry import ZERO, LedgerEntry
from core.ledger.types import AccountType, natural_balance

AccountKey = tuple[str, AccountType]

# 재무상태표 본문에 들어가는 계정 유형
BALANCE_SHEET_TYPES = (AccountType.ASSET, AccountType.LIABILITY, AccountType.EQUITY)

# 시산표 정렬 순서
ACCOUNT_TYPE_ORDER = {
    AccountType.ASSET: 0,
    AccountType.LIABILITY: 1,
    AccountType.EQUITY: 2,
    AccountType.REVENUE: 3,
    AccountType.EXPENSE: 4,
}


@dataclass(frozen=True)
class AccountBalance:
    """계정 잔액"""

    account_id: str
    account_type: AccountType
    balance: Decimal


@dataclass(frozen=True)
class TrialBalanceRow:
    """시산표 행"""

    account_id: str
    account_type: AccountType
    total_debit: Decimal
    total_credit: Decimal
    balance: Decimal  # 계정 유형의 부호 규칙 적용


@dataclass(frozen=True)
class BalanceSheet:
    """재무상태표

    accounts: 자산/부채/자본 계정 전체 (잔액 0 포함)
    assets/liabilities/equity: 잔액 0 계정을 제외한 표시용 목록
    total_equity: 자본 계정 합계 + 당기 손익
    """

    accounts: dict[AccountKey, Decimal] = field(default_factory=dict)
    assets: tuple[AccountBalance, ...] = ()
    liabilities: tuple[AccountBalance, ...] = ()
    equity: tuple[AccountBalance, ...] = ()
    total_revenue: Decimal = ZERO
    total_expense: Decimal = ZERO
    profit_loss: Decimal = ZERO
    total_assets: Decimal = ZERO
    total_liabilities: Decimal = ZERO
    total_equity: Decimal = ZERO

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        """부채 + 자본 (Total Pasiva)"""
        return self.total_liabilities + self.total_equity

    @property
    def is_balanced(self) -> bool:
        """자산 == 부채 + 자본"""
        return self.total_assets == self.total_liabilities_and_equity


def aggregate(entries: Iterable[LedgerEntry]) -> BalanceSheet:
    """재무상태표 집계

    계정은 (account_id, account_type) 쌍으로 식별.
    수익/비용 계정은 계정 맵에서 제외하고 당기 손익으로만 반영.
    """
    accounts: dict[AccountKey, Decimal] = {}
    total_revenue = ZERO
    total_expense = ZERO

    for entry in entries:
        if entry.account_type == AccountType.REVENUE:
            total_revenue += entry.credit - entry.debit
        elif entry.account_type == AccountType.EXPENSE:
            total_expense += entry.debit - entry.credit
        else:
            key = (entry.account_id, entry.account_type)
            accounts[key] = accounts.get(key, ZERO) + natural_balance(
                entry.account_type, entry.debit, entry.credit
            )

    profit_loss = total_revenue - total_expense

    def listing(account_type: AccountType) -> tuple[AccountBalance, ...]:
        # 잔액 0 계정은 표시하지 않음
        return tuple(
            AccountBalance(account_id, kind, balance)
            for (account_id, kind), balance in accounts.items()
            if kind == account_type and balance != ZERO
        )

    assets = listing(AccountType.ASSET)
    liabilities = listing(AccountType.LIABILITY)
    equity = listing(AccountType.EQUITY)

    return BalanceSheet(
        accounts=accounts,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        total_revenue=total_revenue,
        total_expense=total_expense,
        profit_loss=profit_loss,
        total_assets=sum((a.balance for a in assets), ZERO),
        total_liabilities=sum((a.balance for a in liabilities), ZERO),
        total_equity=sum((a.balance for a in equity), ZERO) + profit_loss,
    )


def trial_balance(entries: Iterable[LedgerEntry]) -> list[TrialBalanceRow]:
    """시산표

    5대 계정 유형 전체의 차변/대변 합계와 부호 규칙 적용 잔액.
    계정 유형 → 계정 ID 순으로 정렬.
    """
    totals: dict[AccountKey, list[Decimal]] = {}
    for entry in entries:
        key = (entry.account_id, entry.account_type)
        pair = totals.setdefault(key, [ZERO, ZERO])
        pair[0] += entry.debit
        pair[1] += entry.credit

    rows = [
        TrialBalanceRow(
            account_id=account_id,
            account_type=account_type,
            total_debit=debit,
            total_credit=credit,
            balance=natural_balance(account_type, debit, credit),
        )
        for (account_id, account_type), (debit, credit) in totals.items()
    ]
    rows.sort(key=lambda r: (ACCOUNT_TYPE_ORDER[r.account_type], r.account_id))
    return rows

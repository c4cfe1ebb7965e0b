"""
분개 전기기 (JournalPoster)

입금/출금 입력을 현금 계정 + 상대 계정의 균형 잡힌 2다리 분개로 변환해
장부에 추가한다. 장부에 쓰는 유일한 경로.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from core.constants import LedgerAccounts
from core.ledger.book import Ledger
from core.ledger.entry import ZERO, LedgerEntry
from core.ledger.errors import (
    JournalAlreadyReversedError,
    JournalNotFoundError,
    LedgerValidationError,
)
from core.ledger.types import AccountType, FinancialCategory, get_category_account
from core.types import FlowDirection
from core.utils.dates import parse_calendar_date
from core.utils.idempotency import JournalIdGenerator, make_entry_id, parse_journal_seq

logger = logging.getLogger(__name__)

REVERSAL_PREFIX = "KOREKSI"


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """금액을 Decimal로 변환

    float는 str을 거쳐 변환 (이진 부동소수점 오차 방지).

    Raises:
        LedgerValidationError: 숫자가 아닌 값
    """
    if isinstance(value, bool):
        raise LedgerValidationError(f"금액 형식이 올바르지 않습니다: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise LedgerValidationError(f"금액 형식이 올바르지 않습니다: {value!r}") from e
    if not amount.is_finite():
        raise LedgerValidationError(f"금액 형식이 올바르지 않습니다: {value!r}")
    return amount


class JournalPoster:
    """분개 전기기

    IN (수령): 현금 차변, 상대 계정 대변
    OUT (지출): 상대 계정 차변, 현금 대변

    항상 차변 다리가 먼저, 대변 다리가 두 번째.

    Args:
        ledger: 항목을 추가할 장부
        id_generator: 분개 ID 생성기 (None이면 장부의 가장 큰 JV 순번 다음부터 세는 카운터)
    """

    def __init__(self, ledger: Ledger, id_generator: JournalIdGenerator | None = None):
        self.ledger = ledger
        if id_generator is None:
            sequences = [parse_journal_seq(j) for j in ledger.journal_ids]
            last = max((s for s in sequences if s is not None), default=0)
            id_generator = JournalIdGenerator(start=last + 1)
        self.id_generator = id_generator

    def post(
        self,
        flow: FlowDirection | str,
        entry_date: date | datetime | str,
        description: str,
        amount: Decimal | int | float | str,
        category: FinancialCategory | str,
        target_account_id: str | None = None,
        account_type: AccountType | str | None = None,
    ) -> tuple[LedgerEntry, LedgerEntry]:
        """입출금 1건을 분개로 전기

        Args:
            flow: IN 또는 OUT
            entry_date: 거래일 (naive 달력 날짜)
            description: 적요
            amount: 금액 (0보다 커야 함)
            category: 업무 카테고리
            target_account_id: 상대 계정 (None이면 카테고리 기본 계정)
            account_type: 상대 계정 유형 (None이면 카테고리 기본 유형)

        Returns:
            (차변 다리, 대변 다리)

        Raises:
            LedgerValidationError: 입력 검증 실패 (장부는 변경되지 않음)
        """
        flow = self._parse_flow(flow)
        category = self._parse_category(category)
        value = to_amount(amount)
        if value <= ZERO:
            logger.warning(f"분개 거부: 금액 0 이하 ({value})")
            raise LedgerValidationError("Nominal harus lebih besar dari 0.")

        try:
            day = parse_calendar_date(entry_date)
        except ValueError as e:
            raise LedgerValidationError(str(e)) from e

        mapping = get_category_account(category)
        counter_account = self._normalize_account(target_account_id) or mapping.default_account
        if counter_account == LedgerAccounts.CASH_AND_BANK:
            logger.warning(f"분개 거부: 상대 계정이 현금 계정 ({target_account_id!r})")
            raise LedgerValidationError(
                f"Akun lawan tidak boleh {LedgerAccounts.CASH_AND_BANK}."
            )
        counter_type = self._parse_account_type(account_type) or mapping.account_type

        journal_id = self._next_journal_id()
        memo = (description or "").strip().upper()

        cash_kwargs = dict(
            account_id=LedgerAccounts.CASH_AND_BANK,
            account_type=AccountType.ASSET,
            category=FinancialCategory.CASH,
        )
        counter_kwargs = dict(
            account_id=counter_account,
            account_type=counter_type,
            category=category,
        )

        if flow == FlowDirection.IN:
            debit_kwargs, credit_kwargs = cash_kwargs, counter_kwargs
        else:
            debit_kwargs, credit_kwargs = counter_kwargs, cash_kwargs

        debit_leg = LedgerEntry(
            entry_id=make_entry_id(journal_id, 1),
            date=day,
            description=memo,
            debit=value,
            credit=ZERO,
            journal_id=journal_id,
            **debit_kwargs,
        )
        credit_leg = LedgerEntry(
            entry_id=make_entry_id(journal_id, 2),
            date=day,
            description=memo,
            debit=ZERO,
            credit=value,
            journal_id=journal_id,
            **credit_kwargs,
        )

        self.ledger.append_journal([debit_leg, credit_leg])

        logger.info(
            f"분개 전기: {journal_id} {flow.value} {category.value} "
            f"{counter_account} amount={value}"
        )
        return debit_leg, credit_leg

    def reverse(
        self,
        journal_id: str,
        entry_date: date | datetime | str | None = None,
        description: str | None = None,
    ) -> list[LedgerEntry]:
        """보정 분개(역분개) 전기

        원 분개의 차변/대변을 뒤바꾼 새 분개를 추가한다.
        장부는 추가 전용이므로 수정/삭제 대신 이 경로로만 정정한다.

        Args:
            journal_id: 정정할 분개 ID
            entry_date: 역분개일 (None이면 원 분개일)
            description: 적요 (None이면 원 분개 적요)

        Returns:
            새 분개의 다리 목록 (차변 다리 먼저)

        Raises:
            JournalNotFoundError: 분개가 없음
            JournalAlreadyReversedError: 이미 역분개됨
        """
        original = self.ledger.journal(journal_id)
        if not original:
            raise JournalNotFoundError(f"분개를 찾을 수 없습니다: {journal_id}")

        if any(e.reversal_of == journal_id for e in self.ledger):
            raise JournalAlreadyReversedError(f"이미 역분개된 분개입니다: {journal_id}")

        if entry_date is None:
            day = original[0].date
        else:
            try:
                day = parse_calendar_date(entry_date)
            except ValueError as e:
                raise LedgerValidationError(str(e)) from e

        text = (description or original[0].description).strip().upper()
        memo = f"{REVERSAL_PREFIX} {journal_id}: {text}"

        new_journal_id = self._next_journal_id()

        # 원래 대변 다리가 새 분개의 차변이 되므로 먼저 배치
        swapped = sorted(original, key=lambda e: e.debit > ZERO)
        legs = [
            LedgerEntry(
                entry_id=make_entry_id(new_journal_id, index),
                date=day,
                description=memo,
                debit=leg.credit,
                credit=leg.debit,
                account_id=leg.account_id,
                account_type=leg.account_type,
                category=leg.category,
                journal_id=new_journal_id,
                reversal_of=journal_id,
            )
            for index, leg in enumerate(swapped, start=1)
        ]

        self.ledger.append_journal(legs)

        logger.info(f"역분개 전기: {new_journal_id} (원 분개 {journal_id})")
        return legs

    def _next_journal_id(self) -> str:
        # 외부에서 들여온 분개 ID와 겹치면 건너뜀
        journal_id = self.id_generator.next_journal_id()
        while self.ledger.has_journal(journal_id):
            journal_id = self.id_generator.next_journal_id()
        return journal_id

    @staticmethod
    def _normalize_account(account_id: str | None) -> str | None:
        if account_id is None:
            return None
        normalized = account_id.strip().upper()
        return normalized or None

    @staticmethod
    def _parse_flow(flow: FlowDirection | str) -> FlowDirection:
        try:
            return FlowDirection(flow)
        except ValueError as e:
            raise LedgerValidationError(f"알 수 없는 흐름 방향: {flow!r}") from e

    @staticmethod
    def _parse_category(category: FinancialCategory | str) -> FinancialCategory:
        try:
            return FinancialCategory(category)
        except ValueError as e:
            raise LedgerValidationError(f"알 수 없는 카테고리: {category!r}") from e

    @staticmethod
    def _parse_account_type(account_type: AccountType | str | None) -> AccountType | None:
        if account_type is None:
            return None
        try:
            return AccountType(account_type)
        except ValueError:
            # 이름(ASSET)으로도 허용
            try:
                return AccountType[str(account_type)]
            except KeyError as e:
                raise LedgerValidationError(f"알 수 없는 계정 유형: {account_type!r}") from e

"""
계좌 거래 명세 (Rekening Koran)

현금/은행 계정의 거래를 시간순으로 누적 잔액과 함께 보여준다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from core.constants import LedgerAccounts
from core.ledger.entry import ZERO, LedgerEntry


@dataclass(frozen=True)
class StatementRow:
    """명세 행: 분개 항목 + 해당 시점 누적 잔액"""

    entry: LedgerEntry
    running_balance: Decimal


@dataclass(frozen=True)
class StatementSummary:
    """명세 요약"""

    opening_balance: Decimal
    total_debit: Decimal
    total_credit: Decimal
    ending_balance: Decimal
    row_count: int


def build_statement(
    entries: Iterable[LedgerEntry],
    account_id: str = LedgerAccounts.CASH_AND_BANK,
) -> list[StatementRow]:
    """계정 명세 생성

    날짜 오름차순(같은 날짜는 추가 순서)으로 balance += debit - credit을 누적한 뒤
    최신 거래가 먼저 오도록 뒤집어 반환.

    Args:
        entries: 장부 항목
        account_id: 명세 대상 계정 (기본: KAS & BANK)

    Returns:
        최신순 명세 행 목록. 항목이 없으면 빈 목록.
    """
    legs = [e for e in entries if e.account_id == account_id]
    # sorted는 안정 정렬이므로 같은 날짜는 추가 순서 유지
    legs = sorted(legs, key=lambda e: e.date)

    rows: list[StatementRow] = []
    balance = ZERO
    for leg in legs:
        balance += leg.debit - leg.credit
        rows.append(StatementRow(entry=leg, running_balance=balance))

    rows.reverse()
    return rows


def summarize_statement(rows: list[StatementRow]) -> StatementSummary:
    """명세 합계 및 기말 잔액

    기말 잔액 = 가장 최근 행의 누적 잔액 (행이 없으면 0)
    """
    total_debit = sum((r.entry.debit for r in rows), ZERO)
    total_credit = sum((r.entry.credit for r in rows), ZERO)
    ending = rows[0].running_balance if rows else ZERO

    return StatementSummary(
        opening_balance=ZERO,
        total_debit=total_debit,
        total_credit=total_credit,
        ending_balance=ending,
        row_count=len(rows),
    )

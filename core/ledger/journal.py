"""
일반 분개장 (Jurnal Umum)

장부 항목을 원래 분개 단위로 다시 묶는다. 표시 전용.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from core.ledger.book import is_balanced
from core.ledger.entry import ZERO, LedgerEntry


def group_journals(entries: Iterable[LedgerEntry]) -> list[list[LedgerEntry]]:
    """journal_id별 그룹핑

    - 그룹 내 다리는 원래 상대 순서 유지 (차변 다리 → 대변 다리)
    - 그룹 순서: 첫 다리 날짜 내림차순, 같은 날짜는 나중에 전기된 분개 먼저

    Returns:
        분개별 다리 목록의 목록
    """
    groups: dict[str, list[LedgerEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.journal_id, []).append(entry)

    # dict는 처음 만난 순서를 유지하므로 index가 전기 순서
    ordered = sorted(
        enumerate(groups.values()),
        key=lambda item: (item[1][0].date, item[0]),
        reverse=True,
    )
    return [legs for _, legs in ordered]


def journal_totals(entries: Iterable[LedgerEntry]) -> tuple[Decimal, Decimal]:
    """전체 차변 합계, 대변 합계"""
    total_debit = ZERO
    total_credit = ZERO
    for entry in entries:
        total_debit += entry.debit
        total_credit += entry.credit
    return total_debit, total_credit


def unbalanced_journals(entries: Iterable[LedgerEntry]) -> list[str]:
    """균형이 맞지 않는 분개 ID 목록 (무결성 점검)"""
    groups: dict[str, list[LedgerEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.journal_id, []).append(entry)
    return [journal_id for journal_id, legs in groups.items() if not is_balanced(legs)]

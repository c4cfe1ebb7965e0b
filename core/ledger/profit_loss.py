"""
손익계산서 (Laba Rugi) - 최근 12개월

수익/비용 항목을 달력 월 버킷으로 집계한다.
버킷 키는 naive date의 (년, 월)이므로 타임존에 따라 월이 밀리지 않는다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from core.constants import ReportWindows
from core.ledger.entry import ZERO, LedgerEntry
from core.ledger.types import AccountType
from core.utils.dates import month_key, month_label, shift_month


@dataclass(frozen=True)
class MonthlyProfitLoss:
    """월별 손익 버킷"""

    year: int
    month: int
    revenue: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def profit(self) -> Decimal:
        """순이익 = 수익 - 비용"""
        return self.revenue - self.expense

    @property
    def label(self) -> str:
        """표시 라벨 ("Agu 2026")"""
        return month_label(self.year, self.month)


@dataclass(frozen=True)
class ProfitLossSummary:
    """기간 누계"""

    period_label: str
    total_revenue: Decimal
    total_expense: Decimal
    total_profit: Decimal


def rollup(
    entries: Iterable[LedgerEntry],
    as_of: date,
    months: int = ReportWindows.PROFIT_LOSS_MONTHS,
) -> list[MonthlyProfitLoss]:
    """월별 손익 집계

    Args:
        entries: 장부 항목
        as_of: 기준일 (마지막 버킷 = 이 날짜가 속한 달)
        months: 버킷 수 (기본 12)

    Returns:
        오래된 달부터 정확히 months개의 버킷. 거래 없는 달은 0.
    """
    if months < 1:
        raise ValueError("months는 1 이상이어야 합니다")

    keys = [shift_month(as_of.year, as_of.month, -offset) for offset in range(months - 1, -1, -1)]
    revenue: dict[tuple[int, int], Decimal] = {key: ZERO for key in keys}
    expense: dict[tuple[int, int], Decimal] = {key: ZERO for key in keys}

    for entry in entries:
        key = month_key(entry.date)
        if key not in revenue:
            continue
        if entry.account_type == AccountType.REVENUE:
            revenue[key] += entry.credit - entry.debit
        elif entry.account_type == AccountType.EXPENSE:
            expense[key] += entry.debit - entry.credit

    return [
        MonthlyProfitLoss(year=year, month=month, revenue=revenue[(year, month)], expense=expense[(year, month)])
        for year, month in keys
    ]


def summarize_rollup(buckets: list[MonthlyProfitLoss]) -> ProfitLossSummary:
    """누계 및 기간 라벨 ("Sep 2025 - Agu 2026")"""
    if buckets:
        period_label = f"{buckets[0].label} - {buckets[-1].label}"
    else:
        period_label = ""

    total_revenue = sum((b.revenue for b in buckets), ZERO)
    total_expense = sum((b.expense for b in buckets), ZERO)

    return ProfitLossSummary(
        period_label=period_label,
        total_revenue=total_revenue,
        total_expense=total_expense,
        total_profit=total_revenue - total_expense,
    )

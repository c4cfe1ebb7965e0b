"""
대시보드 지표

카테고리 기준 수익/비용 집계 (계정 유형 기준인 손익계산서와 별개).
- 수익: REVENUE/INVOICE 카테고리 다리의 대변
- 비용: 그 외 다리의 차변 (현금 다리 제외)
- 역분개 다리는 반대 방향 금액을 차감
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from core.constants import LedgerAccounts, ReportWindows
from core.fleet.models import TripLog
from core.ledger.entry import ZERO, LedgerEntry
from core.ledger.types import AccountType, FinancialCategory
from core.utils.dates import month_key, month_label, shift_month, weekday_label

REVENUE_CATEGORIES: frozenset[FinancialCategory] = frozenset({
    FinancialCategory.REVENUE,
    FinancialCategory.INVOICE,
})


@dataclass(frozen=True)
class DashboardStats:
    """대시보드 상단 카드"""

    revenue: Decimal
    expense: Decimal
    trips: int
    distance: Decimal

    @property
    def margin(self) -> Decimal:
        return self.revenue - self.expense


@dataclass(frozen=True)
class DailyPerformance:
    """일별 수익/비용 (최근 7일 차트)"""

    date: date
    day_name: str
    revenue: Decimal
    expense: Decimal


@dataclass(frozen=True)
class MonthlyCashFlow:
    """월별 현금 흐름 (12개월 차트)"""

    year: int
    month: int
    revenue: Decimal
    expense: Decimal

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)


def _is_cash_leg(entry: LedgerEntry) -> bool:
    return entry.account_id == LedgerAccounts.CASH_AND_BANK and entry.account_type == AccountType.ASSET


def classify_entry(entry: LedgerEntry, exclude_capital: bool = False) -> tuple[Decimal, Decimal]:
    """다리 하나의 (수익, 비용) 기여분

    Args:
        entry: 분개 항목
        exclude_capital: True면 CASH 카테고리(자본 투입/인출)를 비용에서 제외
    """
    if _is_cash_leg(entry):
        return ZERO, ZERO

    reversed_leg = entry.reversal_of is not None

    if entry.category in REVENUE_CATEGORIES:
        revenue = entry.credit - entry.debit if reversed_leg else entry.credit
        return revenue, ZERO

    if exclude_capital and entry.category == FinancialCategory.CASH:
        return ZERO, ZERO

    expense = entry.debit - entry.credit if reversed_leg else entry.debit
    return ZERO, expense


def dashboard_stats(entries: Iterable[LedgerEntry], trips: Iterable[TripLog]) -> DashboardStats:
    """대시보드 요약 지표

    Args:
        entries: 장부 항목
        trips: 운행 기록 (거리 합계 및 건수)
    """
    revenue = ZERO
    expense = ZERO
    for entry in entries:
        rev, exp = classify_entry(entry)
        revenue += rev
        expense += exp

    trip_list = list(trips)
    distance = sum((trip.distance for trip in trip_list), ZERO)

    return DashboardStats(
        revenue=revenue,
        expense=expense,
        trips=len(trip_list),
        distance=distance,
    )


def daily_performance(
    entries: Iterable[LedgerEntry],
    today: date,
    days: int = ReportWindows.PERFORMANCE_DAYS,
) -> list[DailyPerformance]:
    """최근 N일 일별 성과 (오래된 날부터)"""
    if days < 1:
        raise ValueError("days는 1 이상이어야 합니다")

    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    revenue: dict[date, Decimal] = {d: ZERO for d in window}
    expense: dict[date, Decimal] = {d: ZERO for d in window}

    for entry in entries:
        if entry.date not in revenue:
            continue
        rev, exp = classify_entry(entry)
        revenue[entry.date] += rev
        expense[entry.date] += exp

    return [
        DailyPerformance(date=d, day_name=weekday_label(d), revenue=revenue[d], expense=expense[d])
        for d in window
    ]


def monthly_cash_flow(
    entries: Iterable[LedgerEntry],
    as_of: date,
    months: int = ReportWindows.PROFIT_LOSS_MONTHS,
) -> list[MonthlyCashFlow]:
    """최근 N개월 현금 흐름 (자본 투입은 비용에서 제외)"""
    if months < 1:
        raise ValueError("months는 1 이상이어야 합니다")

    keys = [shift_month(as_of.year, as_of.month, -offset) for offset in range(months - 1, -1, -1)]
    revenue: dict[tuple[int, int], Decimal] = {key: ZERO for key in keys}
    expense: dict[tuple[int, int], Decimal] = {key: ZERO for key in keys}

    for entry in entries:
        key = month_key(entry.date)
        if key not in revenue:
            continue
        rev, exp = classify_entry(entry, exclude_capital=True)
        revenue[key] += rev
        expense[key] += exp

    return [
        MonthlyCashFlow(year=year, month=month, revenue=revenue[(year, month)], expense=expense[(year, month)])
        for year, month in keys
    ]

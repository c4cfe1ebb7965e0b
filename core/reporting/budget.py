"""
프로젝트 예산 흡수율

realized_cost / cap. 상한이 0 이하면 0%.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from core.constants import Thresholds
from core.types import ProjectStatus

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class ProjectBudget:
    """프로젝트 예산 (보고용, 읽기 전용)"""

    project_id: str
    name: str
    cap: Decimal
    target_revenue: Decimal
    realized_cost: Decimal = ZERO
    realized_revenue: Decimal = ZERO
    start_date: date | None = None
    status: ProjectStatus = ProjectStatus.PLANNING


@dataclass(frozen=True)
class BudgetAbsorption:
    """예산 흡수 현황

    ratio: 실현 비용 / 상한 (1.0 = 100%)
    bar_width: 진행 막대 너비 (%), 100에서 잘림
    """

    project_id: str
    name: str
    ratio: Decimal
    revenue_ratio: Decimal

    @property
    def percent(self) -> Decimal:
        return (self.ratio * HUNDRED).to_integral_value()

    @property
    def bar_width(self) -> Decimal:
        return min(self.ratio * HUNDRED, HUNDRED)

    @property
    def revenue_percent(self) -> Decimal:
        return (self.revenue_ratio * HUNDRED).to_integral_value()

    @property
    def is_over_threshold(self) -> bool:
        """경고 기준(85%) 초과"""
        return self.ratio > Thresholds.BUDGET_WARNING_RATIO


def _safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator <= ZERO:
        return ZERO
    return numerator / denominator


def budget_absorption(project: ProjectBudget) -> BudgetAbsorption:
    """프로젝트 예산 흡수율 계산"""
    return BudgetAbsorption(
        project_id=project.project_id,
        name=project.name,
        ratio=_safe_ratio(project.realized_cost, project.cap),
        revenue_ratio=_safe_ratio(project.realized_revenue, project.target_revenue),
    )

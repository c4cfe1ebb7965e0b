"""
Reporting 모듈

대시보드 지표와 프로젝트 예산 분석
"""

from core.reporting.budget import BudgetAbsorption, ProjectBudget, budget_absorption
from core.reporting.dashboard import (
    DailyPerformance,
    DashboardStats,
    MonthlyCashFlow,
    classify_entry,
    daily_performance,
    dashboard_stats,
    monthly_cash_flow,
)

__all__ = [
    "BudgetAbsorption",
    "DailyPerformance",
    "DashboardStats",
    "MonthlyCashFlow",
    "ProjectBudget",
    "budget_absorption",
    "classify_entry",
    "daily_performance",
    "dashboard_stats",
    "monthly_cash_flow",
]

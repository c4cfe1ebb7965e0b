"""
Dashboard 서비스

대시보드 카드, 차트, 프로젝트 예산 현황 조회
"""

from datetime import date
from typing import Any

from core.constants import ReportWindows
from core.reporting import (
    budget_absorption,
    daily_performance,
    dashboard_stats,
    monthly_cash_flow,
)
from core.session import AppSession


class DashboardService:
    """Dashboard 서비스

    Args:
        session: 애플리케이션 세션
    """

    def __init__(self, session: AppSession):
        self.session = session

    def get_stats(self) -> dict[str, Any]:
        """상단 카드 (수익, 운영비, 마진, 운행 수, 총 거리)"""
        # 운행 기록은 장부 버전과 무관하게 바뀌므로 캐시하지 않음
        stats = dashboard_stats(self.session.ledger.entries, self.session.fleet.trips)
        return {
            "revenue": str(stats.revenue),
            "expense": str(stats.expense),
            "margin": str(stats.margin),
            "trips": stats.trips,
            "distance": str(stats.distance),
        }

    def get_daily_performance(
        self,
        today: date,
        days: int = ReportWindows.PERFORMANCE_DAYS,
    ) -> list[dict[str, Any]]:
        """최근 N일 수익/비용"""
        points = self.session.reports.get(
            "daily_performance",
            self.session.ledger,
            lambda entries: daily_performance(entries, today, days),
            today,
            days,
        )
        return [
            {
                "date": p.date.isoformat(),
                "day_name": p.day_name,
                "revenue": str(p.revenue),
                "expense": str(p.expense),
            }
            for p in points
        ]

    def get_monthly_cash_flow(
        self,
        as_of: date,
        months: int = ReportWindows.PROFIT_LOSS_MONTHS,
    ) -> list[dict[str, Any]]:
        """최근 N개월 현금 흐름"""
        buckets = self.session.reports.get(
            "monthly_cash_flow",
            self.session.ledger,
            lambda entries: monthly_cash_flow(entries, as_of, months),
            as_of,
            months,
        )
        return [
            {
                "label": b.label,
                "revenue": str(b.revenue),
                "expense": str(b.expense),
            }
            for b in buckets
        ]

    def get_budgets(self) -> list[dict[str, Any]]:
        """프로젝트별 예산 흡수율"""
        result = []
        for project in self.session.projects:
            absorption = budget_absorption(project)
            result.append({
                "project_id": project.project_id,
                "name": project.name,
                "status": project.status.value,
                "cap": str(project.cap),
                "realized_cost": str(project.realized_cost),
                "percent": str(absorption.percent),
                "bar_width": str(absorption.bar_width),
                "revenue_percent": str(absorption.revenue_percent),
                "is_over_threshold": absorption.is_over_threshold,
            })
        return result

"""
Dashboard 라우트

요약 지표, 차트 데이터, 프로젝트 예산, AI 감사
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from adapters.interfaces import IAuditClient
from core.constants import ReportWindows
from core.errors import RecordValidationError
from core.reporting import ProjectBudget
from core.session import AppSession
from core.utils.dates import parse_calendar_date
from core.utils.idempotency import make_record_id
from core.utils.timezone import today_wib
from web.dependencies import get_audit_client, require_manager
from web.models.requests import ProjectCreateRequest
from web.models.responses import (
    AuditResponse,
    BudgetAbsorptionResponse,
    DailyPerformanceResponse,
    DashboardStatsResponse,
    MonthlyCashFlowResponse,
)
from web.services.audit_service import AuditService
from web.services.dashboard_service import DashboardService
from web.services.operations_service import to_decimal

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    session: AppSession = Depends(require_manager),
) -> DashboardStatsResponse:
    """상단 카드 (수익, 운영비, 마진, 운행 수, 총 거리)"""
    return DashboardStatsResponse(**DashboardService(session).get_stats())


@router.get("/daily", response_model=list[DailyPerformanceResponse])
async def get_daily(
    as_of: date | None = Query(default=None, description="기준일 (없으면 WIB 오늘)"),
    days: int = Query(default=ReportWindows.PERFORMANCE_DAYS, ge=1, le=31),
    session: AppSession = Depends(require_manager),
) -> list[DailyPerformanceResponse]:
    """최근 N일 성과 차트"""
    service = DashboardService(session)
    return [
        DailyPerformanceResponse(**p)
        for p in service.get_daily_performance(as_of or today_wib(), days)
    ]


@router.get("/monthly", response_model=list[MonthlyCashFlowResponse])
async def get_monthly(
    as_of: date | None = Query(default=None, description="기준일 (없으면 WIB 오늘)"),
    months: int = Query(default=ReportWindows.PROFIT_LOSS_MONTHS, ge=1, le=36),
    session: AppSession = Depends(require_manager),
) -> list[MonthlyCashFlowResponse]:
    """최근 N개월 현금 흐름 차트"""
    service = DashboardService(session)
    return [
        MonthlyCashFlowResponse(**b)
        for b in service.get_monthly_cash_flow(as_of or today_wib(), months)
    ]


@router.get("/budgets", response_model=list[BudgetAbsorptionResponse])
async def get_budgets(
    session: AppSession = Depends(require_manager),
) -> list[BudgetAbsorptionResponse]:
    """프로젝트 예산 흡수율"""
    return [BudgetAbsorptionResponse(**b) for b in DashboardService(session).get_budgets()]


@router.post("/projects", response_model=BudgetAbsorptionResponse, status_code=201)
async def create_project(
    request: ProjectCreateRequest,
    session: AppSession = Depends(require_manager),
) -> BudgetAbsorptionResponse:
    """프로젝트 예산 등록"""
    try:
        project = ProjectBudget(
            project_id=make_record_id("PRJ"),
            name=request.name.strip().upper(),
            cap=to_decimal(request.cap, "cap"),
            target_revenue=to_decimal(request.target_revenue, "target_revenue"),
            realized_cost=to_decimal(request.realized_cost, "realized_cost"),
            realized_revenue=to_decimal(request.realized_revenue, "realized_revenue"),
            start_date=parse_calendar_date(request.start_date) if request.start_date else None,
            status=request.status,
        )
        session.add_project(project)
    except (RecordValidationError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    budgets = DashboardService(session).get_budgets()
    return BudgetAbsorptionResponse(**next(b for b in budgets if b["project_id"] == project.project_id))


@router.post("/audit", response_model=AuditResponse)
async def run_audit(
    session: AppSession = Depends(require_manager),
    client: IAuditClient | None = Depends(get_audit_client),
) -> AuditResponse:
    """AI 감사 실행 (실패 시 기본 결과)"""
    result = await AuditService(client).run_audit(session)
    return AuditResponse(
        status=result.status.value,
        health_score=result.health_score,
        summary=result.summary,
        findings=list(result.findings),
        recommendation=result.recommendation,
    )

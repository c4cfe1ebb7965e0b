"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
금액은 문자열 (Decimal 정밀도 유지)
"""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    company: str = Field(..., description="회사명")
    ledger_version: int = Field(..., description="장부 버전")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


# =========================================================================
# 장부
# =========================================================================


class LedgerEntryResponse(BaseModel):
    """분개 항목 응답"""

    entry_id: str
    date: str
    description: str
    debit: str
    credit: str
    account_id: str
    account_type: str
    category: str
    journal_id: str
    reversal_of: str | None = None


class JournalResponse(BaseModel):
    """분개 응답 (전기 결과 / 분개장 항목)"""

    journal_id: str
    date: str
    description: str
    total_debit: str
    total_credit: str
    legs: list[LedgerEntryResponse]


class StatementRowResponse(BaseModel):
    """예금 거래 내역 행"""

    entry: LedgerEntryResponse
    running_balance: str


class StatementResponse(BaseModel):
    """거래 내역 (최신순) + 요약"""

    account_id: str
    rows: list[StatementRowResponse]
    opening_balance: str
    total_debit: str
    total_credit: str
    ending_balance: str


class AccountBalanceResponse(BaseModel):
    """계정 잔액"""

    account_id: str
    account_type: str
    balance: str


class BalanceSheetResponse(BaseModel):
    """대차대조표 (Neraca)"""

    assets: list[AccountBalanceResponse]
    liabilities: list[AccountBalanceResponse]
    equity: list[AccountBalanceResponse]
    total_assets: str
    total_liabilities: str
    total_equity: str
    total_liabilities_and_equity: str
    total_revenue: str
    total_expense: str
    profit_loss: str
    is_balanced: bool


class TrialBalanceRowResponse(BaseModel):
    """시산표 행"""

    account_id: str
    account_type: str
    total_debit: str
    total_credit: str
    balance: str


class MonthlyProfitLossResponse(BaseModel):
    """월별 손익"""

    label: str
    year: int
    month: int
    revenue: str
    expense: str
    profit: str


class ProfitLossResponse(BaseModel):
    """손익계산서 (최근 12개월)"""

    period_label: str
    months: list[MonthlyProfitLossResponse]
    total_revenue: str
    total_expense: str
    total_profit: str


class CategoryResponse(BaseModel):
    """카테고리 선택지"""

    category: str
    label: str
    default_account: str
    account_type: str


class JournalFormResponse(BaseModel):
    """영수증 스캔으로 채운 분개 입력 폼"""

    flow: str
    date: str
    description: str
    account_id: str
    amount: str
    category: str


# =========================================================================
# 대시보드
# =========================================================================


class DashboardStatsResponse(BaseModel):
    """대시보드 상단 카드"""

    revenue: str
    expense: str
    margin: str
    trips: int
    distance: str


class DailyPerformanceResponse(BaseModel):
    date: str
    day_name: str
    revenue: str
    expense: str


class MonthlyCashFlowResponse(BaseModel):
    label: str
    revenue: str
    expense: str


class BudgetAbsorptionResponse(BaseModel):
    """프로젝트 예산 흡수율"""

    project_id: str
    name: str
    status: str
    cap: str
    realized_cost: str
    percent: str
    bar_width: str
    revenue_percent: str
    is_over_threshold: bool


class AuditResponse(BaseModel):
    """AI 감사 결과"""

    status: str
    health_score: int
    summary: str
    findings: list[str]
    recommendation: str


# =========================================================================
# 운영 / 인사 / 세션
# =========================================================================


class VehicleResponse(BaseModel):
    vehicle_id: str
    plate_number: str
    model: str
    vehicle_type: str
    status: str
    gps_id: str | None = None


class TripResponse(BaseModel):
    trip_id: str
    vehicle_id: str
    driver_id: str
    route: str
    tonnage: str
    start_time: datetime
    end_time: datetime | None = None
    km_start: str
    km_end: str | None = None
    distance: str
    cargo_type: str | None = None
    hauling_location: str | None = None


class FuelLogResponse(BaseModel):
    fuel_id: str
    trip_id: str
    liters: str
    cost: str
    date: str
    receipt_url: str | None = None


class FuelEfficiencyResponse(BaseModel):
    """운행 연비 (l_per_100km는 거리 0이면 null)"""

    trip_id: str
    liters: str
    distance: str
    l_per_100km: str | None
    is_excessive: bool


class ManifestAnalysisResponse(BaseModel):
    trip_id: str
    efficiency: FuelEfficiencyResponse
    analysis: str


class UserResponse(BaseModel):
    user_id: str
    name: str
    role: str
    email: str


class AttendanceResponse(BaseModel):
    record_id: str
    user_id: str
    check_in: datetime
    lat: float
    lng: float
    is_manual: bool


class CompanyResponse(BaseModel):
    name: str
    address: str
    registration_id: str
    logo: str | None = None


class NavItemResponse(BaseModel):
    tab: str
    label: str


class SessionResponse(BaseModel):
    """현재 세션 (사용자, 메뉴, 활성 탭)"""

    user: UserResponse
    active_tab: str
    navigation: list[NavItemResponse]
    is_manager: bool
    is_owner: bool
    can_edit_settings: bool

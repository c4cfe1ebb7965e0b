"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    CheckInRequest,
    CompanyUpdateRequest,
    FuelLogRequest,
    JournalPostRequest,
    JournalReverseRequest,
    ProjectCreateRequest,
    ReceiptScanRequest,
    RoleSwitchRequest,
    TripCloseRequest,
    TripStartRequest,
    UserCreateRequest,
    VehicleCreateRequest,
)
from web.models.responses import (
    AuditResponse,
    BalanceSheetResponse,
    DashboardStatsResponse,
    HealthResponse,
    JournalResponse,
    LedgerEntryResponse,
    ProfitLossResponse,
    SessionResponse,
    StatementResponse,
)

__all__ = [
    # Requests
    "CheckInRequest",
    "CompanyUpdateRequest",
    "FuelLogRequest",
    "JournalPostRequest",
    "JournalReverseRequest",
    "ProjectCreateRequest",
    "ReceiptScanRequest",
    "RoleSwitchRequest",
    "TripCloseRequest",
    "TripStartRequest",
    "UserCreateRequest",
    "VehicleCreateRequest",
    # Responses
    "AuditResponse",
    "BalanceSheetResponse",
    "DashboardStatsResponse",
    "HealthResponse",
    "JournalResponse",
    "LedgerEntryResponse",
    "ProfitLossResponse",
    "SessionResponse",
    "StatementResponse",
]

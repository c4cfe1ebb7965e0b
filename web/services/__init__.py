"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.audit_service import AuditService, prefill_from_receipt
from web.services.dashboard_service import DashboardService
from web.services.ledger_service import LedgerService
from web.services.operations_service import OperationsService

__all__ = [
    "AuditService",
    "DashboardService",
    "LedgerService",
    "OperationsService",
    "prefill_from_receipt",
]

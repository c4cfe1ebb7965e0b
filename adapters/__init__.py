"""
어댑터 레이어

외부 서비스(AI 감사, 영수증 OCR)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    AuditQuotaError,
    IAuditClient,
    IReceiptScanner,
)
from adapters.models import (
    AuditResult,
    ReceiptScan,
)

__all__ = [
    # Interfaces
    "IAuditClient",
    "IReceiptScanner",
    "AuditQuotaError",
    # Models
    "AuditResult",
    "ReceiptScan",
]

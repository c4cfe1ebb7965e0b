"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.mock import MockAuditClient, MockReceiptScanner
from adapters.models import AuditResult, ReceiptScan
from core.types import AuditStatus


@pytest.fixture
def sample_audit_result() -> AuditResult:
    """샘플 감사 결과"""
    return AuditResult(
        status=AuditStatus.WARNING,
        health_score=72,
        summary="Biaya BBM naik 30% dibanding bulan lalu",
        findings=["BBM unit B 9123 XYZ di atas rata-rata"],
        recommendation="Periksa kebocoran tangki",
    )


@pytest.fixture
def sample_receipt() -> ReceiptScan:
    """샘플 영수증 OCR 결과"""
    return ReceiptScan(
        amount=Decimal("1250000"),
        date=date(2026, 2, 3),
        vendor="SPBU 34.12345",
        category="BBM",
    )


@pytest.fixture
def audit_client(sample_audit_result: AuditResult) -> MockAuditClient:
    """Mock 감사 클라이언트"""
    return MockAuditClient(result=sample_audit_result)


@pytest.fixture
def receipt_scanner(sample_receipt: ReceiptScan) -> MockReceiptScanner:
    """Mock 영수증 스캐너"""
    return MockReceiptScanner(scan_result=sample_receipt)

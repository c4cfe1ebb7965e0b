"""
Mock AI 클라이언트

테스트용 Mock 감사 클라이언트 / 영수증 스캐너.
IAuditClient, IReceiptScanner Protocol 준수.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from adapters.interfaces import AuditQuotaError
from adapters.models import AuditResult, ReceiptScan
from core.types import AuditStatus


@dataclass
class CallRecord:
    """호출 기록"""

    method: str
    payload: dict[str, Any]
    timestamp: datetime


class _FailureMixin:
    """실패 시뮬레이션 공통 처리"""

    should_fail: bool
    quota_exceeded: bool
    calls: list[CallRecord]

    def _record(self, method: str, payload: dict[str, Any]) -> None:
        self.calls.append(
            CallRecord(method=method, payload=payload, timestamp=datetime.now(timezone.utc))
        )
        if self.quota_exceeded:
            raise AuditQuotaError("429 RESOURCE_EXHAUSTED: quota exceeded")
        if self.should_fail:
            raise ConnectionError("Mock AI service unavailable")


class MockAuditClient(_FailureMixin):
    """Mock 감사 클라이언트

    사용 예시:
    ```python
    client = MockAuditClient()
    result = await client.analyze([], [], {}, [])
    assert client.calls[0].method == "analyze"

    client.quota_exceeded = True  # 다음 호출은 AuditQuotaError
    ```
    """

    def __init__(
        self,
        result: AuditResult | None = None,
        should_fail: bool = False,
        quota_exceeded: bool = False,
    ):
        """
        Args:
            result: 반환할 감사 결과 (None이면 AMAN/95)
            should_fail: True면 ConnectionError 발생
            quota_exceeded: True면 AuditQuotaError 발생
        """
        self.result = result or AuditResult(
            status=AuditStatus.SAFE,
            health_score=95,
            summary="Mock audit",
            findings=[],
            recommendation="-",
        )
        self.manifest_text = "Mock manifest analysis"
        self.should_fail = should_fail
        self.quota_exceeded = quota_exceeded
        self.calls: list[CallRecord] = []

    async def analyze(
        self,
        ledger_sample: list[dict[str, Any]],
        trip_sample: list[dict[str, Any]],
        stats: dict[str, Any],
        projects: list[dict[str, Any]],
    ) -> AuditResult:
        self._record(
            "analyze",
            {
                "ledger_sample": ledger_sample,
                "trip_sample": trip_sample,
                "stats": stats,
                "projects": projects,
            },
        )
        return self.result

    async def analyze_manifest(
        self,
        trip: dict[str, Any],
        fuel_logs: list[dict[str, Any]],
    ) -> str:
        self._record("analyze_manifest", {"trip": trip, "fuel_logs": fuel_logs})
        return self.manifest_text


class MockReceiptScanner(_FailureMixin):
    """Mock 영수증 스캐너

    scan 호출 시 미리 지정한 ReceiptScan 반환.
    """

    def __init__(
        self,
        scan_result: ReceiptScan | None = None,
        should_fail: bool = False,
        quota_exceeded: bool = False,
    ):
        self.scan_result = scan_result or ReceiptScan(
            amount=Decimal("0"),
            vendor=None,
            category="BIAYA_LAIN",
        )
        self.should_fail = should_fail
        self.quota_exceeded = quota_exceeded
        self.calls: list[CallRecord] = []

    async def scan(self, image_b64: str) -> ReceiptScan:
        self._record("scan", {"size": len(image_b64)})
        return self.scan_result

"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable

from adapters.models import AuditResult, ReceiptScan


class AuditQuotaError(Exception):
    """AI 서비스 사용 한도 초과 (HTTP 429 / RESOURCE_EXHAUSTED)"""

    pass


@runtime_checkable
class IAuditClient(Protocol):
    """AI 감사 클라이언트 인터페이스

    사용 한도 초과 시 AuditQuotaError, 그 외 실패는 임의 예외.
    """

    async def analyze(
        self,
        ledger_sample: list[dict[str, Any]],
        trip_sample: list[dict[str, Any]],
        stats: dict[str, Any],
        projects: list[dict[str, Any]],
    ) -> AuditResult:
        """재무/운영 감사

        Args:
            ledger_sample: 최근 분개 항목
            trip_sample: 최근 운행 기록
            stats: 대시보드 지표
            projects: 프로젝트 예산

        Returns:
            AuditResult
        """
        ...

    async def analyze_manifest(
        self,
        trip: dict[str, Any],
        fuel_logs: list[dict[str, Any]],
    ) -> str:
        """운행 기록(Manifest) 분석 문구"""
        ...


@runtime_checkable
class IReceiptScanner(Protocol):
    """영수증 OCR 인터페이스"""

    async def scan(self, image_b64: str) -> ReceiptScan:
        """base64 이미지에서 날짜/금액/상호/카테고리 추출"""
        ...

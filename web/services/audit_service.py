"""
AI 감사 서비스

외부 AI 협력자 호출 및 실패 시 안전한 기본값으로 강등.
장부 계산은 AI 결과와 무관하게 계속 동작한다.
"""

import logging
from datetime import date
from typing import Any

from adapters.interfaces import AuditQuotaError, IAuditClient
from adapters.models import AuditResult, ReceiptScan
from core.constants import ReportWindows
from core.fleet import FuelLog, TripLog, fuel_efficiency
from core.ledger import FinancialCategory
from core.session import AppSession
from core.types import AuditStatus, FlowDirection
from web.services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

UNKNOWN_VENDOR = "UNKNOWN VENDOR"

QUOTA_RESULT = AuditResult(
    status=AuditStatus.WARNING,
    health_score=100,
    summary="Audit AI terbatas: kuota harian API telah habis (rate limit).",
    findings=["Layanan AI menolak permintaan (429 / kuota habis)"],
    recommendation="Tunggu beberapa saat lalu jalankan audit ulang.",
)

STANDARD_MODE_RESULT = AuditResult(
    status=AuditStatus.SAFE,
    health_score=100,
    summary="Audit normal (mode standar). Layanan AI sedang tidak tersedia.",
    findings=["Koneksi AI terputus atau time-out"],
    recommendation="Periksa koneksi lalu jalankan audit ulang untuk analisis mendalam.",
)

MANIFEST_FALLBACK = "Analisis tertunda. Data operasional tetap tercatat dengan aman."


def _trip_to_payload(trip: TripLog) -> dict[str, Any]:
    return {
        "trip_id": trip.trip_id,
        "vehicle_id": trip.vehicle_id,
        "route": trip.route,
        "tonnage": str(trip.tonnage),
        "km_start": str(trip.km_start),
        "km_end": str(trip.km_end) if trip.km_end is not None else None,
        "cargo_type": trip.cargo_type,
    }


def _fuel_to_payload(log: FuelLog) -> dict[str, Any]:
    return {
        "liters": str(log.liters),
        "cost": str(log.cost),
        "date": log.date.isoformat(),
    }


class AuditService:
    """AI 감사 서비스

    Args:
        client: 감사 클라이언트 (None이면 항상 표준 모드 결과)
    """

    def __init__(self, client: IAuditClient | None):
        self.client = client

    async def run_audit(self, session: AppSession) -> AuditResult:
        """재무/운영 감사 실행

        최근 분개 15건, 최근 운행 10건, 대시보드 지표, 프로젝트 예산을 전달.
        실패해도 예외를 올리지 않고 기본 결과 반환.
        """
        if self.client is None:
            logger.info("감사 클라이언트 미설정, 표준 모드 결과 반환")
            return STANDARD_MODE_RESULT

        # 최근 추가된 다리부터
        entries = session.ledger.entries
        ledger_sample = [e.to_dict() for e in reversed(entries[-ReportWindows.AUDIT_LEDGER_SAMPLE:])]
        trip_sample = [_trip_to_payload(t) for t in session.fleet.trips[:ReportWindows.AUDIT_TRIP_SAMPLE]]
        stats = DashboardService(session).get_stats()
        projects = [
            {
                "name": p.name,
                "cap": str(p.cap),
                "target_revenue": str(p.target_revenue),
                "realized_cost": str(p.realized_cost),
                "realized_revenue": str(p.realized_revenue),
                "status": p.status.value,
            }
            for p in session.projects
        ]

        try:
            result = await self.client.analyze(ledger_sample, trip_sample, stats, projects)
        except AuditQuotaError as e:
            logger.warning(f"AI 감사 한도 초과: {e}")
            return QUOTA_RESULT
        except Exception as e:
            logger.error(f"AI 감사 실패: {e}")
            return STANDARD_MODE_RESULT

        logger.info(f"AI 감사 완료: {result.status.value} score={result.health_score}")
        return result

    async def analyze_manifest(self, trip: TripLog, fuel_logs: list[FuelLog]) -> str:
        """운행 기록 분석 문구 (실패 시 대체 문구)"""
        if self.client is None:
            return MANIFEST_FALLBACK

        efficiency = fuel_efficiency(trip, fuel_logs)
        payload = _trip_to_payload(trip)
        payload["distance"] = str(efficiency.distance)
        payload["l_per_100km"] = str(efficiency.l_per_100km) if efficiency.l_per_100km is not None else None

        try:
            return await self.client.analyze_manifest(payload, [_fuel_to_payload(f) for f in fuel_logs])
        except Exception as e:
            logger.warning(f"Manifest 분석 실패: {trip.trip_id} {e}")
            return MANIFEST_FALLBACK


def prefill_from_receipt(scan: ReceiptScan, today: date) -> dict[str, Any]:
    """영수증 스캔 결과로 분개 입력 폼 채우기

    영수증은 지출(OUT)로 간주. 알 수 없는 카테고리는 BIAYA_LAIN.
    계정이 빈 문자열이면 전기 시 카테고리 기본 계정 사용.
    """
    vendor = (scan.vendor or "").strip()

    try:
        category = FinancialCategory(scan.category or FinancialCategory.BIAYA_LAIN.value)
    except ValueError:
        logger.info(f"알 수 없는 영수증 카테고리, BIAYA_LAIN 사용: {scan.category}")
        category = FinancialCategory.BIAYA_LAIN

    return {
        "flow": FlowDirection.OUT.value,
        "date": (scan.date or today).isoformat(),
        "description": f"INVOICE: {vendor or UNKNOWN_VENDOR}",
        "account_id": vendor.upper(),
        "amount": str(scan.amount),
        "category": category.value,
    }

"""
어댑터 공통 데이터 모델

AI 감사 / 영수증 OCR 응답을 표준화한 모델.
금액은 Decimal 타입 사용.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from core.types import AuditStatus


@dataclass(frozen=True)
class AuditResult:
    """감사 결과

    Attributes:
        status: AMAN / PERINGATAN / KRITIS
        health_score: 0~100
        summary: 요약
        findings: 발견 사항 목록
        recommendation: 권고 사항
    """

    status: AuditStatus
    health_score: int
    summary: str
    findings: list[str] = field(default_factory=list)
    recommendation: str = ""


@dataclass(frozen=True)
class ReceiptScan:
    """영수증 OCR 결과

    Attributes:
        date: 영수증 날짜 (인식 실패 시 None)
        amount: 금액
        vendor: 상호 (인식 실패 시 None)
        category: 카테고리 문자열 (BBM, MAINTENANCE, BIAYA_LAIN 중 하나 기대)
    """

    amount: Decimal
    date: date | None = None
    vendor: str | None = None
    category: str | None = None

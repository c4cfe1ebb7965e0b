"""
인사 데이터 구조
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.types import UserRole


@dataclass(frozen=True)
class User:
    """직원 / 시스템 사용자"""

    user_id: str
    name: str
    role: UserRole
    email: str


@dataclass(frozen=True)
class AttendanceRecord:
    """출근 기록

    수동 입력이면 lat/lng = 0.
    check_in은 타임존 없는 현지 시각일 수 있음 (수동 입력).
    """

    record_id: str
    user_id: str
    check_in: datetime
    lat: float = 0.0
    lng: float = 0.0
    check_out: datetime | None = None

    @property
    def is_manual(self) -> bool:
        return self.lat == 0.0 and self.lng == 0.0

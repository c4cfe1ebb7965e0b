"""
직원 명부 및 출근 기록
"""

from __future__ import annotations

import logging
from datetime import datetime

from core.errors import AccessDeniedError, RecordNotFoundError, RecordValidationError
from core.hr.models import AttendanceRecord, User
from core.types import UserRole
from core.utils.idempotency import make_record_id
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class Roster:
    """직원 명부 (In-memory)

    최초 사용자 목록은 비어 있을 수 없다 (현재 사용자 선택에 필요).
    """

    def __init__(self, users: list[User]) -> None:
        if not users:
            raise RecordValidationError("사용자가 최소 1명 필요합니다")
        self._users: list[User] = list(users)
        self._attendance: list[AttendanceRecord] = []

    @property
    def users(self) -> list[User]:
        return list(self._users)

    def get_user(self, user_id: str) -> User:
        for user in self._users:
            if user.user_id == user_id:
                return user
        raise RecordNotFoundError(f"사용자를 찾을 수 없습니다: {user_id}")

    def first_with_role(self, role: UserRole) -> User:
        """해당 역할의 첫 사용자 (없으면 첫 사용자)"""
        for user in self._users:
            if user.role == role:
                return user
        return self._users[0]

    def add_user(self, name: str, email: str, role: UserRole | str = UserRole.OPERATOR) -> User:
        """직원 추가

        Raises:
            RecordValidationError: 이름/이메일 누락 또는 잘못된 역할
        """
        name = name.strip().upper()
        email = email.strip().lower()
        if not name or not email:
            raise RecordValidationError("이름과 이메일은 필수입니다")
        try:
            role = UserRole(role)
        except ValueError as e:
            raise RecordValidationError(str(e)) from e

        user = User(user_id=make_record_id("U"), name=name, role=role, email=email)
        self._users.append(user)
        logger.info(f"직원 추가: {user.user_id} {user.name} ({role.value})")
        return user

    def remove_user(self, user_id: str, current_user_id: str) -> User:
        """직원 삭제

        Raises:
            AccessDeniedError: 자기 자신을 삭제하려는 경우
            RecordNotFoundError: 존재하지 않는 사용자
        """
        if user_id == current_user_id:
            raise AccessDeniedError("자신의 계정은 삭제할 수 없습니다")
        user = self.get_user(user_id)
        self._users.remove(user)
        logger.info(f"직원 삭제: {user_id}")
        return user

    # =========================================================================
    # 출근
    # =========================================================================

    def check_in(
        self,
        user_id: str,
        at: datetime | None = None,
        lat: float | None = None,
        lng: float | None = None,
    ) -> AttendanceRecord:
        """출근 기록

        좌표가 있으면 GPS 기록, 없으면 수동 기록 (lat/lng = 0).

        Args:
            user_id: 출근하는 사용자
            at: 출근 시각 (None이면 현재 UTC)
            lat, lng: 호출자가 제공한 좌표
        """
        self.get_user(user_id)

        if (lat is None) != (lng is None):
            raise RecordValidationError("위도와 경도는 함께 입력해야 합니다")

        gps = lat is not None
        record = AttendanceRecord(
            record_id=make_record_id("ATT-GPS" if gps else "ATT-MAN"),
            user_id=user_id,
            check_in=at or now_utc(),
            lat=lat if gps else 0.0,
            lng=lng if gps else 0.0,
        )
        self._attendance.append(record)
        logger.info(f"출근 기록: {record.record_id} user={user_id}")
        return record

    def attendance_of(self, user_id: str) -> list[AttendanceRecord]:
        """사용자의 출근 기록 (최신 입력순)"""
        return [record for record in reversed(self._attendance) if record.user_id == user_id]

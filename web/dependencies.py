"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

import logging
from collections.abc import Callable

from fastapi import Depends, HTTPException

from adapters.interfaces import IAuditClient, IReceiptScanner
from core.access import MANAGER_ROLES
from core.config.loader import SettingsLoadError, default_company, get_settings
from core.session import AppSession
from core.types import UserRole

logger = logging.getLogger(__name__)


# =========================================================================
# AppSession (프로세스 전역)
# =========================================================================

_session: AppSession | None = None


def set_session(session: AppSession | None) -> None:
    """AppSession 설정

    앱 시작 시 또는 테스트에서 호출하여 전역 인스턴스 설정.
    """
    global _session
    _session = session


def get_session() -> AppSession:
    """AppSession 반환 (없으면 settings.yaml 회사 정보로 생성)"""
    global _session
    if _session is None:
        try:
            company = get_settings().company
        except SettingsLoadError as e:
            logger.warning(f"설정 로드 실패, 기본 회사 정보 사용: {e}")
            company = default_company()
        _session = AppSession(company=company)
        logger.info(f"AppSession 생성: {company.name}")
    return _session


# =========================================================================
# AI 협력자 (선택)
# =========================================================================

_audit_client: IAuditClient | None = None
_receipt_scanner: IReceiptScanner | None = None


def set_audit_client(client: IAuditClient | None) -> None:
    global _audit_client
    _audit_client = client


def get_audit_client() -> IAuditClient | None:
    """감사 클라이언트 반환 (미설정 시 None, 표준 모드로 동작)"""
    return _audit_client


def set_receipt_scanner(scanner: IReceiptScanner | None) -> None:
    global _receipt_scanner
    _receipt_scanner = scanner


def get_receipt_scanner() -> IReceiptScanner | None:
    return _receipt_scanner


# =========================================================================
# 역할 검사
# =========================================================================


def require_roles(*roles: UserRole) -> Callable[[AppSession], AppSession]:
    """현재 사용자 역할 검사 의존성 생성

    사용 예시:
    ```python
    @router.post("/x")
    async def x(session: AppSession = Depends(require_roles(UserRole.OWNER))):
        ...
    ```

    Raises:
        HTTPException: 역할 불일치 시 403
    """
    allowed = frozenset(roles)

    def dependency(session: AppSession = Depends(get_session)) -> AppSession:
        if session.role not in allowed:
            raise HTTPException(
                status_code=403,
                detail=f"권한이 없습니다: {session.role.value}",
            )
        return session

    return dependency


# 재무/설정 화면 (PEMILIK, ADMIN, DEVELOPER)
require_manager = require_roles(*MANAGER_ROLES)

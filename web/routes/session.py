"""
Session 라우트

현재 사용자, 메뉴 구성, 역할 시뮬레이션 전환
"""

from fastapi import APIRouter, Depends

from core.access import can_edit_settings, is_manager, is_owner, nav_items_for
from core.session import AppSession
from web.dependencies import get_session
from web.models.requests import RoleSwitchRequest
from web.models.responses import NavItemResponse, SessionResponse
from web.services.operations_service import user_to_dict

router = APIRouter(prefix="/api/session", tags=["Session"])


def _session_response(session: AppSession) -> SessionResponse:
    role = session.role
    return SessionResponse(
        user=user_to_dict(session.current_user),
        active_tab=session.active_tab.value,
        navigation=[NavItemResponse(tab=item.tab.value, label=item.label) for item in nav_items_for(role)],
        is_manager=is_manager(role),
        is_owner=is_owner(role),
        can_edit_settings=can_edit_settings(role),
    )


@router.get("", response_model=SessionResponse)
async def get_current_session(session: AppSession = Depends(get_session)) -> SessionResponse:
    """현재 세션 조회"""
    return _session_response(session)


@router.post("/role", response_model=SessionResponse)
async def switch_role(
    request: RoleSwitchRequest,
    session: AppSession = Depends(get_session),
) -> SessionResponse:
    """역할 전환 (해당 역할의 첫 사용자, 없으면 첫 사용자)"""
    session.switch_role(request.role)
    return _session_response(session)

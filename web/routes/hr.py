"""
HR 라우트

직원 관리 (PEMILIK / DEVELOPER) 및 출근 기록 (전체 역할)
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from core.access import OWNER_ROLES
from core.errors import AccessDeniedError, RecordNotFoundError, RecordValidationError
from core.session import AppSession
from web.dependencies import get_session, require_roles
from web.models.requests import CheckInRequest, UserCreateRequest
from web.models.responses import AttendanceResponse, UserResponse
from web.services.operations_service import attendance_to_dict, user_to_dict

router = APIRouter(prefix="/api/hr", tags=["HR"])

require_owner = require_roles(*OWNER_ROLES)


@router.get("/users", response_model=list[UserResponse])
async def get_users(session: AppSession = Depends(get_session)) -> list[UserResponse]:
    """직원 목록"""
    return [UserResponse(**user_to_dict(u)) for u in session.roster.users]


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(
    request: UserCreateRequest,
    session: AppSession = Depends(require_owner),
) -> UserResponse:
    """직원 추가"""
    try:
        user = session.roster.add_user(request.name, request.email, request.role)
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return UserResponse(**user_to_dict(user))


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: str = Path(..., description="직원 ID"),
    session: AppSession = Depends(require_owner),
) -> dict[str, str]:
    """직원 삭제 (자기 자신은 불가)"""
    try:
        session.roster.remove_user(user_id, session.current_user.user_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"User deleted: {user_id}"}


@router.post("/attendance", response_model=AttendanceResponse, status_code=201)
async def check_in(
    request: CheckInRequest,
    session: AppSession = Depends(get_session),
) -> AttendanceResponse:
    """현재 사용자 출근 기록

    좌표가 있으면 GPS 출근, 없으면 수동 출근 (lat/lng = 0).
    """
    try:
        record = session.roster.check_in(
            session.current_user.user_id,
            at=request.check_in,
            lat=request.lat,
            lng=request.lng,
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return AttendanceResponse(**attendance_to_dict(record))


@router.get("/attendance", response_model=list[AttendanceResponse])
async def get_my_attendance(session: AppSession = Depends(get_session)) -> list[AttendanceResponse]:
    """현재 사용자 출근 기록 (최신순)"""
    records = session.roster.attendance_of(session.current_user.user_id)
    return [AttendanceResponse(**attendance_to_dict(r)) for r in records]

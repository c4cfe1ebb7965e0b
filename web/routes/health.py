"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인
"""

from fastapi import APIRouter, Depends

from core.session import AppSession
from core.utils.timezone import now_utc
from web.dependencies import get_session
from web.models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(session: AppSession = Depends(get_session)) -> HealthResponse:
    """서버 상태 확인

    Returns:
        HealthResponse: status, 회사명, 장부 버전
    """
    return HealthResponse(
        status="ok",
        company=session.company.name,
        ledger_version=session.ledger.version,
        timestamp=now_utc(),
    )

"""
Settings 라우트

회사 정보 (보고서 머리글) 조회 및 변경
"""

from fastapi import APIRouter, Depends, HTTPException

from core.config.loader import CompanySettings
from core.errors import RecordValidationError
from core.session import AppSession
from web.dependencies import require_manager
from web.models.requests import CompanyUpdateRequest
from web.models.responses import CompanyResponse

router = APIRouter(prefix="/api/settings", tags=["Settings"])


def _company_response(company: CompanySettings) -> CompanyResponse:
    return CompanyResponse(
        name=company.name,
        address=company.address,
        registration_id=company.registration_id,
        logo=company.logo,
    )


@router.get("/company", response_model=CompanyResponse)
async def get_company(session: AppSession = Depends(require_manager)) -> CompanyResponse:
    """회사 정보 조회"""
    return _company_response(session.company)


@router.put("/company", response_model=CompanyResponse)
async def update_company(
    request: CompanyUpdateRequest,
    session: AppSession = Depends(require_manager),
) -> CompanyResponse:
    """회사 정보 변경 (지정한 필드만)"""
    try:
        company = session.update_company(
            name=request.name,
            address=request.address,
            registration_id=request.registration_id,
            logo=request.logo,
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _company_response(company)

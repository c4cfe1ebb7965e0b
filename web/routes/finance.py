"""
재무 API 라우트

분개 전기/역분개, 거래 내역, 분개장, 재무상태표, 시산표, 손익계산서.
PEMILIK / ADMIN / DEVELOPER 전용.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from adapters.interfaces import AuditQuotaError, IReceiptScanner
from core.constants import LedgerAccounts, ReportWindows
from core.ledger import (
    JournalAlreadyReversedError,
    JournalNotFoundError,
    LedgerValidationError,
)
from core.session import AppSession
from core.types import FlowDirection
from core.utils.timezone import today_wib
from web.dependencies import get_receipt_scanner, require_manager
from web.models.requests import JournalPostRequest, JournalReverseRequest, ReceiptScanRequest
from web.models.responses import (
    BalanceSheetResponse,
    CategoryResponse,
    JournalFormResponse,
    JournalResponse,
    ProfitLossResponse,
    StatementResponse,
    TrialBalanceRowResponse,
)
from web.services.audit_service import prefill_from_receipt
from web.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/finance", tags=["Finance"])


@router.post("/journals", response_model=JournalResponse, status_code=201)
async def post_journal(
    request: JournalPostRequest,
    session: AppSession = Depends(require_manager),
) -> JournalResponse:
    """분개 전기 (입금/출금 1건 → 2다리 분개)"""
    service = LedgerService(session)

    try:
        journal = service.post_entry(
            flow=request.flow,
            entry_date=request.date,
            description=request.description,
            amount=request.amount,
            category=request.category,
            account_id=request.account_id,
            account_type=request.account_type,
        )
    except LedgerValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return JournalResponse(**journal)


@router.post("/journals/{journal_id}/reverse", response_model=JournalResponse, status_code=201)
async def reverse_journal(
    request: JournalReverseRequest,
    journal_id: str = Path(..., description="정정할 분개 ID"),
    session: AppSession = Depends(require_manager),
) -> JournalResponse:
    """역분개 (보정 분개) 전기"""
    service = LedgerService(session)

    try:
        journal = service.reverse(journal_id, entry_date=request.date, description=request.description)
    except JournalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except JournalAlreadyReversedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except LedgerValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return JournalResponse(**journal)


@router.get("/journals", response_model=list[JournalResponse])
async def get_journals(
    limit: int | None = Query(default=None, ge=1, le=1000),
    session: AppSession = Depends(require_manager),
) -> list[JournalResponse]:
    """일반 분개장 (Jurnal Umum)"""
    service = LedgerService(session)
    return [JournalResponse(**j) for j in service.get_journals(limit)]


@router.get("/statement", response_model=StatementResponse)
async def get_statement(
    account_id: str = Query(default=LedgerAccounts.CASH_AND_BANK),
    session: AppSession = Depends(require_manager),
) -> StatementResponse:
    """계정 거래 내역 (Rekening Koran)"""
    service = LedgerService(session)
    return StatementResponse(**service.get_statement(account_id))


@router.get("/balance-sheet", response_model=BalanceSheetResponse)
async def get_balance_sheet(
    session: AppSession = Depends(require_manager),
) -> BalanceSheetResponse:
    """재무상태표 (Neraca)"""
    service = LedgerService(session)
    return BalanceSheetResponse(**service.get_balance_sheet())


@router.get("/trial-balance", response_model=list[TrialBalanceRowResponse])
async def get_trial_balance(
    session: AppSession = Depends(require_manager),
) -> list[TrialBalanceRowResponse]:
    """시산표"""
    service = LedgerService(session)
    return [TrialBalanceRowResponse(**row) for row in service.get_trial_balance()]


@router.get("/profit-loss", response_model=ProfitLossResponse)
async def get_profit_loss(
    as_of: date | None = Query(default=None, description="기준일 (없으면 WIB 오늘)"),
    months: int = Query(default=ReportWindows.PROFIT_LOSS_MONTHS, ge=1, le=36),
    session: AppSession = Depends(require_manager),
) -> ProfitLossResponse:
    """손익계산서 (Laba Rugi)"""
    service = LedgerService(session)
    return ProfitLossResponse(**service.get_profit_loss(as_of or today_wib(), months))


@router.get("/categories", response_model=list[CategoryResponse])
async def get_categories(
    flow: FlowDirection | None = Query(default=None),
    session: AppSession = Depends(require_manager),
) -> list[CategoryResponse]:
    """카테고리 선택지 (flow 지정 시 호환 카테고리만)"""
    return [CategoryResponse(**c) for c in LedgerService.get_categories(flow)]


@router.post("/receipts/scan", response_model=JournalFormResponse)
async def scan_receipt(
    request: ReceiptScanRequest,
    session: AppSession = Depends(require_manager),
    scanner: IReceiptScanner | None = Depends(get_receipt_scanner),
) -> JournalFormResponse:
    """영수증 스캔 → 분개 입력 폼 채우기 (전기는 하지 않음)"""
    if scanner is None:
        raise HTTPException(status_code=503, detail="영수증 스캔 기능이 비활성화되어 있습니다")

    try:
        scan = await scanner.scan(request.image_b64)
    except AuditQuotaError as e:
        logger.warning(f"영수증 스캔 한도 초과: {e}")
        raise HTTPException(status_code=429, detail="AI 사용 한도를 초과했습니다")
    except Exception as e:
        logger.error(f"영수증 스캔 실패: {e}")
        raise HTTPException(status_code=502, detail="문서를 처리하지 못했습니다. 이미지를 확인하세요")

    return JournalFormResponse(**prefill_from_receipt(scan, today_wib()))

"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from core.config.loader import SettingsLoadError, default_company, get_settings
from core.logging import parse_log_level, setup_logging
from core.session import AppSession

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.dependencies import get_session, set_session
from web.routes import (
    dashboard,
    finance,
    health,
    hr,
    operations,
    session,
    settings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리

    시작 시 settings.yaml의 회사 정보로 AppSession 생성.
    """
    try:
        app_settings = get_settings()
    except SettingsLoadError as e:
        logger.warning(f"Web: 설정 로드 실패, 기본 회사 정보 사용: {e}")
        company = default_company()
    else:
        company = app_settings.company
        try:
            logging.getLogger().setLevel(parse_log_level(app_settings.log_level))
        except ValueError as e:
            logger.warning(f"Web: 잘못된 로그 레벨 무시: {e}")

    set_session(AppSession(company=company))
    logger.info(f"Web: AppSession 초기화 완료 ({company.name})")

    yield

    ledger_size = len(get_session().ledger)
    set_session(None)
    logger.info(f"Web: 종료 (분개 항목 {ledger_size}건)")


app = FastAPI(
    title="Fleetbooks API",
    description="운송 회사 운영 / 복식부기 대시보드 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(session.router)
app.include_router(dashboard.router)
app.include_router(finance.router)
app.include_router(operations.router)
app.include_router(hr.router)
app.include_router(settings.router)


@app.get("/", include_in_schema=False)
async def home():
    """홈페이지 (API 문서로 리다이렉트)"""
    return RedirectResponse(url="/docs")

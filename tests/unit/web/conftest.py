"""
Web 테스트 픽스처

전역 AppSession / AI 협력자를 테스트마다 새로 주입하고 TestClient 제공.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from core.config.loader import CompanySettings
from core.hr import User
from core.session import DEFAULT_ADMIN, AppSession
from core.types import UserRole
from web.app import app
from web.dependencies import set_audit_client, set_receipt_scanner, set_session

ADMIN = User("adm-02", "RINA", UserRole.ADMIN, "rina@perusahaan.id")
DRIVER = User("drv-01", "BUDI", UserRole.OPERATOR, "budi@perusahaan.id")


@pytest.fixture
def app_session() -> Iterator[AppSession]:
    """소유자 / 관리자 / 운전원 3명이 있는 세션"""
    session = AppSession(
        company=CompanySettings("PT ANGKUTAN MAJU JAYA", "JL. RAYA CAKUNG 12", "NIB-1234567890"),
        users=[DEFAULT_ADMIN, ADMIN, DRIVER],
    )
    set_session(session)
    yield session
    set_session(None)
    set_audit_client(None)
    set_receipt_scanner(None)


@pytest.fixture
def client(app_session: AppSession) -> TestClient:
    """lifespan 없이 주입된 세션을 쓰는 TestClient"""
    return TestClient(app)

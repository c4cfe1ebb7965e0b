"""
pytest 공통 fixture 정의

장부 / 전기기 / 설정 파일 fixture
"""

import tempfile
from pathlib import Path

import pytest

from core.ledger import JournalPoster, Ledger


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
company:
  name: "PT ANGKUTAN MAJU JAYA"
  address: "JL. RAYA CAKUNG NO. 12, JAKARTA"
  registration_id: "NIB-1234567890"
  logo: null

currency: idr
log_level: debug
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_no_company(temp_dir: Path) -> Path:
    """company 섹션이 없는 settings.yaml"""
    settings_path = temp_dir / "settings_no_company.yaml"
    settings_path.write_text("currency: IDR\n", encoding="utf-8")
    return settings_path


@pytest.fixture
def ledger() -> Ledger:
    """빈 장부"""
    return Ledger()


@pytest.fixture
def poster(ledger: Ledger) -> JournalPoster:
    """빈 장부에 연결된 전기기"""
    return JournalPoster(ledger)

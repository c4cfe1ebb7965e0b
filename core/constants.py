"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → fleetbooks/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    COMPANY_NAME: str = "NAMA PERUSAHAAN ANDA"
    COMPANY_ADDRESS: str = "ALAMAT LENGKAP KANTOR"
    REGISTRATION_ID: str = "NIB-BELUM-DIATUR"
    CURRENCY: str = "IDR"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    REPORT_CACHE_SIZE: int = 64  # 장부 스냅샷 하나당 보관할 보고서 수


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"


class LedgerAccounts:
    """예약 계정 이름

    KAS & BANK는 모든 분개의 한쪽 다리를 차지하는 현금/은행 통제 계정.
    """

    CASH_AND_BANK: str = "KAS & BANK"


class Thresholds:
    """경고 임계값"""

    BUDGET_WARNING_RATIO: Decimal = Decimal("0.85")  # 예산 소진율 85% 초과 시 경고
    FUEL_EXCESSIVE_L_PER_100KM: Decimal = Decimal("40")  # 중장비 기준 연비 한계


class ReportWindows:
    """보고서 기간 상수"""

    PROFIT_LOSS_MONTHS: int = 12
    PERFORMANCE_DAYS: int = 7
    AUDIT_LEDGER_SAMPLE: int = 15
    AUDIT_TRIP_SAMPLE: int = 10

"""
설정 로더

settings.yaml 로드 및 회사 정보 생성
"""

from dataclasses import dataclass
from pathlib import Path

import yaml

from core.constants import Defaults, Paths


@dataclass(frozen=True)
class CompanySettings:
    """회사 정보 (보고서 머리글에 사용)

    불변 데이터 구조. 변경 시 dataclasses.replace로 새 인스턴스 생성.
    """

    name: str
    address: str
    registration_id: str
    logo: str | None = None  # data URL 또는 경로


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)"""

    company: CompanySettings
    currency: str = Defaults.CURRENCY
    log_level: str = Defaults.LOG_LEVEL


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def load_settings(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        SettingsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SettingsLoadError("settings.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    # company 섹션 검증
    company_config = data.get("company")
    if not isinstance(company_config, dict):
        raise SettingsLoadError("settings.yaml에 'company' 섹션이 없습니다")

    name = str(company_config.get("name") or "").strip()
    if not name:
        raise SettingsLoadError("settings.yaml의 company 섹션에 'name'이 없습니다")

    company = CompanySettings(
        name=name,
        address=str(company_config.get("address") or Defaults.COMPANY_ADDRESS),
        registration_id=str(company_config.get("registration_id") or Defaults.REGISTRATION_ID),
        logo=company_config.get("logo"),
    )

    currency = str(data.get("currency") or Defaults.CURRENCY).upper()
    log_level = str(data.get("log_level") or Defaults.LOG_LEVEL).upper()

    return AppConfig(
        company=company,
        currency=currency,
        log_level=log_level,
    )


def default_company() -> CompanySettings:
    """설정 파일 없이 시작할 때의 기본 회사 정보"""
    return CompanySettings(
        name=Defaults.COMPANY_NAME,
        address=Defaults.COMPANY_ADDRESS,
        registration_id=Defaults.REGISTRATION_ID,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_settings(settings_path)

    @property
    def company(self) -> CompanySettings:
        """회사 정보"""
        assert self._config is not None
        return self._config.company

    @property
    def currency(self) -> str:
        """통화 코드"""
        assert self._config is not None
        return self._config.currency

    @property
    def log_level(self) -> str:
        """로그 레벨"""
        assert self._config is not None
        return self._config.log_level

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)

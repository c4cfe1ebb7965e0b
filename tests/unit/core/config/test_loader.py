"""
core/config/loader.py 테스트

settings.yaml 로드, 검증, 기본 회사 정보, 싱글턴 테스트
"""

from pathlib import Path

import pytest

from core.config.loader import (
    AppConfig,
    CompanySettings,
    Settings,
    SettingsLoadError,
    default_company,
    get_settings,
    load_settings,
)
from core.constants import Defaults, Paths


class TestCompanySettings:
    """CompanySettings 데이터클래스 테스트"""

    def test_creation(self) -> None:
        company = CompanySettings(name="PT A", address="JL. B", registration_id="NIB-1")

        assert company.name == "PT A"
        assert company.logo is None

    def test_frozen(self) -> None:
        """불변성 확인"""
        company = CompanySettings(name="PT A", address="JL. B", registration_id="NIB-1")

        with pytest.raises(AttributeError):
            company.name = "PT C"  # type: ignore


class TestLoadSettings:
    """load_settings 함수 테스트"""

    def test_load_valid(self, temp_settings_file: Path) -> None:
        """정상 로드, 통화/로그 레벨 대문자 정규화"""
        config = load_settings(temp_settings_file)

        assert isinstance(config, AppConfig)
        assert config.company.name == "PT ANGKUTAN MAJU JAYA"
        assert config.company.registration_id == "NIB-1234567890"
        assert config.company.logo is None
        assert config.currency == "IDR"
        assert config.log_level == "DEBUG"

    def test_file_not_found(self, temp_dir: Path) -> None:
        with pytest.raises(SettingsLoadError, match="찾을 수 없습니다"):
            load_settings(temp_dir / "nope.yaml")

    def test_missing_company(self, temp_settings_file_no_company: Path) -> None:
        with pytest.raises(SettingsLoadError, match="company"):
            load_settings(temp_settings_file_no_company)

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="비어"):
            load_settings(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "broken.yaml"
        path.write_text("company: [unclosed\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="파싱"):
            load_settings(path)

    def test_top_level_not_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="매핑"):
            load_settings(path)

    def test_blank_company_name(self, temp_dir: Path) -> None:
        path = temp_dir / "blank.yaml"
        path.write_text('company:\n  name: "  "\n', encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="name"):
            load_settings(path)

    def test_defaults_applied(self, temp_dir: Path) -> None:
        """선택 항목 누락 시 기본값"""
        path = temp_dir / "minimal.yaml"
        path.write_text('company:\n  name: "PT MINIMAL"\n', encoding="utf-8")

        config = load_settings(path)

        assert config.company.address == Defaults.COMPANY_ADDRESS
        assert config.company.registration_id == Defaults.REGISTRATION_ID
        assert config.currency == Defaults.CURRENCY
        assert config.log_level == Defaults.LOG_LEVEL

    def test_bundled_settings_file_loads(self) -> None:
        """저장소에 포함된 settings.yaml 로드 가능"""
        config = load_settings(Paths.SETTINGS_FILE)

        assert config.company.name == Defaults.COMPANY_NAME


class TestDefaultCompany:
    """default_company 테스트"""

    def test_placeholder_values(self) -> None:
        company = default_company()

        assert company.name == "NAMA PERUSAHAAN ANDA"
        assert company.registration_id == "NIB-BELUM-DIATUR"


class TestSettings:
    """Settings 싱글턴 테스트"""

    def setup_method(self) -> None:
        Settings.reset()

    def teardown_method(self) -> None:
        Settings.reset()

    def test_singleton(self, temp_settings_file: Path) -> None:
        """같은 인스턴스 반환, 첫 로드 경로 유지"""
        first = get_settings(temp_settings_file)
        second = get_settings()

        assert first is second
        assert second.company.name == "PT ANGKUTAN MAJU JAYA"
        assert second.currency == "IDR"
        assert second.log_level == "DEBUG"

    def test_reset(self, temp_settings_file: Path, temp_dir: Path) -> None:
        """reset 후 다시 로드"""
        get_settings(temp_settings_file)
        Settings.reset()

        other = temp_dir / "other.yaml"
        other.write_text('company:\n  name: "PT LAIN"\n', encoding="utf-8")

        assert get_settings(other).company.name == "PT LAIN"

    def test_load_failure_propagates(self, temp_dir: Path) -> None:
        with pytest.raises(SettingsLoadError):
            get_settings(temp_dir / "missing.yaml")

"""Unit tests for environment-based settings."""

import pytest
from pydantic import ValidationError

from covid_calendar.config import Settings, get_settings
from covid_calendar.domain.covid_cases.constants import COVID19_JAPAN_DAILY_DATA_URL
from covid_calendar.utils.date_parser import TIME_ZONE_TOKYO


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.data_url == COVID19_JAPAN_DAILY_DATA_URL
        assert settings.target_prefecture == "東京都"
        assert settings.timezone == TIME_ZONE_TOKYO
        assert settings.request_timeout is None
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_TO_FILE is False


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("COVID_CAL_TARGET_PREFECTURE", "大阪府")
        monkeypatch.setenv("COVID_CAL_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("COVID_CAL_DATA_URL", "https://example.com/p.csv")

        settings = Settings(_env_file=None)

        assert settings.target_prefecture == "大阪府"
        assert settings.request_timeout == 12.5
        assert settings.data_url == "https://example.com/p.csv"

    def test_log_level_is_unprefixed_and_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_TO_FILE", "yes")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_TO_FILE is True

    def test_non_positive_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("COVID_CAL_REQUEST_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("COVID_CAL_TARGET_PREFECTURE=山梨県\n", encoding="utf-8")

        settings = Settings(_env_file=str(env_file))

        assert settings.target_prefecture == "山梨県"


@pytest.mark.unit
def test_get_settings_is_cached():
    assert get_settings() is get_settings()

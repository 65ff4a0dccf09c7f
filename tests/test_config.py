import pytest
from pydantic import ValidationError

from radio_schedule.config import CustomSettings


def test_defaults():
    settings = CustomSettings()
    assert settings.radio357_url == "https://radio357.pl/ramowka"
    assert settings.rns_url == "https://nowyswiat.online/ramowka/"
    assert settings.extraction_timeout_sec == 30.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCHEDULE_TIMEZONE", "Europe/Warsaw")
    monkeypatch.setenv("SCRIPT_TIME_LIMIT_SEC", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = CustomSettings()
    assert settings.schedule_timezone == "Europe/Warsaw"
    assert settings.script_time_limit_sec == 2.5
    assert settings.log_level == "DEBUG"


def test_blank_timezone_means_local():
    assert CustomSettings(schedule_timezone="  ").schedule_timezone is None


@pytest.mark.parametrize("overrides", [
    {"radio357_url": "ftp://radio357.pl/ramowka"},
    {"schedule_timezone": "Mars/Olympus"},
    {"script_time_limit_sec": 0},
    {"script_memory_limit_mb": -1},
    {"extraction_timeout_sec": -1},
    {"log_level": "LOUD"},
])
def test_invalid_settings_rejected(overrides):
    with pytest.raises(ValidationError):
        CustomSettings(**overrides)

"""Tests for environment-driven settings."""
from datetime import date, datetime, timezone

import pytz

from mannmitra import config, utils

IST = pytz.timezone("Asia/Kolkata")


def test_env_wins(monkeypatch):
    monkeypatch.setenv("MANNMITRA_TEST_VALUE", "  from-env  ")
    assert config._get_secret("MANNMITRA_TEST_VALUE") == "from-env"


def test_missing_secret_uses_default(monkeypatch):
    monkeypatch.delenv("MANNMITRA_TEST_VALUE", raising=False)
    assert config._get_secret("MANNMITRA_TEST_VALUE", "fallback") == "fallback"


def test_float_settings(monkeypatch):
    monkeypatch.setenv("MANNMITRA_TEST_DELAY", "0.25")
    assert config._get_float("MANNMITRA_TEST_DELAY", 1.5) == 0.25
    monkeypatch.setenv("MANNMITRA_TEST_DELAY", "soon")
    assert config._get_float("MANNMITRA_TEST_DELAY", 1.5) == 1.5
    monkeypatch.setenv("MANNMITRA_TEST_DELAY", "-3")
    assert config._get_float("MANNMITRA_TEST_DELAY", 1.5) == 0.0


def test_timezone_setting(monkeypatch):
    monkeypatch.setenv("MANNMITRA_TEST_TZ", "Europe/London")
    assert config._get_zone("MANNMITRA_TEST_TZ", "Asia/Kolkata").zone == "Europe/London"
    monkeypatch.setenv("MANNMITRA_TEST_TZ", "Mars/Olympus")
    assert config._get_zone("MANNMITRA_TEST_TZ", "Asia/Kolkata").zone == "Asia/Kolkata"


def test_stored_times_are_shown_in_the_app_zone():
    stored = datetime(2026, 3, 29, 20, 0, tzinfo=timezone.utc)
    assert utils.to_local(stored, IST) == IST.localize(datetime(2026, 3, 30, 1, 30))
    assert utils.to_local(datetime(2026, 3, 29, 20, 0), IST).day == 30
    assert utils.start_of_day_utc(date(2026, 3, 30), IST) == datetime(2026, 3, 29, 18, 30, tzinfo=timezone.utc)

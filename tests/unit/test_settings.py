# tests/unit/test_settings.py
import time

import pytest
from pydantic import ValidationError

from config import settings as settings_mod


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test from an unset environment and a fresh singleton."""
    monkeypatch.delenv("STOPWATCH_CLOCK", raising=False)
    monkeypatch.delenv("STOPWATCH_INTERVAL_S", raising=False)
    settings_mod._settings_singleton = None
    yield
    settings_mod._settings_singleton = None


def test_defaults_use_wall_clock():
    s = settings_mod.get_settings(force_refresh=True)
    assert s.clock == "wall"
    assert s.interval_s == 0.0
    assert s.time_source() is time.time


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("STOPWATCH_CLOCK", "perf")
    monkeypatch.setenv("STOPWATCH_INTERVAL_S", "0.25")

    s = settings_mod.get_settings(force_refresh=True)

    assert s.clock == "perf"
    assert s.interval_s == 0.25
    assert s.time_source() is time.perf_counter


def test_get_settings_is_cached(monkeypatch):
    first = settings_mod.get_settings()
    monkeypatch.setenv("STOPWATCH_CLOCK", "monotonic")
    assert settings_mod.get_settings() is first
    assert settings_mod.get_settings(force_refresh=True).clock == "monotonic"


def test_unknown_clock_is_rejected(monkeypatch):
    monkeypatch.setenv("STOPWATCH_CLOCK", "sundial")
    with pytest.raises(ValidationError):
        settings_mod.get_settings(force_refresh=True)


def test_negative_interval_is_rejected():
    with pytest.raises(ValidationError):
        settings_mod.StopwatchSettings(interval_s=-1)


@pytest.mark.parametrize("value", ["nan", "inf"])
def test_non_finite_interval_is_rejected(monkeypatch, value):
    monkeypatch.setenv("STOPWATCH_INTERVAL_S", value)
    with pytest.raises(ValidationError):
        settings_mod.get_settings(force_refresh=True)

"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime
from dateutil import tz
from config import config


@pytest.fixture(autouse=True)
def utc_local_zone(monkeypatch):
    """Pin the local zone to UTC so results do not depend on the machine."""
    monkeypatch.setattr(config, "local_tz", tz.UTC)
    monkeypatch.setattr(config, "clock_angle_mode", "literal")


@pytest.fixture
def plus_five_zone(monkeypatch):
    """Fixture switching the local zone to a fixed UTC+05:00 offset."""
    zone = tz.tzoffset("PLUS5", 5 * 3600)
    monkeypatch.setattr(config, "local_tz", zone)
    return zone


@pytest.fixture
def minus_five_zone(monkeypatch):
    """Fixture switching the local zone to a fixed UTC-05:00 offset."""
    zone = tz.tzoffset("MINUS5", -5 * 3600)
    monkeypatch.setattr(config, "local_tz", zone)
    return zone


def utc_millis(*args) -> float:
    """Milliseconds since the epoch for a UTC wall-clock time."""
    return float(round(datetime(*args, tzinfo=tz.UTC).timestamp() * 1000))


@pytest.fixture
def utc_ms():
    """Fixture exposing the utc_millis helper to tests."""
    return utc_millis

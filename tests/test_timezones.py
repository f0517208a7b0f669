from datetime import date
from zoneinfo import ZoneInfo

import pytest

from common.timezones import resolve_timezone, today


def test_local_zone_names(monkeypatch):
    monkeypatch.delenv("CONVERTER_TIMEZONE", raising=False)
    assert resolve_timezone({}) is None
    assert resolve_timezone({"TIMEZONE": "local"}) is None
    assert resolve_timezone({"TIMEZONE": " System "}) is None


def test_lookup_order(monkeypatch):
    monkeypatch.delenv("CONVERTER_TIMEZONE", raising=False)
    config = {"TIMEZONE": "Europe/Berlin"}
    assert resolve_timezone(config) == ZoneInfo("Europe/Berlin")
    assert resolve_timezone(config, {"timezone": "Asia/Tokyo"}) == ZoneInfo("Asia/Tokyo")
    monkeypatch.setenv("CONVERTER_TIMEZONE", "UTC")
    assert resolve_timezone(config, {"timezone": "Asia/Tokyo"}) == ZoneInfo("UTC")
    monkeypatch.setenv("OTHER_TZ", "America/Chicago")
    assert resolve_timezone(config, {"timezone_env": "OTHER_TZ"}) == ZoneInfo("America/Chicago")


def test_unknown_zone(monkeypatch):
    monkeypatch.delenv("CONVERTER_TIMEZONE", raising=False)
    with pytest.raises(ValueError):
        resolve_timezone({"TIMEZONE": "Nowhere/Special"})


def test_today():
    assert isinstance(today(), date)
    assert isinstance(today(ZoneInfo("UTC")), date)

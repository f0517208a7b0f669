import json

import pytest

from common.errors import UnknownUnitError
from common.validation import ValidationError
from plugins.preferences.core import (
    DEFAULT_UNIT_PREFERENCES,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    build_store,
    normalize_preferences,
    preference_options,
)


def test_defaults():
    store = InMemoryPreferenceStore()
    assert store.get("length") == "Kilometers"
    assert store.get("weight") == "Ounces"
    assert store.get("time") == "Unix Epoch (Seconds)"
    assert store.get("colour") is None
    assert store.snapshot() == DEFAULT_UNIT_PREFERENCES


def test_update_and_reset():
    store = InMemoryPreferenceStore()
    store.set("length", "Miles")
    assert store.get("length") == "Miles"
    assert store.reset()["length"] == "Kilometers"


def test_unknown_key_rejected():
    store = InMemoryPreferenceStore()
    with pytest.raises(UnknownUnitError):
        store.update({"length": "Miles", "colour": "blue"})
    assert store.get("length") == "Kilometers"


def test_json_store_persists(tmp_path):
    path = tmp_path / "prefs" / "preferences.json"
    store = JsonFilePreferenceStore(path)
    store.update({"volume": "Gallons"})
    assert json.loads(path.read_text(encoding="utf-8"))["volume"] == "Gallons"

    reloaded = JsonFilePreferenceStore(path)
    assert reloaded.get("volume") == "Gallons"

    reloaded.reset()
    assert not path.exists()
    assert JsonFilePreferenceStore(path).get("volume") == "Liters"


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_json_store_ignores_unreadable_file(tmp_path, content):
    path = tmp_path / "preferences.json"
    path.write_text(content, encoding="utf-8")
    store = JsonFilePreferenceStore(path)
    assert store.snapshot() == DEFAULT_UNIT_PREFERENCES


def test_json_store_drops_unknown_keys(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"length": "Feet", "colour": "blue", "weight": 3}), encoding="utf-8")
    store = JsonFilePreferenceStore(path)
    assert store.get("length") == "Feet"
    assert store.get("weight") == "Ounces"
    assert store.get("colour") is None


def test_build_store(tmp_path):
    assert isinstance(build_store(None), InMemoryPreferenceStore)
    assert isinstance(build_store(tmp_path / "p.json"), JsonFilePreferenceStore)


def test_preference_options_cover_every_category():
    options = preference_options()
    assert set(options) == set(DEFAULT_UNIT_PREFERENCES)
    for category, default in DEFAULT_UNIT_PREFERENCES.items():
        assert default in options[category]


def test_normalize_preferences():
    assert normalize_preferences({"temperature": " fahrenheit "}) == {"temperature": "Fahrenheit"}
    assert normalize_preferences({"colour": "blue"}) == {"colour": "blue"}
    with pytest.raises(ValidationError) as excinfo:
        normalize_preferences({"length": "Furlongs"})
    assert "length" in excinfo.value.details


def test_failed_save_keeps_previous_values(tmp_path, monkeypatch):
    path = tmp_path / "preferences.json"
    store = JsonFilePreferenceStore(path)

    def _disk_full(values):
        raise OSError("disk full")

    monkeypatch.setattr(store, "_save", _disk_full)
    with pytest.raises(OSError):
        store.set("length", "Miles")
    assert store.get("length") == "Kilometers"
    assert store.snapshot() == DEFAULT_UNIT_PREFERENCES
    assert not path.exists()

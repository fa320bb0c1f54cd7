import json

import pytest

from cardsmith.core.theme import JsonFileStore, ThemePreference


def test_defaults_to_system_preference(theme_preference):
    assert theme_preference.resolve("dark") == "dark"
    assert theme_preference.resolve("light") == "light"
    assert theme_preference.resolve(None) == "light"
    assert theme_preference.resolve("sepia") == "light"
    assert theme_preference.stored() is None


def test_stored_theme_wins_over_system(theme_preference):
    theme_preference.apply("dark")
    assert theme_preference.resolve("light") == "dark"


def test_toggle_flips_and_persists(theme_preference):
    assert theme_preference.toggle("light") == "dark"
    assert theme_preference.stored() == "dark"
    assert theme_preference.toggle("dark") == "light"
    assert theme_preference.stored() == "light"


def test_unknown_theme_rejected(theme_preference):
    with pytest.raises(ValueError):
        theme_preference.apply("blue")


def test_json_store_survives_new_instances(tmp_path):
    path = tmp_path / "nested" / "theme.json"
    ThemePreference(JsonFileStore(path)).apply("dark")

    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
    assert ThemePreference(JsonFileStore(path)).resolve("light") == "dark"


def test_json_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text("{not json", encoding="utf-8")
    pref = ThemePreference(JsonFileStore(path))
    assert pref.resolve("dark") == "dark"
    pref.apply("light")
    assert pref.stored() == "light"


def test_json_store_treats_unreadable_path_as_empty(tmp_path):
    path = tmp_path / "theme.json"
    path.mkdir()
    assert ThemePreference(JsonFileStore(path)).resolve("dark") == "dark"


def test_json_store_write_leaves_no_temp_file(tmp_path):
    path = tmp_path / "theme.json"
    JsonFileStore(path).set("theme", "dark")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["theme.json"]

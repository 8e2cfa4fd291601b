from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for settings tests", exc_type=ImportError)

from iFavorites.errors import SettingsLoadError, SettingsValidationError
from iFavorites.settings.manager import SettingsManager, default_settings_path


def test_settings_manager_roundtrip(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert settings_path.exists()
    assert manager.get("data_path") is None

    received = []
    manager.settingsChanged.connect(lambda key, value: received.append((key, value)))
    data_path = tmp_path / "shared" / "favorites.json"
    manager.set("data_path", data_path)

    assert received == [("data_path", str(data_path))]
    assert manager.get("data_path") == str(data_path)
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["data_path"] == str(data_path)


def test_settings_manager_nested_updates_preserve_defaults(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set("ui.reveal_folders", False)
    assert manager.get("ui.reveal_folders") is False
    assert manager.get("ui.confirm_page_delete") is True
    assert manager.get("ui.missing", "fallback") == "fallback"


def test_log_level_is_normalised(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set("log_level", "debug")
    assert manager.get("log_level") == "DEBUG"


def test_invalid_value_is_rejected(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()

    with pytest.raises(SettingsValidationError):
        manager.set("log_level", "LOUD")

    assert manager.get("log_level") == "INFO"


def test_existing_file_is_merged_with_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"ui": {"reveal_folders": False}}), encoding="utf-8")
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert manager.get("ui.reveal_folders") is False
    assert manager.get("schema") == "iFavorites/settings@1"


@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
def test_unreadable_file(tmp_path: Path, content: str) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsLoadError):
        SettingsManager(path=settings_path).load()


def test_default_path_honours_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    if default_settings_path().drive or "Library" in default_settings_path().parts:
        pytest.skip("XDG layout only applies on Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_settings_path() == tmp_path / "iFavorites" / "settings.json"

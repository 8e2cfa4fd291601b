from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for settings", exc_type=ImportError)

from iFavorites.appctx import AppContext
from iFavorites.domain.models import AssetRef


def test_default_data_path(project: Path, tmp_path: Path) -> None:
    context = AppContext.for_project(project, tmp_path / "settings.json")
    assert context.data_path == project.resolve() / ".favorites" / "favorites.json"


def test_relative_data_path_from_settings(project: Path, tmp_path: Path) -> None:
    context = AppContext.for_project(project, tmp_path / "settings.json")
    context.settings.set("data_path", "Editor/favorites.json")

    reloaded = AppContext.for_project(project, tmp_path / "settings.json")

    assert reloaded.data_path == project.resolve() / "Editor" / "favorites.json"


def test_revealer_can_be_disabled(project: Path, tmp_path: Path) -> None:
    context = AppContext.for_project(project, tmp_path / "settings.json")
    assert context.create_revealer() is not None
    context.settings.set("ui.reveal_folders", False)
    assert context.create_revealer() is None


def test_session_persists_to_project(project: Path, tmp_path: Path) -> None:
    context = AppContext.for_project(project, tmp_path / "settings.json")

    with context.create_session() as controller:
        controller.handle_drop([AssetRef("Assets/Scenes")])

    with context.create_session() as controller:
        assert controller.current_page() == (AssetRef("Assets/Scenes"),)
    assert context.data_path.exists()


def test_view_model_follows_confirmation_setting(project: Path, tmp_path: Path) -> None:
    context = AppContext.for_project(project, tmp_path / "settings.json")
    session = context.create_session()

    view_model = context.create_view_model(session)
    assert view_model.confirm_page_delete.value is True
    assert view_model.page_label.value == "Page 1 / 1"
    view_model.dispose()
    session.close()

    context.settings.set("ui.confirm_page_delete", False)
    quiet = context.create_view_model(context.create_session())
    assert quiet.confirm_page_delete.value is False

"""Tests for resolving asset references inside a project directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from iFavorites.domain.models import AssetRef
from iFavorites.errors import AssetOutsideProjectError
from iFavorites.infrastructure.services import ProjectAssetResolver


def test_ref_for_absolute_and_relative_paths(project: Path):
    resolver = ProjectAssetResolver(project)

    assert resolver.ref_for(project / "Assets" / "Player.prefab") == AssetRef("Assets/Player.prefab")
    assert resolver.ref_for("Assets/Scenes") == AssetRef("Assets/Scenes")


def test_ref_for_rejects_outside_paths(project: Path, tmp_path: Path):
    resolver = ProjectAssetResolver(project)
    outside = tmp_path / "elsewhere.txt"
    outside.write_text("x", encoding="utf-8")

    with pytest.raises(AssetOutsideProjectError):
        resolver.ref_for(outside)
    with pytest.raises(AssetOutsideProjectError):
        resolver.ref_for(project)


def test_classification(project: Path):
    resolver = ProjectAssetResolver(project)
    folder = AssetRef("Assets/Scenes")
    leaf = AssetRef("Assets/Textures/wood.png")

    assert resolver.is_folder(folder) is True
    assert resolver.is_folder(leaf) is False
    assert resolver.display_name(folder) == "Scenes"
    assert resolver.display_name(leaf) == "wood"
    assert resolver.path_of(leaf) == str(project.resolve() / "Assets" / "Textures" / "wood.png")


def test_validity_follows_the_filesystem(project: Path):
    resolver = ProjectAssetResolver(project)
    ref = AssetRef("Assets/Player.prefab")
    assert resolver.is_valid(ref) is True

    (project / "Assets" / "Player.prefab").unlink()

    assert resolver.is_valid(ref) is False
    assert resolver.is_folder(ref) is False
    assert resolver.is_valid(AssetRef("")) is False


def test_refs_climbing_out_of_the_project_never_resolve(project: Path):
    secret = project.parent / "secret.txt"
    secret.write_text("x", encoding="utf-8")
    (project.parent / "shared").mkdir()
    resolver = ProjectAssetResolver(project)

    assert resolver.is_valid(AssetRef("../secret.txt")) is False
    assert resolver.is_folder(AssetRef("../shared")) is False
    assert resolver.is_valid(AssetRef("Assets/../Assets/Player.prefab")) is True

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
TESTS = Path(__file__).resolve().parent

# Keep the sources importable when running from a checkout without installing.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
# Shared fakes live next to this file.
if str(TESTS) not in sys.path:
    sys.path.insert(0, str(TESTS))


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the per-user settings location at a temporary directory."""

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree with folders and leaf assets."""

    root = tmp_path / "project"
    (root / "Assets" / "Scenes").mkdir(parents=True)
    (root / "Assets" / "Textures").mkdir()
    (root / "Assets" / "Player.prefab").write_text("prefab", encoding="utf-8")
    (root / "Assets" / "Scenes" / "Main.unity").write_text("scene", encoding="utf-8")
    (root / "Assets" / "Textures" / "wood.png").write_bytes(b"\x89PNG")
    return root

"""JSON read/write helpers with atomic replacement."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path
from typing import Any, Optional

from ..errors import FavoritesLoadError


def read_json(path: Path) -> Any:
    """Return the decoded JSON document stored at *path*."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FavoritesLoadError(f"Could not read {path}: {exc}") from exc


def write_json(path: Path, payload: Any, *, backup_dir: Optional[Path] = None) -> Path:
    """Write *payload* to *path* atomically via a temp file.

    When *backup_dir* is given the previous version of *path* is copied there
    before it is replaced.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    if backup_dir is not None and path.exists():
        backup_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, backup_dir / (path.name + ".bak"))

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return path

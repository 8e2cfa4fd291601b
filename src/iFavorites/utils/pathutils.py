"""Path helpers shared by the resolver and the repository."""

from __future__ import annotations

import posixpath
from pathlib import Path

from ..config import DATA_FILE_NAME, WORK_DIR_NAME


def default_data_path(project_root: Path) -> Path:
    """Return where the favorites of *project_root* are stored by default."""

    return project_root / WORK_DIR_NAME / DATA_FILE_NAME


def normalise_ref_path(raw: str) -> str:
    """Return *raw* as a clean relative POSIX path.

    Backslashes from Windows drops are folded to forward slashes, leading
    slashes are stripped and ``.``/``..`` segments are collapsed so that the
    same asset always compares equal. An empty result means "no asset".
    """

    text = raw.strip().replace("\\", "/").lstrip("/")
    if not text:
        return ""
    collapsed = posixpath.normpath(text)
    return "" if collapsed == "." else collapsed


def escapes_root(ref_path: str) -> bool:
    """Return ``True`` when a normalised ref still climbs above its root."""

    return ref_path == ".." or ref_path.startswith("../")


def relative_to_root(path: Path, root: Path) -> str | None:
    """Return *path* relative to *root* as POSIX text, or ``None`` if outside."""

    try:
        rel = path.resolve().relative_to(root.resolve())
    except ValueError:
        return None
    return rel.as_posix()

from pathlib import Path, PurePosixPath
from typing import Union

from iFavorites.domain.models import AssetRef
from iFavorites.domain.repositories import IAssetResolver
from iFavorites.errors import AssetOutsideProjectError
from iFavorites.utils.pathutils import relative_to_root


class ProjectAssetResolver(IAssetResolver):
    """Resolve asset references against a project directory on disk."""

    def __init__(self, root: Path):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def ref_for(self, path: Union[str, Path]) -> AssetRef:
        """Return the reference for a filesystem *path* inside the project."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self._root / candidate
        rel = relative_to_root(candidate, self._root)
        if rel is None:
            raise AssetOutsideProjectError(f"{path} is not inside {self._root}")
        ref = AssetRef(rel)
        if not ref.is_valid():
            raise AssetOutsideProjectError("The project root itself cannot be a favorite")
        return ref

    def display_name(self, ref: AssetRef) -> str:
        name = PurePosixPath(ref.path)
        if self.is_folder(ref):
            return name.name
        return name.stem or name.name

    def is_folder(self, ref: AssetRef) -> bool:
        return ref.is_valid() and self._absolute(ref).is_dir()

    def path_of(self, ref: AssetRef) -> str:
        return str(self._absolute(ref))

    def is_valid(self, ref: AssetRef) -> bool:
        return ref.is_valid() and self._absolute(ref).exists()

    def _absolute(self, ref: AssetRef) -> Path:
        return self._root / ref.path

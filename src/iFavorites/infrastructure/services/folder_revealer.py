import logging
import subprocess
import sys
from pathlib import Path
from typing import Union

from iFavorites.application.interfaces import IFolderRevealer
from iFavorites.errors import AssetNotFoundError, ExternalToolError

logger = logging.getLogger(__name__)


class FolderRevealer(IFolderRevealer):
    """Open a folder in the desktop file manager."""

    def reveal_folder(self, path: Union[str, Path]) -> None:
        folder = Path(path)
        if not folder.is_dir():
            raise AssetNotFoundError(f"Folder not found: {folder}")

        # Each platform ships its own file manager launcher.
        if sys.platform == "win32":
            command = ["explorer", str(folder)]
        elif sys.platform == "darwin":
            command = ["open", str(folder)]
        else:
            command = ["xdg-open", str(folder)]

        try:
            subprocess.run(command, check=False)
        except OSError as exc:
            raise ExternalToolError(f"Could not run {command[0]}: {exc}") from exc
        logger.debug("Revealed %s with %s", folder, command[0])

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class IFolderRevealer(ABC):
    """Optional capability to show a folder in the host's file browser."""

    @abstractmethod
    def reveal_folder(self, path: Union[str, Path]) -> None:
        pass

"""Application-wide context wiring the favorites collaborators together."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .events.bus import EventBus

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .application.services.favorites_session import FavoritesSession
    from .gui.viewmodels import FavoritesViewModel
    from .infrastructure.repositories import JsonFavoritesRepository
    from .infrastructure.services import FolderRevealer, ProjectAssetResolver
    from .settings.manager import SettingsManager


def _create_settings_manager(path: Optional[Path] = None) -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager(path)
    manager.load()
    return manager


@dataclass
class AppContext:
    """Container object shared by the CLI and GUI adapters of one project."""

    project_root: Path
    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    event_bus: EventBus = field(default_factory=EventBus)
    data_path: Optional[Path] = None

    def __post_init__(self) -> None:
        from .utils.pathutils import default_data_path

        self.project_root = Path(self.project_root).expanduser().resolve()
        if self.data_path is None:
            configured = self.settings.get("data_path")
            if isinstance(configured, str) and configured:
                candidate = Path(configured).expanduser()
                if not candidate.is_absolute():
                    candidate = self.project_root / candidate
                self.data_path = candidate
            else:
                self.data_path = default_data_path(self.project_root)

    @classmethod
    def for_project(cls, root: Path, settings_path: Optional[Path] = None) -> "AppContext":
        return cls(project_root=root, settings=_create_settings_manager(settings_path))

    def create_repository(self) -> "JsonFavoritesRepository":
        from .infrastructure.repositories import JsonFavoritesRepository

        return JsonFavoritesRepository(self.data_path)

    def create_resolver(self) -> "ProjectAssetResolver":
        from .infrastructure.services import ProjectAssetResolver

        return ProjectAssetResolver(self.project_root)

    def create_revealer(self) -> Optional["FolderRevealer"]:
        if not self.settings.get("ui.reveal_folders", True):
            return None
        from .infrastructure.services import FolderRevealer

        return FolderRevealer()

    def create_session(self, *, save_on_close: bool = True) -> "FavoritesSession":
        from .application.services.favorites_session import FavoritesSession

        return FavoritesSession(
            self.create_repository(),
            self.create_resolver(),
            self.event_bus,
            save_on_close=save_on_close,
        )

    def create_view_model(self, session: "FavoritesSession") -> "FavoritesViewModel":
        """Open *session* and wrap its controller for a favorites panel."""

        from .errors.handler import ErrorHandler
        from .gui.viewmodels import FavoritesViewModel
        from .utils.logging import logger

        return FavoritesViewModel(
            session.open(),
            self.event_bus,
            error_handler=ErrorHandler(logger, self.event_bus),
            revealer=self.create_revealer(),
            session=session,
            confirm_page_delete=bool(self.settings.get("ui.confirm_page_delete", True)),
        )

from .folder_revealer import FolderRevealer
from .project_asset_resolver import ProjectAssetResolver

__all__ = ["FolderRevealer", "ProjectAssetResolver"]

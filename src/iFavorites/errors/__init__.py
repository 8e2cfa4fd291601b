"""Custom exception hierarchy for iFavorites."""

from __future__ import annotations


class FavoritesError(Exception):
    """Base class for all custom errors raised by iFavorites."""


# --- 3-layer hierarchy ---

class DomainError(FavoritesError):
    """Base class for domain-level errors."""


class InfrastructureError(FavoritesError):
    """Base class for infrastructure-level errors."""


class ApplicationError(FavoritesError):
    """Base class for application-level errors."""


# --- Domain errors ---

class IndexOutOfRangeError(DomainError, IndexError):
    """Raised when a page or item index falls outside the valid bounds."""


class InvalidOperationError(DomainError):
    """Raised when an operation would break a collection invariant."""


class AssetNotFoundError(DomainError):
    """Raised when the requested asset cannot be located."""


class AssetOutsideProjectError(DomainError):
    """Raised when a path does not live under the project root."""


# --- Application errors ---

class SessionNotOpenError(ApplicationError):
    """Raised when a favorites session is used before open() or after close()."""


# --- Infrastructure errors ---

class FavoritesLoadError(InfrastructureError):
    """Raised when the favorites file cannot be read or parsed."""


class FavoritesSaveError(InfrastructureError):
    """Raised when the favorites file cannot be written."""


class FavoritesValidationError(InfrastructureError):
    """Raised when favorites data fails schema validation."""


class ExternalToolError(InfrastructureError):
    """Raised when an external tool such as the file manager fails."""


# --- Settings errors ---

class SettingsError(FavoritesError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""

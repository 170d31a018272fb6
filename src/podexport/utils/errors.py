"""Custom exceptions for podexport."""

from pathlib import Path


class PodExportError(Exception):
    """Base exception for all podexport errors."""

    pass


class ConfigError(PodExportError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class LibraryError(PodExportError):
    """Podcast app library errors."""

    pass


class LibraryNotFoundError(LibraryError):
    """The podcast app data directory could not be located."""

    pass


class CatalogUnavailableError(LibraryError):
    """The episode catalog could not be opened or queried."""

    pass


class CacheDirectoryUnavailableError(LibraryError):
    """The episode cache directory could not be listed."""

    pass


class ExportError(PodExportError):
    """Per-file export errors."""

    pass


class TagWriteError(ExportError):
    """Writing audio metadata tags failed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class MaterializeError(ExportError):
    """Copying or retagging a single episode failed."""

    def __init__(self, message: str, source: Path, destination: Path) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination

"""Utility functions and helpers for podexport."""

from podexport.utils.errors import (
    CacheDirectoryUnavailableError,
    CatalogUnavailableError,
    ConfigError,
    ExportError,
    InvalidConfigError,
    LibraryError,
    LibraryNotFoundError,
    MaterializeError,
    PodExportError,
    TagWriteError,
)
from podexport.utils.reveal import reveal_in_file_browser

__all__ = [
    # Errors
    "PodExportError",
    "ConfigError",
    "InvalidConfigError",
    "LibraryError",
    "LibraryNotFoundError",
    "CatalogUnavailableError",
    "CacheDirectoryUnavailableError",
    "ExportError",
    "TagWriteError",
    "MaterializeError",
    # Platform
    "reveal_in_file_browser",
]

"""Access to the podcast app's catalog and download cache."""

from podexport.library.cache import list_cache_files
from podexport.library.catalog import read_catalog, try_read_catalog
from podexport.library.locator import locate_library
from podexport.library.models import CacheEntry, CatalogRow, LibraryPaths

__all__ = [
    "CacheEntry",
    "CatalogRow",
    "LibraryPaths",
    "list_cache_files",
    "locate_library",
    "read_catalog",
    "try_read_catalog",
]

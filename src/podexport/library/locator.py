"""Locate the podcast app's private data directory."""

import logging
from pathlib import Path

from podexport.config.schema import ExportConfig
from podexport.library.models import LibraryPaths
from podexport.utils.errors import LibraryNotFoundError

logger = logging.getLogger(__name__)

CATALOG_RELATIVE_PATH = Path("Documents") / "MTLibrary.sqlite"
CACHE_RELATIVE_PATH = Path("Library") / "Cache"


def find_container(group_containers_dir: Path, marker: str) -> Path:
    """Find the app group container whose name contains ``marker``.

    Args:
        group_containers_dir: Directory holding all app group containers
        marker: Substring identifying the podcast app container

    Returns:
        Path to the container directory

    Raises:
        LibraryNotFoundError: If the directory can't be read or has no match
    """
    try:
        names = sorted(entry.name for entry in group_containers_dir.iterdir())
    except OSError as e:
        raise LibraryNotFoundError(
            f"Could not find podcasts app folder in {group_containers_dir}, "
            f"original error: {e}"
        ) from e

    for name in names:
        if marker in name:
            return group_containers_dir / name

    raise LibraryNotFoundError(
        f"Could not find podcasts app folder in {group_containers_dir}"
    )


def locate_library(config: ExportConfig) -> LibraryPaths:
    """Resolve catalog and cache locations from configuration.

    Raises:
        LibraryNotFoundError: If the app data directory can't be found
    """
    if config.library_dir is not None:
        base_dir = config.library_dir.expanduser()
        if not base_dir.is_dir():
            raise LibraryNotFoundError(
                f"Configured library directory does not exist: {base_dir}"
            )
    else:
        base_dir = find_container(
            config.group_containers_dir.expanduser(), config.container_marker
        )

    logger.debug(f"Using podcast library at {base_dir}")
    return LibraryPaths(
        base_dir=base_dir,
        catalog_path=base_dir / CATALOG_RELATIVE_PATH,
        cache_dir=base_dir / CACHE_RELATIVE_PATH,
    )

"""Enumerate downloaded episodes in the podcast app cache."""

import logging
from pathlib import Path

import aiofiles.os

from podexport.library.models import CacheEntry
from podexport.utils.errors import CacheDirectoryUnavailableError

logger = logging.getLogger(__name__)


def episode_id_from_filename(file_name: str, extension: str) -> str:
    """Strip the container extension from a cache file name.

    No other normalization is applied; the result is matched against the
    catalog exactly.
    """
    suffix = f".{extension}"
    if file_name.endswith(suffix):
        return file_name[: -len(suffix)]
    return file_name


async def list_cache_files(cache_dir: Path, extension: str = "mp3") -> list[CacheEntry]:
    """List cached audio files with the given extension.

    Entries are returned sorted by file name so that discovery order is
    stable between runs.

    Args:
        cache_dir: Podcast app cache directory
        extension: Audio container extension without the dot

    Returns:
        One CacheEntry per matching file

    Raises:
        CacheDirectoryUnavailableError: If the directory can't be listed
    """
    try:
        names = await aiofiles.os.listdir(cache_dir)
    except OSError as e:
        raise CacheDirectoryUnavailableError(
            f"Could not find {extension} files in podcasts cache folder {cache_dir}. "
            f"Either there are no downloaded podcasts or the podcasts app changed its layout. "
            f"Original error: {e}"
        ) from e

    suffix = f".{extension}"
    entries = [
        CacheEntry(
            file_name=name,
            episode_id=episode_id_from_filename(name, extension),
            source_path=cache_dir / name,
        )
        for name in sorted(names)
        if name.endswith(suffix) and len(name) > len(suffix)
    ]

    logger.debug(f"Found {len(entries)} cached {extension} files in {cache_dir}")
    return entries

"""Copy episodes into the export tree and rewrite their tags."""

import asyncio
import logging
import os
import shutil
import tempfile
from collections.abc import Awaitable, Callable
from pathlib import Path

import aiofiles
import aiofiles.os

from podexport.audio.tags import EpisodeTags, write_tags
from podexport.export.models import ResolvedEpisode
from podexport.utils.errors import MaterializeError

logger = logging.getLogger(__name__)

TagWriter = Callable[[Path, EpisodeTags], Awaitable[None]]

COPY_CHUNK_SIZE = 1024 * 1024


async def ensure_directory(path: Path) -> None:
    """Create a directory tree; concurrent or repeated calls are fine."""
    await aiofiles.os.makedirs(path, exist_ok=True)


async def copy_file(source: Path, destination: Path) -> None:
    """Copy a file byte-for-byte, overwriting ``destination``."""
    async with aiofiles.open(source, "rb") as src, aiofiles.open(destination, "wb") as dst:
        while chunk := await src.read(COPY_CHUNK_SIZE):
            await dst.write(chunk)


class Materializer:
    """Write one resolved episode to its destination.

    The source is copied to a temporary file next to the destination, the
    copy is retagged, and the temporary file then replaces the destination.
    A failed export never leaves a partial file behind, and re-exporting
    overwrites the previous copy in place.

    Example:
        >>> materializer = Materializer()
        >>> await materializer.materialize(episode, Path("out/Tech Talk/Episode 1.mp3"))
    """

    def __init__(self, tag_writer: TagWriter = write_tags, genre: str = "Podcast") -> None:
        """Initialize materializer.

        Args:
            tag_writer: Coroutine that writes tags to a file in place
            genre: Genre tag written to every episode
        """
        self.tag_writer = tag_writer
        self.genre = genre

    def tags_for(self, episode: ResolvedEpisode) -> EpisodeTags:
        """Tag values reflecting the episode's resolved identity."""
        return EpisodeTags(
            title=episode.display_title,
            artist=episode.podcast_title,
            album=episode.podcast_title,
            genre=self.genre,
        )

    async def materialize(self, episode: ResolvedEpisode, destination: Path) -> Path:
        """Copy and retag an episode.

        Args:
            episode: Episode to export
            destination: Final file path

        Returns:
            The destination path

        Raises:
            MaterializeError: If copying, tagging or the final rename fails
        """
        temp_path: Path | None = None
        try:
            await ensure_directory(destination.parent)

            # Temp file in the same directory so the final replace is atomic
            fd, temp_name = tempfile.mkstemp(
                dir=destination.parent, prefix=".tmp_", suffix=destination.suffix
            )
            os.close(fd)
            temp_path = Path(temp_name)

            await copy_file(episode.source_path, temp_path)
            # mkstemp creates 0600 files; keep the source file's permissions
            loop = asyncio.get_event_loop()
            await loop.run_in_executor(None, shutil.copymode, episode.source_path, temp_path)
            await self.tag_writer(temp_path, self.tags_for(episode))
            await aiofiles.os.replace(temp_path, destination)
            temp_path = None

        except Exception as e:
            raise MaterializeError(
                f"Failed to export {episode.source_path} to {destination}: {e}",
                source=episode.source_path,
                destination=destination,
            ) from e

        finally:
            if temp_path is not None:
                try:
                    await aiofiles.os.remove(temp_path)
                except OSError as cleanup_error:
                    logger.debug(f"Could not remove temp file {temp_path}: {cleanup_error}")

        logger.debug(f"Exported {episode.source_path.name} -> {destination}")
        return destination

"""ID3 tag reading and writing using mutagen."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from mutagen import MutagenError
from mutagen.id3 import ID3, TALB, TCON, TIT2, TPE1, TPE2, ID3NoHeaderError
from pydantic import BaseModel, Field

from podexport.utils.errors import TagWriteError

logger = logging.getLogger(__name__)


class EpisodeTags(BaseModel):
    """Tag values written to an exported episode."""

    title: str = Field(..., min_length=1)
    artist: str = Field(..., min_length=1)
    album: str = Field(..., min_length=1)
    genre: str = "Podcast"


def _read_title_sync(path: Path) -> Optional[str]:
    try:
        id3 = ID3(path)
    except ID3NoHeaderError:
        return None

    frame = id3.get("TIT2")
    if frame is None or not frame.text:
        return None
    title = str(frame.text[0]).strip()
    return title or None


async def read_embedded_title(path: Path) -> Optional[str]:
    """Read the title stored in a file's ID3 tag.

    Best-effort: unreadable files, files without a tag and blank titles all
    yield None.

    Args:
        path: Audio file to inspect

    Returns:
        Embedded title or None
    """
    try:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, _read_title_sync, path)
    except Exception as e:
        logger.debug(f"Could not read embedded title from {path}: {e}")
        return None


def _write_tags_sync(path: Path, tags: EpisodeTags) -> None:
    # Read-modify-write so unrelated frames (artwork, chapters) survive
    try:
        id3 = ID3(path)
    except ID3NoHeaderError:
        id3 = ID3()

    id3.setall("TIT2", [TIT2(encoding=3, text=[tags.title])])
    id3.setall("TPE1", [TPE1(encoding=3, text=[tags.artist])])
    id3.setall("TPE2", [TPE2(encoding=3, text=[tags.artist])])
    id3.setall("TALB", [TALB(encoding=3, text=[tags.album])])
    id3.setall("TCON", [TCON(encoding=3, text=[tags.genre])])
    id3.save(path)


async def write_tags(path: Path, tags: EpisodeTags) -> None:
    """Overwrite title, artist, album and genre on an MP3 file in place.

    Args:
        path: File to retag
        tags: New tag values

    Raises:
        TagWriteError: If the tag can't be read back or saved
    """
    try:
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, _write_tags_sync, path, tags)
    except (MutagenError, OSError, ValueError) as e:
        raise TagWriteError(f"Failed to write tags to {path}: {e}", path) from e

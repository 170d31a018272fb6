"""Join cache files with catalog rows and resolve episode names."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Optional

from podexport.audio.tags import read_embedded_title
from podexport.export.models import ExportGroup, ResolvedEpisode, TitleSource
from podexport.library.models import CacheEntry, CatalogRow

logger = logging.getLogger(__name__)

TitleReader = Callable[[Path], Awaitable[Optional[str]]]
TitleStep = Callable[[CacheEntry, Optional[CatalogRow], TitleReader], Awaitable[Optional[str]]]


def _present(value: Optional[str]) -> Optional[str]:
    """Treat None and blank strings alike as missing."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def join_entries(
    entries: Sequence[CacheEntry], rows: Sequence[CatalogRow]
) -> list[tuple[CacheEntry, Optional[CatalogRow]]]:
    """Pair every cache entry with its catalog row, if any.

    Matching is exact on episode id. When the catalog holds duplicate ids
    the first row wins.
    """
    by_id: dict[str, CatalogRow] = {}
    for row in rows:
        by_id.setdefault(row.episode_id, row)

    return [(entry, by_id.get(entry.episode_id)) for entry in entries]


async def _catalog_title(
    entry: CacheEntry, row: Optional[CatalogRow], reader: TitleReader
) -> Optional[str]:
    return row.cleaned_episode_title if row is not None else None


async def _embedded_title(
    entry: CacheEntry, row: Optional[CatalogRow], reader: TitleReader
) -> Optional[str]:
    return await reader(entry.source_path)


async def _episode_id_title(
    entry: CacheEntry, row: Optional[CatalogRow], reader: TitleReader
) -> Optional[str]:
    return entry.episode_id


# Evaluated in order; later steps only run when earlier ones yield nothing
TITLE_STEPS: tuple[tuple[TitleSource, TitleStep], ...] = (
    ("catalog", _catalog_title),
    ("embedded", _embedded_title),
    ("episode_id", _episode_id_title),
)


async def resolve_display_title(
    entry: CacheEntry,
    row: Optional[CatalogRow],
    title_reader: TitleReader = read_embedded_title,
) -> tuple[str, TitleSource]:
    """Pick the display title for an episode.

    Tries the catalog's cleaned title, then the file's embedded title, then
    the raw episode id. The embedded title is only read from disk when the
    catalog has nothing.

    Returns:
        Tuple of (title, source of the title)
    """
    for source, step in TITLE_STEPS:
        title = _present(await step(entry, row, title_reader))
        if title is not None:
            return title, source

    # Blank ids are kept verbatim; path resolution sanitizes them later
    return entry.episode_id or entry.file_name, "episode_id"


def resolve_podcast_title(row: Optional[CatalogRow], fallback: str) -> str:
    """Podcast title from the catalog row, or the fallback constant."""
    if row is not None:
        title = _present(row.podcast_title)
        if title is not None:
            return title
    return fallback


async def _resolve_one(
    entry: CacheEntry,
    row: Optional[CatalogRow],
    fallback_podcast_title: str,
    title_reader: TitleReader,
) -> ResolvedEpisode:
    display_title, source = await resolve_display_title(entry, row, title_reader)
    if row is None:
        logger.debug(f"{entry.file_name} not in catalog, titled from {source}")

    return ResolvedEpisode(
        episode_id=entry.episode_id,
        source_path=entry.source_path,
        podcast_title=resolve_podcast_title(row, fallback_podcast_title),
        display_title=display_title,
        title_source=source,
        matched_catalog_row=row,
    )


async def correlate(
    entries: Sequence[CacheEntry],
    rows: Sequence[CatalogRow],
    fallback_podcast_title: str = "Unknown Artist",
    title_reader: TitleReader = read_embedded_title,
) -> list[ResolvedEpisode]:
    """Resolve every cache entry into a ResolvedEpisode.

    Args:
        entries: Cache files in discovery order
        rows: Catalog rows (may be empty)
        fallback_podcast_title: Podcast title for files missing from the catalog
        title_reader: Reads a file's embedded title

    Returns:
        One ResolvedEpisode per entry, in the same order
    """
    joined = join_entries(entries, rows)
    matched = sum(1 for _, row in joined if row is not None)
    logger.info(f"Matched {matched} of {len(joined)} cached files to the catalog")

    return list(
        await asyncio.gather(
            *(
                _resolve_one(entry, row, fallback_podcast_title, title_reader)
                for entry, row in joined
            )
        )
    )


def group_episodes(episodes: Sequence[ResolvedEpisode]) -> list[ExportGroup]:
    """Partition episodes by podcast title.

    Groups appear in order of first occurrence and members keep their
    discovery order.
    """
    groups: dict[str, ExportGroup] = {}
    for episode in episodes:
        group = groups.get(episode.podcast_title)
        if group is None:
            group = ExportGroup(podcast_title=episode.podcast_title)
            groups[episode.podcast_title] = group
        group.members.append(episode)

    return list(groups.values())

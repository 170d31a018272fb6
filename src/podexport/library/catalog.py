"""Read episode metadata from the podcast app's SQLite catalog."""

import asyncio
import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from podexport.library.models import CatalogRow
from podexport.utils.errors import CatalogUnavailableError

logger = logging.getLogger(__name__)

EPISODES_QUERY = """
    SELECT ZMTEPISODE.zuuid AS zuuid,
           ZMTPODCAST.ztitle AS ztitle,
           ZMTEPISODE.zcleanedtitle AS zcleanedtitle
      FROM ZMTEPISODE, ZMTPODCAST
     WHERE ZMTEPISODE.zpodcastuuid = ZMTPODCAST.zuuid
"""


def _query_catalog(db_path: Path) -> list[CatalogRow]:
    """Synchronous catalog query for thread pool execution."""
    # Read-only: the catalog belongs to the podcast app
    uri = f"{db_path.resolve().as_uri()}?mode=ro"
    with closing(sqlite3.connect(uri, uri=True)) as conn:
        rows = conn.execute(EPISODES_QUERY).fetchall()

    return [
        CatalogRow(
            episode_id=str(zuuid),
            podcast_title=ztitle,
            cleaned_episode_title=zcleanedtitle,
        )
        for zuuid, ztitle, zcleanedtitle in rows
        if zuuid is not None
    ]


async def read_catalog(db_path: Path) -> list[CatalogRow]:
    """Load all episode rows from the catalog.

    The connection is opened once and closed before returning, whether the
    query succeeds or not.

    Args:
        db_path: Path to MTLibrary.sqlite

    Returns:
        Catalog rows in query order

    Raises:
        CatalogUnavailableError: If the database can't be opened or queried
    """
    try:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, _query_catalog, db_path)
    except (sqlite3.Error, OSError, ValueError) as e:
        raise CatalogUnavailableError(
            f"Could not fetch data from podcasts database {db_path}: {e}"
        ) from e


async def try_read_catalog(db_path: Path) -> list[CatalogRow]:
    """Load the catalog, degrading to an empty list when it is unavailable."""
    try:
        rows = await read_catalog(db_path)
    except CatalogUnavailableError as e:
        logger.error(f"{e}. Continuing with embedded tags only.")
        return []

    logger.info(f"Loaded {len(rows)} episodes from podcasts database")
    return rows

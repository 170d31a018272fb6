"""Shared fixtures for podexport tests."""

import sqlite3
from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.id3 import ID3, TIT2

from podexport.library.models import LibraryPaths

FAKE_AUDIO = b"\xff\xfb\x90\x00" + b"\x00" * 2048


def write_fake_mp3(path: Path, title: str | None = None) -> Path:
    """Write a small audio stand-in, optionally with an ID3 title."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(FAKE_AUDIO)
    if title is not None:
        tags = ID3()
        tags.add(TIT2(encoding=3, text=[title]))
        tags.save(path)
    return path


def create_catalog(db_path: Path, rows: list[tuple[str, str | None, str | None]]) -> Path:
    """Create an MTLibrary-style catalog.

    Args:
        db_path: Database file to create
        rows: (episode uuid, podcast title, cleaned episode title) tuples
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        conn.execute("CREATE TABLE ZMTPODCAST (Z_PK INTEGER PRIMARY KEY, ZUUID TEXT, ZTITLE TEXT)")
        conn.execute(
            "CREATE TABLE ZMTEPISODE "
            "(Z_PK INTEGER PRIMARY KEY, ZUUID TEXT, ZPODCASTUUID TEXT, ZCLEANEDTITLE TEXT)"
        )
        podcast_ids: dict[str | None, str] = {}
        for episode_id, podcast_title, cleaned_title in rows:
            if podcast_title not in podcast_ids:
                podcast_ids[podcast_title] = f"podcast-{len(podcast_ids)}"
                conn.execute(
                    "INSERT INTO ZMTPODCAST (ZUUID, ZTITLE) VALUES (?, ?)",
                    (podcast_ids[podcast_title], podcast_title),
                )
            conn.execute(
                "INSERT INTO ZMTEPISODE (ZUUID, ZPODCASTUUID, ZCLEANEDTITLE) VALUES (?, ?, ?)",
                (episode_id, podcast_ids[podcast_title], cleaned_title),
            )
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def library(tmp_path: Path) -> LibraryPaths:
    """Empty podcast app library layout."""
    base_dir = tmp_path / "Group Containers" / "243LU875E5.groups.com.apple.podcasts"
    paths = LibraryPaths(
        base_dir=base_dir,
        catalog_path=base_dir / "Documents" / "MTLibrary.sqlite",
        cache_dir=base_dir / "Library" / "Cache",
    )
    paths.cache_dir.mkdir(parents=True)
    paths.catalog_path.parent.mkdir(parents=True)
    return paths


@pytest.fixture
def fake_mp3() -> Callable[..., Path]:
    """Factory writing fake MP3 files."""
    return write_fake_mp3


@pytest.fixture
def catalog() -> Callable[..., Path]:
    """Factory creating catalog databases."""
    return create_catalog

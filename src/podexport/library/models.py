"""Data models for the podcast app library."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class LibraryPaths(BaseModel):
    """Locations inside the podcast app's private data directory."""

    base_dir: Path = Field(..., description="App group container directory")
    catalog_path: Path = Field(..., description="SQLite episode catalog")
    cache_dir: Path = Field(..., description="Downloaded episode audio files")


class CatalogRow(BaseModel, frozen=True):
    """One episode row from the app catalog."""

    episode_id: str = Field(..., description="Opaque episode identifier")
    podcast_title: Optional[str] = Field(None, description="Title of the show")
    cleaned_episode_title: Optional[str] = Field(
        None, description="Episode title as cleaned by the app"
    )


class CacheEntry(BaseModel, frozen=True):
    """A downloaded audio file found in the app cache."""

    file_name: str
    episode_id: str
    source_path: Path

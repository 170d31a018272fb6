"""Data models for the export pipeline.

This module defines Pydantic models for:
- Resolved episodes (cache file joined with catalog metadata)
- Export groups (episodes sharing a podcast title)
- Per-file outcomes and the run report
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from podexport.library.models import CatalogRow

TitleSource = Literal["catalog", "embedded", "episode_id"]


class ResolvedEpisode(BaseModel, frozen=True):
    """A cache file with its final podcast and episode names.

    Example:
        >>> episode = ResolvedEpisode(
        ...     episode_id="abc",
        ...     source_path=Path("/cache/abc.mp3"),
        ...     podcast_title="Tech Talk",
        ...     display_title="Episode 1",
        ...     title_source="catalog",
        ... )
    """

    episode_id: str
    source_path: Path
    podcast_title: str = Field(..., min_length=1)
    display_title: str = Field(..., min_length=1)
    title_source: TitleSource
    matched_catalog_row: Optional[CatalogRow] = None


class ExportGroup(BaseModel):
    """Episodes exported into one podcast folder, in discovery order."""

    podcast_title: str
    members: list[ResolvedEpisode] = Field(default_factory=list)


class FileOutcome(BaseModel):
    """Result of exporting a single episode."""

    episode_id: str
    source_path: Path
    destination: Path
    success: bool
    error: Optional[str] = None


class ExportReport(BaseModel):
    """Summary of an export run."""

    output_dir: Path
    outcomes: list[FileOutcome] = Field(default_factory=list)

    @property
    def exported(self) -> list[FileOutcome]:
        """Episodes that were copied and retagged."""
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[FileOutcome]:
        """Episodes skipped because of a per-file error."""
        return [o for o in self.outcomes if not o.success]

    @property
    def total(self) -> int:
        return len(self.outcomes)

"""Configuration schema models using Pydantic."""

from datetime import date
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ExportConfig(BaseModel):
    """Global podexport configuration."""

    version: str = "1"

    # Destination
    output_root: Path = Field(default=Path("~/Downloads/PodcastsExport"))
    dated_subfolder: bool = True  # Append a YYYY.MM.DD folder per run
    reveal_output: bool = True  # Open the output folder when done

    # Podcast app location
    library_dir: Path | None = None  # If None, search group_containers_dir
    group_containers_dir: Path = Field(default=Path("~/Library/Group Containers"))
    container_marker: str = "groups.com.apple.podcasts"

    # Naming and tagging
    audio_extension: str = "mp3"
    max_filename_length: int = Field(default=50, ge=1, le=255)
    fallback_podcast_title: str = Field(default="Unknown Artist", min_length=1)
    genre: str = "Podcast"

    log_level: LogLevel = "INFO"

    def output_dir(self, today: date | None = None) -> Path:
        """Resolve the directory this run exports into.

        Args:
            today: Date used for the dated subfolder (default: today)

        Returns:
            Expanded output directory path
        """
        root = self.output_root.expanduser()
        if not self.dated_subfolder:
            return root
        today = today or date.today()
        return root / today.strftime("%Y.%m.%d")

"""Export orchestrator.

Drives the whole run: enumerate the cache, read the catalog, correlate and
group episodes, then materialize every group into the output directory.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from podexport.audio.tags import read_embedded_title
from podexport.config.schema import ExportConfig
from podexport.export.correlator import TitleReader, correlate, group_episodes
from podexport.export.materializer import Materializer, ensure_directory
from podexport.export.models import ExportGroup, ExportReport, FileOutcome
from podexport.export.paths import resolve_destination
from podexport.library.cache import list_cache_files
from podexport.library.catalog import try_read_catalog
from podexport.library.models import CatalogRow, LibraryPaths
from podexport.utils.errors import MaterializeError

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[Path], Awaitable[list[CatalogRow]]]


class Exporter:
    """Export cached podcast episodes into a readable folder tree.

    Groups are exported concurrently; episodes inside a group are exported
    one after another. A failure on one file is logged and recorded in the
    report, and the run continues.

    Example:
        >>> exporter = Exporter(ExportConfig())
        >>> report = await exporter.run(locate_library(config))
        >>> print(f"{len(report.exported)} exported to {report.output_dir}")
    """

    def __init__(
        self,
        config: ExportConfig,
        materializer: Materializer | None = None,
        title_reader: TitleReader = read_embedded_title,
        catalog_loader: CatalogLoader = try_read_catalog,
    ) -> None:
        """Initialize exporter.

        Args:
            config: Export configuration
            materializer: Materializer instance (creates one if None)
            title_reader: Reads embedded titles for files missing from the catalog
            catalog_loader: Loads catalog rows, returning [] when unavailable
        """
        self.config = config
        self.materializer = materializer or Materializer(genre=config.genre)
        self.title_reader = title_reader
        self.catalog_loader = catalog_loader

    async def run(self, paths: LibraryPaths, output_dir: Path | None = None) -> ExportReport:
        """Run a full export.

        Args:
            paths: Podcast app library locations
            output_dir: Export root (default: from config)

        Returns:
            ExportReport with one outcome per cached file

        Raises:
            CacheDirectoryUnavailableError: If the cache can't be listed
        """
        output_dir = output_dir or self.config.output_dir()

        entries = await list_cache_files(paths.cache_dir, self.config.audio_extension)
        rows = await self.catalog_loader(paths.catalog_path)

        episodes = await correlate(
            entries,
            rows,
            fallback_podcast_title=self.config.fallback_podcast_title,
            title_reader=self.title_reader,
        )
        groups = group_episodes(episodes)
        logger.info(f"Exporting {len(episodes)} episodes from {len(groups)} podcasts")

        await ensure_directory(output_dir)

        group_outcomes = await asyncio.gather(
            *(self.export_group(group, output_dir) for group in groups)
        )

        report = ExportReport(
            output_dir=output_dir,
            outcomes=[outcome for outcomes in group_outcomes for outcome in outcomes],
        )
        if report.failed:
            logger.warning(
                f"{len(report.failed)} of {report.total} episodes could not be exported"
            )
        return report

    def destinations_for(self, group: ExportGroup, output_dir: Path) -> list[Path]:
        """Resolve a destination for each member of a group, in member order."""
        destinations = [
            resolve_destination(
                output_dir,
                episode.podcast_title,
                episode.display_title,
                extension=self.config.audio_extension,
                max_length=self.config.max_filename_length,
                fallback=episode.episode_id,
            )
            for episode in group.members
        ]

        # Not deduplicated: later episodes overwrite earlier ones. Compared
        # case-insensitively since macOS and Windows filesystems are.
        seen: set[str] = set()
        for episode, destination in zip(group.members, destinations):
            key = str(destination).casefold()
            if key in seen:
                logger.warning(
                    f"{episode.source_path.name} resolves to {destination}, "
                    f"which another episode in '{group.podcast_title}' also uses; "
                    f"it will be overwritten"
                )
            seen.add(key)

        return destinations

    async def export_group(self, group: ExportGroup, output_dir: Path) -> list[FileOutcome]:
        """Export all members of one group sequentially."""
        destinations = self.destinations_for(group, output_dir)
        outcomes = []

        for episode, destination in zip(group.members, destinations):
            try:
                await self.materializer.materialize(episode, destination)
            except MaterializeError as e:
                logger.error(
                    f"Skipping {e.source} -> {e.destination}: {e.__cause__ or e}"
                )
                outcomes.append(
                    FileOutcome(
                        episode_id=episode.episode_id,
                        source_path=episode.source_path,
                        destination=destination,
                        success=False,
                        error=str(e.__cause__ or e),
                    )
                )
                continue

            outcomes.append(
                FileOutcome(
                    episode_id=episode.episode_id,
                    source_path=episode.source_path,
                    destination=destination,
                    success=True,
                )
            )

        return outcomes

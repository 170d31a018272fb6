"""Correlation and materialization of exported episodes."""

from podexport.export.correlator import correlate, group_episodes, resolve_display_title
from podexport.export.exporter import Exporter
from podexport.export.materializer import Materializer
from podexport.export.models import ExportGroup, ExportReport, FileOutcome, ResolvedEpisode
from podexport.export.paths import resolve_destination, sanitize_segment

__all__ = [
    "ExportGroup",
    "ExportReport",
    "Exporter",
    "FileOutcome",
    "Materializer",
    "ResolvedEpisode",
    "correlate",
    "group_episodes",
    "resolve_destination",
    "resolve_display_title",
    "sanitize_segment",
]

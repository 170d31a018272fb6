"""Audio metadata module for podexport."""

from podexport.audio.tags import EpisodeTags, read_embedded_title, write_tags

__all__ = [
    "EpisodeTags",
    "read_embedded_title",
    "write_tags",
]

"""Build safe destination paths from untrusted podcast and episode titles.

Naming policy: titles are sanitized first and truncated second, so the
length limit always applies to the final on-disk name. Episode file stems are
limited to a configurable number of characters; every segment, podcast
folders included, is also kept within 255 UTF-8 bytes (NAME_MAX on common
filesystems).
"""

import re
from pathlib import Path

# Path separators, characters Windows/macOS reject, and control chars (incl. NUL)
ILLEGAL_CHARS = re.compile(r'[\x00-\x1f\x7f/\\:*?"<>|]')
WHITESPACE = re.compile(r"\s+")

RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

DEFAULT_FALLBACK = "_"
MAX_NAME_BYTES = 255


def _replace_illegal(text: str) -> str:
    text = WHITESPACE.sub(" ", text)
    return ILLEGAL_CHARS.sub("_", text)


def _finalize(text: str, fallback: str) -> str:
    """Strip edge whitespace/dots, guard reserved names, fall back if empty."""
    text = text.strip(" .")
    if not text:
        return fallback
    if text.split(".", 1)[0].upper() in RESERVED_NAMES:
        return f"_{text}"
    return text


def _safe_fallback(fallback: str) -> str:
    return _finalize(_replace_illegal(fallback), DEFAULT_FALLBACK)


def sanitize_segment(text: str, fallback: str = DEFAULT_FALLBACK) -> str:
    """Make arbitrary text usable as a single path segment.

    Args:
        text: Untrusted title text
        fallback: Used when nothing usable remains

    Returns:
        Non-empty segment without separators or reserved characters

    Example:
        >>> sanitize_segment("AC/DC: Live?")
        'AC_DC_ Live_'
    """
    return _finalize(_replace_illegal(text), _safe_fallback(fallback))


def truncate_name(text: str, max_length: int, max_bytes: int | None = None) -> str:
    """Cut text to at most ``max_length`` characters and ``max_bytes`` UTF-8 bytes."""
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")
    text = text[:max_length]
    if max_bytes is not None:
        while text and len(text.encode("utf-8")) > max_bytes:
            text = text[:-1]
    return text


def _fits(text: str, max_length: int, max_bytes: int) -> bool:
    return len(text) <= max_length and len(text.encode("utf-8")) <= max_bytes


def _fit_segment(text: str, max_length: int, max_bytes: int, fallback: str) -> str:
    """Sanitize, then truncate until the segment fits both limits."""
    safe_fallback = _finalize(
        truncate_name(_safe_fallback(fallback), max_length, max_bytes), DEFAULT_FALLBACK
    )
    name = sanitize_segment(text, safe_fallback)
    while not _fits(name, max_length, max_bytes):
        shorter = _finalize(truncate_name(name, max_length, max_bytes), safe_fallback)
        if shorter == name:
            break
        name = shorter
    return name


def episode_file_stem(
    display_title: str,
    max_length: int,
    fallback: str = DEFAULT_FALLBACK,
    max_bytes: int = MAX_NAME_BYTES - len(".mp3"),
) -> str:
    """Sanitize then truncate an episode title into a file name stem."""
    return _fit_segment(display_title, max_length, max_bytes, fallback)


def podcast_folder_name(podcast_title: str, fallback: str = DEFAULT_FALLBACK) -> str:
    """Sanitize a podcast title into a folder name within NAME_MAX."""
    return _fit_segment(podcast_title, MAX_NAME_BYTES, MAX_NAME_BYTES, fallback)


def resolve_destination(
    output_dir: Path,
    podcast_title: str,
    display_title: str,
    extension: str = "mp3",
    max_length: int = 50,
    fallback: str = DEFAULT_FALLBACK,
) -> Path:
    """Destination path ``{output_dir}/{podcast}/{episode}.{extension}``.

    Args:
        output_dir: Export root for this run
        podcast_title: Group folder name (sanitized, byte-limited)
        display_title: Episode name (sanitized, then truncated)
        extension: Audio extension without the dot
        max_length: Maximum length of the episode file stem in characters
        fallback: Name used when a title sanitizes to nothing

    Returns:
        Two levels below output_dir
    """
    suffix = f".{extension}"
    folder = podcast_folder_name(podcast_title, fallback)
    stem = episode_file_stem(
        display_title,
        max_length,
        fallback,
        max_bytes=MAX_NAME_BYTES - len(suffix.encode("utf-8")),
    )
    return output_dir / folder / f"{stem}{suffix}"

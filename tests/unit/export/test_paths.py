"""Tests for destination path resolution."""

from pathlib import Path

import pytest

from podexport.export.paths import (
    MAX_NAME_BYTES,
    episode_file_stem,
    resolve_destination,
    sanitize_segment,
    truncate_name,
)

NASTY_TITLES = [
    "../../etc/passwd",
    "..",
    "a\\b\\c",
    "null\x00byte",
    'what? "really" <yes> | no: *maybe*',
    "tab\tand\nnewline",
    "  .hidden.  ",
    "CON",
    "/",
    "C:\\Windows",
]


class TestSanitizeSegment:
    """Tests for sanitize_segment."""

    def test_plain_title_unchanged(self) -> None:
        assert sanitize_segment("Episode 1") == "Episode 1"

    def test_unicode_kept(self) -> None:
        assert sanitize_segment("Café – Épisode 3") == "Café – Épisode 3"

    def test_replaces_separators(self) -> None:
        assert sanitize_segment("AC/DC\\Live") == "AC_DC_Live"

    def test_replaces_reserved_characters(self) -> None:
        assert sanitize_segment('a:b*c?d"e<f>g|h') == "a_b_c_d_e_f_g_h"

    def test_replaces_nul_and_control_characters(self) -> None:
        assert sanitize_segment("null\x00byte\x07") == "null_byte_"

    def test_collapses_whitespace(self) -> None:
        assert sanitize_segment("tab\tand\n\nnewline") == "tab and newline"

    def test_strips_edge_whitespace_and_dots(self) -> None:
        assert sanitize_segment("  .hidden.  ") == "hidden"

    @pytest.mark.parametrize("title", ["..", ".", "   ", " . . "])
    def test_empty_after_sanitizing_uses_fallback(self, title: str) -> None:
        assert sanitize_segment(title, fallback="abc") == "abc"

    def test_default_fallback(self) -> None:
        assert sanitize_segment("..") == "_"

    @pytest.mark.parametrize("title", ["CON", "con", "NUL.txt", "com1", "LPT9"])
    def test_reserved_device_names_prefixed(self, title: str) -> None:
        assert sanitize_segment(title) == f"_{title}"

    def test_reserved_prefix_only_on_exact_name(self) -> None:
        assert sanitize_segment("Conference") == "Conference"

    @pytest.mark.parametrize("title", NASTY_TITLES)
    def test_no_unsafe_characters_survive(self, title: str) -> None:
        segment = sanitize_segment(title)

        assert segment
        assert not any(ch in segment for ch in '/\\\x00:*?"<>|')
        assert segment not in (".", "..")
        assert segment == segment.strip(" .")


class TestTruncateName:
    """Tests for truncate_name."""

    def test_short_name_unchanged(self) -> None:
        assert truncate_name("abc", 50) == "abc"

    def test_cuts_to_length(self) -> None:
        assert truncate_name("a" * 60, 50) == "a" * 50

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            truncate_name("abc", 0)

    def test_cuts_to_byte_limit(self) -> None:
        assert truncate_name("é" * 10, 50, max_bytes=5) == "é" * 2

    def test_never_splits_a_character(self) -> None:
        assert truncate_name("😀" * 10, 50, max_bytes=7) == "😀"


class TestEpisodeFileStem:
    """Tests for sanitize-then-truncate naming."""

    def test_exactly_at_limit(self) -> None:
        assert episode_file_stem("a" * 50, 50) == "a" * 50

    def test_long_title_truncated(self) -> None:
        assert episode_file_stem("a" * 80, 50) == "a" * 50

    def test_only_too_long_before_sanitizing(self) -> None:
        """Test characters removed by sanitizing don't count against the limit."""
        title = "   " + "a" * 50 + " .. "

        assert episode_file_stem(title, 50) == "a" * 50

    def test_illegal_characters_count_after_replacement(self) -> None:
        """Test a title at the limit keeps its length once separators are replaced."""
        title = "a" * 24 + "/" + "b" * 25

        stem = episode_file_stem(title, 50)

        assert stem == "a" * 24 + "_" + "b" * 25
        assert len(stem) == 50

    def test_long_title_with_illegal_characters(self) -> None:
        title = "Part 1/2: " + "x" * 60

        stem = episode_file_stem(title, 50)

        assert len(stem) == 50
        assert stem.startswith("Part 1_2_ x")

    def test_trailing_space_after_cut_stripped(self) -> None:
        title = "a" * 49 + " " + "b" * 10

        assert episode_file_stem(title, 50) == "a" * 49

    def test_cut_into_reserved_name(self) -> None:
        stem = episode_file_stem("CON.part two of the story", 5)

        assert not stem.upper().startswith("CON")
        assert len(stem) <= 5

    def test_fallback_when_empty(self) -> None:
        assert episode_file_stem("...", 50, fallback="qqq") == "qqq"

    def test_long_fallback_truncated(self) -> None:
        assert episode_file_stem("...", 10, fallback="f" * 20) == "f" * 10

    def test_multibyte_title_capped_in_bytes(self) -> None:
        """Test a stem within max_length characters still fits the byte limit."""
        limit = MAX_NAME_BYTES - len(".mp3")

        stem = episode_file_stem("😀" * 100, 100)

        assert stem == "😀" * (limit // 4)

    def test_byte_limit_at_boundary(self) -> None:
        limit = MAX_NAME_BYTES - len(".mp3")

        assert episode_file_stem("a" * limit, 255) == "a" * limit
        assert episode_file_stem("a" * (limit + 1), 255) == "a" * limit


class TestResolveDestination:
    """Tests for resolve_destination."""

    def test_basic_layout(self, tmp_path: Path) -> None:
        destination = resolve_destination(tmp_path, "Tech Talk", "Episode 1")

        assert destination == tmp_path / "Tech Talk" / "Episode 1.mp3"

    def test_separator_in_title_stays_two_levels(self, tmp_path: Path) -> None:
        destination = resolve_destination(tmp_path, "Tech Talk", "Part 1/2")

        assert destination == tmp_path / "Tech Talk" / "Part 1_2.mp3"
        assert len(destination.relative_to(tmp_path).parts) == 2

    def test_podcast_title_not_cut_by_max_length(self, tmp_path: Path) -> None:
        podcast = "P" * 80

        destination = resolve_destination(tmp_path, podcast, "Episode", max_length=50)

        assert destination.parent.name == podcast

    def test_long_multibyte_podcast_title_fits_filesystem(self, tmp_path: Path) -> None:
        """Test a 360-byte podcast title is cut to a folder name the OS accepts."""
        podcast = "播客" * 60

        destination = resolve_destination(tmp_path, podcast, "Episode")

        folder = destination.parent.name
        assert len(folder.encode("utf-8")) <= MAX_NAME_BYTES
        assert podcast.startswith(folder)
        assert len(destination.relative_to(tmp_path).parts) == 2

    def test_file_name_fits_with_extension(self, tmp_path: Path) -> None:
        destination = resolve_destination(tmp_path, "Show", "é" * 255, max_length=255)

        assert len(destination.name.encode("utf-8")) <= MAX_NAME_BYTES
        assert destination.suffix == ".mp3"

    def test_custom_extension(self, tmp_path: Path) -> None:
        destination = resolve_destination(tmp_path, "Show", "Ep", extension="m4a")

        assert destination.name == "Ep.m4a"

    @pytest.mark.parametrize("title", NASTY_TITLES)
    def test_untrusted_titles_stay_inside_output(self, tmp_path: Path, title: str) -> None:
        destination = resolve_destination(tmp_path, title, title, fallback="abc")

        relative = destination.relative_to(tmp_path)
        assert len(relative.parts) == 2
        assert ".." not in relative.parts
        assert destination.resolve().is_relative_to(tmp_path.resolve())

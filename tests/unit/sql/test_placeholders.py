"""
Unit tests for placeholder rewriting and allocation.
"""

import re

import pytest

from pgchain.sql.core.placeholders import (
    allocate_placeholders,
    format_placeholder,
    rewrite_placeholders,
)


class TestFormatPlaceholder:
    """Tests for format_placeholder function."""

    def test_first_placeholder(self):
        assert format_placeholder(1) == "$1"

    def test_multi_digit_placeholder(self):
        assert format_placeholder(12) == "$12"


class TestRewritePlaceholders:
    """Tests for rewrite_placeholders function."""

    def test_single_marker_from_zero(self):
        """First marker becomes $1 and the counter advances by one."""
        text, counter = rewrite_placeholders("age > ?", 0)
        assert text == "age > $1"
        assert counter == 1

    def test_multiple_markers_are_consecutive(self):
        """Markers are numbered left to right from the previous counter."""
        text, counter = rewrite_placeholders("a = ? AND b = ? AND c = ?", 3)
        assert text == "a = $4 AND b = $5 AND c = $6"
        assert counter == 6

    def test_no_markers_returns_input_verbatim(self):
        """A condition without markers is unchanged and leaves the counter alone."""
        condition = "deleted_at IS NULL"
        text, counter = rewrite_placeholders(condition, 7)
        assert text == condition
        assert counter == 7

    def test_empty_string(self):
        assert rewrite_placeholders("", 2) == ("", 2)

    def test_existing_numbered_placeholders_are_not_renumbered(self):
        """Only literal '?' characters are targets."""
        text, counter = rewrite_placeholders("id = $1 OR parent_id = ?", 1)
        assert text == "id = $1 OR parent_id = $2"
        assert counter == 2

    def test_adjacent_markers(self):
        text, counter = rewrite_placeholders("??", 0)
        assert text == "$1$2"
        assert counter == 2

    def test_non_ascii_text_passes_through(self):
        text, _ = rewrite_placeholders("名称 = ?", 0)
        assert text == "名称 = $1"

    @pytest.mark.parametrize(
        "condition",
        [
            "x = ?",
            "x IN (?, ?, ?)",
            "a = ? OR (b = ? AND c LIKE ?) OR d BETWEEN ? AND ?",
            "no markers at all",
        ],
    )
    @pytest.mark.parametrize("start", [0, 1, 9])
    def test_placeholder_count_matches_marker_count(self, condition, start):
        """Generated placeholders equal the marker count and are contiguous."""
        text, counter = rewrite_placeholders(condition, start)
        numbers = [int(n) for n in re.findall(r"\$(\d+)", text)]

        assert len(numbers) == condition.count("?")
        assert numbers == list(range(start + 1, start + 1 + len(numbers)))
        assert counter == start + len(numbers)
        assert "?" not in text


class TestAllocatePlaceholders:
    """Tests for allocate_placeholders function."""

    def test_allocates_from_counter(self):
        placeholders, counter = allocate_placeholders(2, 0)
        assert placeholders == ["$1", "$2"]
        assert counter == 2

    def test_continues_after_existing_placeholders(self):
        placeholders, counter = allocate_placeholders(3, 4)
        assert placeholders == ["$5", "$6", "$7"]
        assert counter == 7

    def test_zero_count(self):
        assert allocate_placeholders(0, 5) == ([], 5)

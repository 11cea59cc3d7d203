"""Tests for command suggestions."""

import pytest

from webterm.suggestions import (
    KNOWN_COMMANDS,
    fuzzy_suggestions,
    get_command_suggestions,
    similarity,
)


class TestPrefixSuggestions:
    """Test as-you-type completion."""

    def test_h_contains_help(self):
        assert "help" in [s.command for s in get_command_suggestions("h")]

    def test_blank_is_empty(self):
        assert get_command_suggestions("") == []
        assert get_command_suggestions("   ") == []

    def test_table_order(self):
        """Matches keep the command table order."""
        assert [s.command for s in get_command_suggestions("c")] == [
            "clear", "contact", "cd", "cat",
        ]

    def test_case_insensitive(self):
        assert [s.command for s in get_command_suggestions("NEO")] == ["neofetch"]

    def test_no_match(self):
        assert get_command_suggestions("zz") == []

    def test_deterministic(self):
        assert get_command_suggestions("e") == get_command_suggestions("e")


class TestFuzzySuggestions:
    """Test near-miss ranking."""

    def test_transposition(self):
        assert fuzzy_suggestions("hlep")[0].command == "help"

    def test_exact_scores_highest(self):
        best = fuzzy_suggestions("ls")[0]
        assert best.command == "ls"
        assert best.score == 1.0

    def test_limit(self):
        assert len(fuzzy_suggestions("c", limit=2)) <= 2

    def test_nothing_close(self):
        assert fuzzy_suggestions("qqqqqqqq") == []

    def test_blank(self):
        assert fuzzy_suggestions("") == []

    def test_every_result_above_threshold(self):
        for text in ("ech", "prjects", "nefetch", "x"):
            for suggestion in fuzzy_suggestions(text, KNOWN_COMMANDS):
                assert suggestion.score > 0.3


class TestSimilarity:
    """Test the scoring function."""

    def test_tiers(self):
        assert similarity("help", "help") == 1.0
        assert similarity("hel", "help") == 0.9
        assert similarity("elp", "help") == 0.8

    def test_edit_distance_ratio(self):
        assert similarity("hlep", "help") == 0.5

    def test_edit_distance_over_longer_length(self):
        """Unrelated strings score one minus edit distance over the longer length."""
        assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
        assert similarity("qq", "ls") == 0.0

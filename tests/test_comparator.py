"""Tests for typetrend.core.comparator – character-level comparison."""

from __future__ import annotations

import pytest

from typetrend.core.comparator import (
    CORRECT,
    CURSOR,
    ERROR,
    PENDING,
    ComparisonResult,
    char_states,
    compare,
)


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------

class TestCompare:
    def test_empty_input(self):
        assert compare("", "hello") == ComparisonResult(correct_count=0, error_count=0)

    def test_single_typo(self):
        assert compare("helko", "hello") == ComparisonResult(correct_count=4, error_count=1)

    def test_overtyping_counts_as_errors(self):
        # " world" runs 6 characters past the target
        assert compare("hello world", "hello") == ComparisonResult(correct_count=5, error_count=6)

    def test_perfect_prefix(self):
        assert compare("hel", "hello") == ComparisonResult(correct_count=3, error_count=0)

    def test_total_mismatch(self):
        assert compare("xyz", "abc") == ComparisonResult(correct_count=0, error_count=3)

    def test_empty_target(self):
        assert compare("ab", "") == ComparisonResult(correct_count=0, error_count=2)

    def test_case_sensitive(self):
        assert compare("Hello", "hello").error_count == 1

    @pytest.mark.parametrize(
        "typed, target",
        [
            ("", ""),
            ("abc", "abd"),
            ("a b c d", "a b"),
            ("ab", "abcdef"),
            ("zzzzzzzz", "the quick"),
        ],
    )
    def test_counts_cover_overlap(self, typed: str, target: str):
        result = compare(typed, target)
        overlap = min(len(typed), len(target))
        overtyped = max(0, len(typed) - len(target))
        assert result.correct_count <= overlap
        assert result.correct_count + (result.error_count - overtyped) == overlap
        assert result.error_count >= overtyped


# ---------------------------------------------------------------------------
# char_states
# ---------------------------------------------------------------------------

class TestCharStates:
    def test_nothing_typed(self):
        assert char_states("", "abc") == [CURSOR, PENDING, PENDING]

    def test_mixed(self):
        assert char_states("ax", "abcd") == [CORRECT, ERROR, CURSOR, PENDING]

    def test_fully_typed_has_no_cursor(self):
        assert char_states("abc", "abc") == [CORRECT, CORRECT, CORRECT]

    def test_overtyping_ignored(self):
        assert char_states("abcdef", "abc") == [CORRECT, CORRECT, CORRECT]

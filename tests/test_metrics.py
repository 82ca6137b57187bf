"""Tests for typetrend.core.metrics – live and final typing metrics."""

from __future__ import annotations

import pytest

from typetrend.core.metrics import (
    FinalMetrics,
    LiveMetrics,
    compute_live,
    display_wpm,
    elapsed_minutes,
    final_metrics,
    format_elapsed,
)


# ---------------------------------------------------------------------------
# elapsed_minutes
# ---------------------------------------------------------------------------

class TestElapsedMinutes:
    def test_zero_clamps_to_one_second(self):
        assert elapsed_minutes(0) == pytest.approx(1 / 60)

    def test_one_second_equals_clamp(self):
        assert elapsed_minutes(1) == pytest.approx(1 / 60)

    def test_regular_value(self):
        assert elapsed_minutes(90) == pytest.approx(1.5)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            elapsed_minutes(-1)


# ---------------------------------------------------------------------------
# compute_live
# ---------------------------------------------------------------------------

class TestComputeLive:
    def test_formulas_after_one_minute(self):
        # 50 correct characters followed by 2 mismatches
        target = "a" * 52
        typed = "a" * 50 + "bb"
        m = compute_live(typed, target, 60)
        assert m.raw_wpm == pytest.approx(10.0)
        assert m.adjusted_wpm == pytest.approx(8.0)
        assert m.cpm == pytest.approx(50.0)
        assert m.accuracy_percent == pytest.approx(100 * 50 / 52)

    def test_empty_input_accuracy_is_100(self):
        m = compute_live("", "hello", 0)
        assert m == LiveMetrics(raw_wpm=0.0, adjusted_wpm=0.0, accuracy_percent=100.0, cpm=0.0)

    def test_zero_elapsed_uses_one_second(self):
        m = compute_live("hello", "hello", 0)
        # 1 word in 1/60 minute
        assert m.raw_wpm == pytest.approx(60.0)
        assert m.cpm == pytest.approx(300.0)

    def test_adjusted_wpm_can_be_negative(self):
        m = compute_live("xxxxx", "hello", 60)
        assert m.raw_wpm == 0.0
        assert m.adjusted_wpm == pytest.approx(-5.0)

    def test_overtyping_lowers_accuracy(self):
        m = compute_live("hello world", "hello", 30)
        assert m.accuracy_percent == pytest.approx(100 * 5 / 11)

    def test_negative_elapsed_rejected(self):
        with pytest.raises(ValueError):
            compute_live("a", "a", -5)


# ---------------------------------------------------------------------------
# final_metrics
# ---------------------------------------------------------------------------

class TestFinalMetrics:
    def test_exact_elapsed_time(self):
        result = final_metrics("hello world", "hello world", 30_000)
        # 11 correct chars = 2.2 words in half a minute
        assert result.wpm == pytest.approx(4.4)
        assert result.accuracy_percent == pytest.approx(100.0)

    def test_zero_elapsed_gives_zero_wpm(self):
        assert final_metrics("abc", "abc", 0).wpm == 0.0

    def test_empty_input_accuracy_is_zero(self):
        assert final_metrics("", "abc", 5_000) == FinalMetrics(wpm=0.0, accuracy_percent=0.0)

    def test_negative_elapsed_rejected(self):
        with pytest.raises(ValueError):
            final_metrics("a", "a", -1)


# ---------------------------------------------------------------------------
# display helpers
# ---------------------------------------------------------------------------

class TestDisplayHelpers:
    def test_display_wpm_clamps_negative(self):
        assert display_wpm(-3.5) == 0.0

    def test_display_wpm_keeps_positive(self):
        assert display_wpm(42.5) == 42.5

    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "00:00"), (5, "00:05"), (65, "01:05"), (600, "10:00"), (-3, "00:00")],
    )
    def test_format_elapsed(self, seconds: int, expected: str):
        assert format_elapsed(seconds) == expected

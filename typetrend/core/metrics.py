from __future__ import annotations

from dataclasses import dataclass

from typetrend import config
from typetrend.core.comparator import compare

MIN_MINUTES = 1.0 / 60.0


@dataclass(frozen=True)
class LiveMetrics:
    """Metrics for the session in progress.

    ``adjusted_wpm`` is left unclamped and may be negative when errors
    outnumber typed words; use :func:`display_wpm` before showing it.
    """

    raw_wpm: float
    adjusted_wpm: float
    accuracy_percent: float
    cpm: float


@dataclass(frozen=True)
class FinalMetrics:
    wpm: float
    accuracy_percent: float


def elapsed_minutes(elapsed_seconds: float) -> float:
    """Elapsed time in minutes, never below one second's worth."""
    if elapsed_seconds < 0:
        raise ValueError(f"elapsed_seconds must not be negative, got {elapsed_seconds}")
    return max(elapsed_seconds / 60.0, MIN_MINUTES)


def compute_live(typed: str, target: str, elapsed_seconds: float) -> LiveMetrics:
    result = compare(typed, target)
    minutes = elapsed_minutes(elapsed_seconds)
    words = result.correct_count / config.WORD_LENGTH
    if typed:
        accuracy = 100.0 * result.correct_count / len(typed)
    else:
        accuracy = 100.0
    return LiveMetrics(
        raw_wpm=words / minutes,
        adjusted_wpm=(words - result.error_count) / minutes,
        accuracy_percent=accuracy,
        cpm=result.correct_count / minutes,
    )


def final_metrics(typed: str, target: str, elapsed_ms: float) -> FinalMetrics:
    """Figures stored for a completed session, using exact elapsed time."""
    if elapsed_ms < 0:
        raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")
    correct = compare(typed, target).correct_count
    minutes = elapsed_ms / 60000.0
    wpm = (correct / config.WORD_LENGTH) / minutes if minutes > 0 else 0.0
    accuracy = 100.0 * correct / len(typed) if typed else 0.0
    return FinalMetrics(wpm=wpm, accuracy_percent=accuracy)


def display_wpm(value: float) -> float:
    return max(0.0, value)


def format_elapsed(seconds: int) -> str:
    """Render whole seconds as MM:SS."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from typetrend import config
from typetrend.core.store import SessionRecord


@dataclass(frozen=True)
class WindowAverage:
    avg_wpm: float = 0.0
    avg_accuracy: float = 0.0


@dataclass(frozen=True)
class Aggregates:
    hourly: WindowAverage
    daily: WindowAverage
    overall: WindowAverage


def average(records: Sequence[SessionRecord]) -> WindowAverage:
    """Unweighted means; an empty window averages to zero."""
    if not records:
        return WindowAverage()
    count = len(records)
    return WindowAverage(
        avg_wpm=sum(r.wpm for r in records) / count,
        avg_accuracy=sum(r.accuracy_percent for r in records) / count,
    )


def within(records: Sequence[SessionRecord], now_ms: int, window_ms: int) -> list[SessionRecord]:
    return [r for r in records if now_ms - r.timestamp <= window_ms]


def aggregate(records: Sequence[SessionRecord], now_ms: int) -> Aggregates:
    return Aggregates(
        hourly=average(within(records, now_ms, config.HOUR_MS)),
        daily=average(within(records, now_ms, config.DAY_MS)),
        overall=average(records),
    )

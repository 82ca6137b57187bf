"""Character-level comparison of typed input against the practice text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ComparisonResult:
    correct_count: int = 0
    error_count: int = 0


def compare(typed: str, target: str) -> ComparisonResult:
    """Compare *typed* with *target* position by position.

    Mismatches inside the overlapping prefix are errors, and every character
    typed past the end of *target* is an error as well.
    """
    correct = 0
    errors = 0
    for a, b in zip(typed, target):
        if a == b:
            correct += 1
        else:
            errors += 1
    errors += max(0, len(typed) - len(target))
    return ComparisonResult(correct_count=correct, error_count=errors)


CORRECT = "correct"
ERROR = "error"
CURSOR = "cursor"
PENDING = "pending"


def char_states(typed: str, target: str) -> List[str]:
    """Classify each character of *target* for display."""
    states: List[str] = []
    for idx, char in enumerate(target):
        if idx < len(typed):
            states.append(CORRECT if typed[idx] == char else ERROR)
        elif idx == len(typed):
            states.append(CURSOR)
        else:
            states.append(PENDING)
    return states

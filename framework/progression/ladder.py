"""
Threshold ladder math shared by every progression track.

A ladder is an ordered sequence of thresholds. Index i holds the amount
needed to reach level i + 2; level 1 needs nothing. Levels are 1-based,
so the requirement for leaving level N lives at index N - 1, and a
ladder of length L tops out at level L + 1.
"""

from __future__ import annotations

from typing import Sequence


def can_climb(level: int, value: int, thresholds: Sequence[int]) -> bool:
    """
    True if value meets the requirement for leaving the current level.

    Callers step one rung at a time and re-check against live state, so
    a single large grant that crosses several rungs reaches every
    intermediate level in order.

    Args:
        level: Current level (1-based)
        value: Current accumulated resource
        thresholds: The ladder
    """
    return level <= len(thresholds) and value >= thresholds[level - 1]


def is_maxed(level: int, thresholds: Sequence[int]) -> bool:
    """True once the level is past the last rung."""
    return level > len(thresholds)


def to_next_level(level: int, value: int, thresholds: Sequence[int]) -> int:
    """Amount still needed for the next level, or 0 past the last rung."""
    if is_maxed(level, thresholds):
        return 0
    return thresholds[level - 1] - value


def band_progress(value: int, lower: int, upper: int) -> float:
    """
    Fraction of the band [lower, upper] covered by value, clamped to 0..1.

    A zero-width or inverted band counts as complete.
    """
    width = upper - lower
    if width <= 0:
        return 1.0
    return max(0.0, min(1.0, (value - lower) / width))


def level_progress(level: int, value: int, thresholds: Sequence[int]) -> float:
    """Progress through the current rung (0-1), 1.0 past the last rung."""
    if is_maxed(level, thresholds):
        return 1.0
    lower = thresholds[level - 2] if level > 1 else 0
    upper = thresholds[level - 1]
    return band_progress(value, lower, upper)


def rank_for(value: int, thresholds: Sequence[int]) -> int:
    """
    Highest rank index whose minimum is met by value.

    Scans from the top down and returns 0 when nothing qualifies.
    """
    for index in range(len(thresholds) - 1, -1, -1):
        if value >= thresholds[index]:
            return index
    return 0


def is_strictly_increasing(thresholds: Sequence[int]) -> bool:
    return all(a < b for a, b in zip(thresholds, thresholds[1:]))

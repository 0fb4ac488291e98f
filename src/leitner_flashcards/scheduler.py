"""Modified-Leitner practice selection.

Bucket 0 is practiced every day. Bucket i (1 <= i <= max_bucket) is practiced
on the days divisible by its review interval, so with the default intervals
(4, 10, 30, 100) bucket 1 comes up on days 0, 4, 8, ..., bucket 4 on days 0,
100, 200, ... Cards in buckets past the last interval are never selected.
"""

from __future__ import annotations

from typing import Sequence

from .config import LeitnerConfig, load_config
from .models import Flashcard


def _interval_for(bucket: int, config: LeitnerConfig) -> int | None:
    if bucket < 1 or bucket > config.max_bucket:
        return None
    return config.review_intervals[bucket - 1]


def is_bucket_due(bucket: int, day: int, config: LeitnerConfig | None = None) -> bool:
    """True when cards in ``bucket`` should be practiced on ``day``."""
    if bucket == 0:
        return True
    interval = _interval_for(bucket, config or load_config())
    if interval is None:
        return False
    return day % interval == 0


def next_due_day(bucket: int, day: int, config: LeitnerConfig | None = None) -> int | None:
    """First day after ``day`` on which ``bucket`` is practiced again.

    Returns None for buckets the schedule never selects.
    """
    if bucket == 0:
        return day + 1
    interval = _interval_for(bucket, config or load_config())
    if interval is None:
        return None
    return (day // interval + 1) * interval


def practice(
    bucket_sets: Sequence[set[Flashcard]],
    day: int,
    config: LeitnerConfig | None = None,
) -> set[Flashcard]:
    """Cards to practice on ``day`` (counted from 0).

    Returns a new set; ``bucket_sets`` is left untouched.
    """
    settings = config or load_config()
    due: set[Flashcard] = set()
    for bucket, cards in enumerate(bucket_sets):
        if is_bucket_due(bucket, day, settings):
            due.update(cards)
    return due


__all__ = [
    "is_bucket_due",
    "next_due_day",
    "practice",
]

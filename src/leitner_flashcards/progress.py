"""Learning progress summary over either bucket representation."""

from __future__ import annotations

from typing import Any, Sequence

from .buckets import get_bucket_range, to_bucket_sets
from .models import ArrayForm, BucketState, MappingForm, ProgressReport


def compute_progress(buckets: BucketState, history: Sequence[Any] | None = None) -> ProgressReport:
    """Card totals per bucket for ``buckets``.

    ``bucket_distribution[i]`` is the number of cards in bucket i, with 0 for
    every bucket up to the highest one that has an entry. ``history`` is
    accepted for per-card trial history and is not used yet; pass None.
    """
    if isinstance(buckets, ArrayForm):
        bucket_sets = buckets.buckets
    elif isinstance(buckets, MappingForm):
        bucket_sets = to_bucket_sets(buckets.buckets)
    else:
        raise TypeError(f"Unsupported bucket state: {type(buckets).__name__}")

    distribution = [len(cards) for cards in bucket_sets]
    return ProgressReport(
        total_cards=sum(distribution),
        bucket_distribution=distribution,
        bucket_range=get_bucket_range(bucket_sets),
    )


__all__ = ["compute_progress"]

"""Conversions between the two bucket representations, and the occupied-bucket range."""

from __future__ import annotations

from typing import Sequence

from .models import BucketMap, BucketRange, BucketSets, Flashcard


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """Dense list where element i is the set of cards in bucket i.

    Bucket numbers missing from the mapping get an empty set. The sets are the
    ones held by ``buckets``, not copies.
    """
    max_bucket = max(buckets, default=-1)
    bucket_sets: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket_number, cards in buckets.items():
        bucket_sets[bucket_number] = cards
    return bucket_sets


def to_bucket_map(bucket_sets: Sequence[set[Flashcard]]) -> BucketMap:
    """Sparse mapping of the non-empty buckets in ``bucket_sets``."""
    return {bucket_number: cards for bucket_number, cards in enumerate(bucket_sets) if cards}


def get_bucket_range(bucket_sets: Sequence[set[Flashcard]]) -> BucketRange | None:
    """Lowest and highest bucket holding at least one card, or None if all are empty."""
    occupied = [bucket_number for bucket_number, cards in enumerate(bucket_sets) if cards]
    if not occupied:
        return None
    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


__all__ = [
    "get_bucket_range",
    "to_bucket_map",
    "to_bucket_sets",
]

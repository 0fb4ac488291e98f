from __future__ import annotations

import logging

from .config import LeitnerConfig, load_config
from .models import AnswerDifficulty, BucketMap, Flashcard, ensure_difficulty

logger = logging.getLogger(__name__)


def next_bucket(
    current: int,
    difficulty: AnswerDifficulty | int | str,
    config: LeitnerConfig | None = None,
) -> int:
    """Bucket a card moves to from ``current`` after answering with ``difficulty``."""
    difficulty = ensure_difficulty(difficulty)
    if difficulty == AnswerDifficulty.WRONG:
        return 0
    if difficulty == AnswerDifficulty.HARD:
        return max(0, current - 1)
    if difficulty == AnswerDifficulty.EASY:
        settings = config or load_config()
        return min(settings.max_bucket, current + 1)
    raise ValueError(f"Unsupported answer difficulty: {difficulty}")  # pragma: no cover - exhaustive enum


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty | int | str,
    config: LeitnerConfig | None = None,
) -> BucketMap:
    """Return a new bucket mapping with ``card`` moved according to ``difficulty``.

    A card that is not in any bucket is treated as sitting in bucket 0. The
    input mapping and its sets are not modified; only the source and target
    buckets get fresh sets in the result. A source bucket emptied by the move
    stays in the result with an empty set.
    """
    difficulty = ensure_difficulty(difficulty)
    updated: BucketMap = dict(buckets)

    current: int | None = None
    for bucket_number, cards in buckets.items():
        if card in cards:
            current = bucket_number
            updated[bucket_number] = cards - {card}
            break

    if current is None:
        logger.debug("Card %r not in any bucket, starting from bucket 0", card.front)
        current = 0

    target = next_bucket(current, difficulty, config)
    updated[target] = updated.get(target, set()) | {card}
    logger.debug("Card %r: bucket %d -> %d (%s)", card.front, current, target, difficulty.name)
    return updated


__all__ = [
    "next_bucket",
    "update",
]

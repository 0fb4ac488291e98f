from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence


class AnswerDifficulty(IntEnum):
    """How well the learner answered a card in one practice trial."""

    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True, slots=True, eq=False)
class Flashcard:
    """A single flashcard.

    Cards compare and hash by identity: two cards with the same text are still
    two different cards. The bucket a card sits in is tracked by the bucket
    structures, never on the card itself.
    """

    front: str
    back: str
    hint: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))


BucketMap = dict[int, set[Flashcard]]
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True, slots=True)
class BucketRange:
    min_bucket: int
    max_bucket: int


@dataclass(slots=True)
class ProgressReport:
    total_cards: int
    bucket_distribution: list[int]
    bucket_range: BucketRange | None = None


@dataclass(frozen=True, slots=True)
class ArrayForm:
    """Bucket state given as a dense, index-ordered list of card sets."""

    buckets: Sequence[set[Flashcard]]


@dataclass(frozen=True, slots=True)
class MappingForm:
    """Bucket state given as a sparse bucket-number to card-set mapping."""

    buckets: BucketMap


BucketState = ArrayForm | MappingForm


def ensure_difficulty(value: AnswerDifficulty | int | str) -> AnswerDifficulty:
    """Normalise an outcome coming from a driver into an AnswerDifficulty."""

    if isinstance(value, AnswerDifficulty):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Unsupported answer difficulty: {value}")
    if isinstance(value, str):
        normalized = value.strip().upper()
        try:
            return AnswerDifficulty[normalized]
        except KeyError:
            raise ValueError(f"Unsupported answer difficulty: {value}") from None
    try:
        return AnswerDifficulty(value)
    except ValueError:
        raise ValueError(f"Unsupported answer difficulty: {value}") from None


__all__ = [
    "AnswerDifficulty",
    "ArrayForm",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "BucketState",
    "ensure_difficulty",
    "Flashcard",
    "MappingForm",
    "ProgressReport",
]

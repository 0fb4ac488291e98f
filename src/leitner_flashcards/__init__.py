"""Modified-Leitner flashcard scheduling package."""

from .buckets import get_bucket_range, to_bucket_map, to_bucket_sets
from .config import LeitnerConfig, load_config
from .hints import get_hint
from .models import (
    AnswerDifficulty,
    ArrayForm,
    BucketMap,
    BucketRange,
    BucketSets,
    BucketState,
    Flashcard,
    MappingForm,
    ProgressReport,
    ensure_difficulty,
)
from .progress import compute_progress
from .scheduler import is_bucket_due, next_due_day, practice
from .transitions import next_bucket, update

__all__ = [
    "AnswerDifficulty",
    "ArrayForm",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "BucketState",
    "compute_progress",
    "ensure_difficulty",
    "Flashcard",
    "get_bucket_range",
    "get_hint",
    "is_bucket_due",
    "LeitnerConfig",
    "load_config",
    "MappingForm",
    "next_bucket",
    "next_due_day",
    "practice",
    "ProgressReport",
    "to_bucket_map",
    "to_bucket_sets",
    "update",
]

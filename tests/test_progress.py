"""Tests for progress.py: totals and distribution over both representations."""

from __future__ import annotations

import pytest

from leitner_flashcards.buckets import to_bucket_sets
from leitner_flashcards.models import ArrayForm, BucketRange, Flashcard, MappingForm
from leitner_flashcards.progress import compute_progress


@pytest.fixture
def card1() -> Flashcard:
    return Flashcard("Front1", "Back1", "Hint1", ["tag1"])


@pytest.fixture
def card2() -> Flashcard:
    return Flashcard("Front2", "Back2", "Hint2", ["tag2"])


def test_progress_for_bucket_list(card1, card2):
    progress = compute_progress(ArrayForm([{card1}, {card2}, set()]), None)

    assert progress.total_cards == 2
    assert progress.bucket_distribution == [1, 1, 0]
    assert progress.bucket_range == BucketRange(0, 1)


def test_progress_for_bucket_map(card1, card2):
    progress = compute_progress(MappingForm({0: {card1}, 2: {card2}}), None)

    assert progress.total_cards == 2
    assert progress.bucket_distribution[0] == 1
    assert progress.bucket_distribution[2] == 1


def test_map_gaps_default_to_zero(card1):
    progress = compute_progress(MappingForm({3: {card1}}))
    assert progress.bucket_distribution == [0, 0, 0, 1]
    assert progress.bucket_range == BucketRange(3, 3)


def test_both_representations_agree(card1, card2):
    card3 = Flashcard("Front3", "Back3")
    buckets = {1: {card1, card3}, 4: {card2}}

    from_map = compute_progress(MappingForm(buckets))
    from_list = compute_progress(ArrayForm(to_bucket_sets(buckets)))

    assert from_map.total_cards == from_list.total_cards == 3
    assert from_map.bucket_distribution == from_list.bucket_distribution


def test_empty_state():
    progress = compute_progress(MappingForm({}))
    assert progress.total_cards == 0
    assert progress.bucket_distribution == []
    assert progress.bucket_range is None


def test_untagged_state_rejected(card1):
    with pytest.raises(TypeError, match="Unsupported bucket state"):
        compute_progress([{card1}])  # type: ignore[arg-type]

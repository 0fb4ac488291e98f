from __future__ import annotations

from leitner_flashcards.config import LeitnerConfig
from leitner_flashcards.hints import get_hint
from leitner_flashcards.models import Flashcard


def test_predefined_hint_wins():
    card = Flashcard("Front", "Back", "Predefined Hint", ["tag"])
    assert get_hint(card) == "Predefined Hint"


def test_hint_returned_verbatim():
    card = Flashcard("Front", "Back", "  spaced  ", [])
    assert get_hint(card) == "  spaced  "


def test_tag_hint_when_no_predefined_hint():
    card = Flashcard("Front", "Back", "", ["history", "science"])
    hint = get_hint(card)
    assert "history, science" in hint
    assert hint == "Try to remember a card related to: history, science"


def test_blank_hint_falls_through_to_tags():
    card = Flashcard("Front", "Back", "   ", ["geo"])
    assert get_hint(card).endswith("geo")


def test_first_characters_when_no_hint_or_tags():
    card = Flashcard("Important Concept", "Back", "", [])
    hint = get_hint(card)
    assert hint.startswith("First few characters: Impor")
    assert hint == "First few characters: Impor..."


def test_short_front_text():
    card = Flashcard("Hi", "Back")
    assert get_hint(card) == "First few characters: Hi..."


def test_same_card_same_hint():
    card = Flashcard("Photosynthesis", "Back", tags=["biology"])
    assert get_hint(card) == get_hint(card)


def test_templates_from_config():
    config = LeitnerConfig(
        tag_hint_template="Topics: {tags}",
        prefix_hint_template="Starts with {prefix}",
        hint_prefix_length=3,
    )
    assert get_hint(Flashcard("Front", "Back", tags=["a", "b"]), config) == "Topics: a, b"
    assert get_hint(Flashcard("Front", "Back"), config) == "Starts with Fro"

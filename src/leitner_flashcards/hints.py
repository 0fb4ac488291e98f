from __future__ import annotations

from .config import LeitnerConfig, load_config
from .models import Flashcard


def get_hint(card: Flashcard, config: LeitnerConfig | None = None) -> str:
    """Hint for the front of ``card``.

    The card's own hint wins when it is not blank, then a hint built from the
    tags, then the opening characters of the front text.
    """
    if card.hint and card.hint.strip():
        return card.hint
    settings = config or load_config()
    if card.tags:
        return settings.tag_hint_template.format(tags=", ".join(card.tags))
    prefix = card.front[: settings.hint_prefix_length]
    return settings.prefix_hint_template.format(prefix=prefix)


__all__ = ["get_hint"]

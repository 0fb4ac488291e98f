"""Scheduler settings: review intervals and hint templates, read from data/leitner.yaml.

The file is optional. Any key it leaves out keeps its default, and a missing
file means every default applies. Point LEITNER_CONFIG_PATH at another file to
override the location.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "leitner.yaml"
CONFIG_PATH = Path(os.environ.get("LEITNER_CONFIG_PATH", DEFAULT_CONFIG_PATH))

# Review interval in days for buckets 1..4; bucket 0 is reviewed every day.
DEFAULT_REVIEW_INTERVALS: tuple[int, ...] = (4, 10, 30, 100)
TAG_HINT_TEMPLATE = "Try to remember a card related to: {tags}"
PREFIX_HINT_TEMPLATE = "First few characters: {prefix}..."
HINT_PREFIX_LENGTH = 5


@dataclass(frozen=True, slots=True)
class LeitnerConfig:
    review_intervals: tuple[int, ...] = DEFAULT_REVIEW_INTERVALS
    tag_hint_template: str = TAG_HINT_TEMPLATE
    prefix_hint_template: str = PREFIX_HINT_TEMPLATE
    hint_prefix_length: int = HINT_PREFIX_LENGTH

    @property
    def max_bucket(self) -> int:
        """Highest bucket a card can reach; one bucket per interval above bucket 0."""
        return len(self.review_intervals)


_config_cache: LeitnerConfig | None = None


def _parse_intervals(raw: Any) -> tuple[int, ...]:
    if not isinstance(raw, list) or not raw:
        raise ValueError("review_intervals must be a non-empty list of days")
    intervals: list[int] = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"review interval must be a positive integer, got {value!r}")
        intervals.append(value)
    return tuple(intervals)


def _parse_template(raw: Any, key: str, placeholder: str) -> str:
    template = str(raw)
    if "{" + placeholder + "}" not in template:
        raise ValueError(f"{key} must contain the {{{placeholder}}} placeholder")
    try:
        template.format(**{placeholder: ""})
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"{key} is not a valid template: {exc!r}") from exc
    return template


def _build_config(data: dict[str, Any]) -> LeitnerConfig:
    config = LeitnerConfig()
    hints = data.get("hints") or {}
    if not isinstance(hints, dict):
        raise ValueError("hints must be a mapping")

    review_intervals = config.review_intervals
    if "review_intervals" in data:
        review_intervals = _parse_intervals(data["review_intervals"])

    tag_hint_template = config.tag_hint_template
    if "tag_template" in hints:
        tag_hint_template = _parse_template(hints["tag_template"], "hints.tag_template", "tags")

    prefix_hint_template = config.prefix_hint_template
    if "prefix_template" in hints:
        prefix_hint_template = _parse_template(hints["prefix_template"], "hints.prefix_template", "prefix")

    hint_prefix_length = config.hint_prefix_length
    if "prefix_length" in hints:
        hint_prefix_length = hints["prefix_length"]
        if isinstance(hint_prefix_length, bool) or not isinstance(hint_prefix_length, int) or hint_prefix_length < 0:
            raise ValueError(f"hints.prefix_length must be a non-negative integer, got {hint_prefix_length!r}")

    return LeitnerConfig(
        review_intervals=review_intervals,
        tag_hint_template=tag_hint_template,
        prefix_hint_template=prefix_hint_template,
        hint_prefix_length=hint_prefix_length,
    )


def load_config(path: Path | None = None) -> LeitnerConfig:
    """Read settings from YAML and return a LeitnerConfig. Cached in memory.

    Raises ValueError when the file exists but cannot be parsed or holds
    invalid values.
    """
    global _config_cache
    if _config_cache is not None and path is None:
        return _config_cache

    file_path = path or CONFIG_PATH
    if not file_path.exists():
        logger.debug("No config at %s, using defaults", file_path)
        config = LeitnerConfig()
    else:
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Config in {file_path} must be a mapping")
        config = _build_config(data)
        logger.debug("Loaded config from %s: intervals=%s", file_path, config.review_intervals)

    if path is None:
        _config_cache = config
    return config


def clear_cache() -> None:
    """Force the next load_config() to re-read the file."""
    global _config_cache
    _config_cache = None


__all__ = [
    "clear_cache",
    "CONFIG_PATH",
    "DEFAULT_REVIEW_INTERVALS",
    "HINT_PREFIX_LENGTH",
    "LeitnerConfig",
    "load_config",
    "PREFIX_HINT_TEMPLATE",
    "TAG_HINT_TEMPLATE",
]

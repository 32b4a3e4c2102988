"""Page, word and screen-time estimates for block documents."""

from __future__ import annotations

import math
from collections.abc import Iterable

from scriptblocks.models import Block, Metrics, ScriptDocument

# One screenplay page runs about one minute on screen, so both rates match.
DEFAULT_WORDS_PER_PAGE = 250
DEFAULT_WORDS_PER_MINUTE = 250


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in ``text``."""
    return len(text.split())


def count_block_words(blocks: Iterable[Block]) -> int:
    """Count words across the texts of ``blocks``."""
    return sum(count_words(block.text) for block in blocks)


def words_to_units(word_count: int, words_per_unit: int) -> int:
    """Convert a word count into whole pages or minutes, rounding up."""
    if words_per_unit <= 0:
        raise ValueError(f"words_per_unit must be positive, got {words_per_unit}")
    return math.ceil(word_count / words_per_unit)


def estimate_metrics(
    document: ScriptDocument | None,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> Metrics:
    """Estimate size and screen time for a document.

    Args:
        document: The block document
        words_per_page: Words that fill one page
        words_per_minute: Words that make up one minute of screen time

    Returns:
        Metrics with all fields zero for an empty document

    Raises:
        ValueError: If either rate is not positive
    """
    if words_per_page <= 0 or words_per_minute <= 0:
        raise ValueError(
            "words_per_page and words_per_minute must be positive, got "
            f"{words_per_page} and {words_per_minute}"
        )
    if document is None:
        return Metrics()

    word_count = count_block_words(document.blocks)
    return Metrics(
        page_count=words_to_units(word_count, words_per_page),
        char_count=sum(len(block.text) for block in document.blocks),
        word_count=word_count,
        estimated_minutes=words_to_units(word_count, words_per_minute),
    )

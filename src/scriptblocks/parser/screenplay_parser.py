"""Parse raw screenplay text into a block document."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import reduce
from typing import Any

from scriptblocks.config import get_logger
from scriptblocks.models import Block, BlockType, ScriptDocument, new_block_id
from scriptblocks.parser.classifier import classify_line, strip_markers

logger = get_logger(__name__)


@dataclass
class BlockDraft:
    """A block under construction; Action drafts collect merged lines."""

    type: BlockType
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Return the merged text of the draft."""
        return "\n".join(self.lines)


@dataclass(frozen=True)
class ParseState:
    """Fold accumulator threaded through the lines of a script.

    Attributes:
        previous_type: Context for the next line, None after a reset
        drafts: Blocks emitted so far, owned by the fold
    """

    previous_type: BlockType | None = None
    drafts: list[BlockDraft] = field(default_factory=list)

    @property
    def last_emitted_type(self) -> BlockType | None:
        """Type of the most recently emitted block, if any."""
        return self.drafts[-1].type if self.drafts else None


def step(state: ParseState, raw_line: str) -> ParseState:
    """Advance the parse by one physical line.

    Args:
        state: State after the previous line
        raw_line: The physical line, untrimmed

    Returns:
        State after this line
    """
    line = raw_line.strip()

    if not line:
        # An action paragraph keeps its context across blank lines
        if state.last_emitted_type is BlockType.ACTION:
            return state
        return ParseState(previous_type=None, drafts=state.drafts)

    block_type = classify_line(line, state.previous_type)
    text = strip_markers(line, block_type)

    if block_type is BlockType.ACTION and state.last_emitted_type is BlockType.ACTION:
        state.drafts[-1].lines.append(text)
    else:
        state.drafts.append(BlockDraft(type=block_type, lines=[text]))

    return ParseState(previous_type=block_type, drafts=state.drafts)


def fold_lines(lines: Iterable[str]) -> list[BlockDraft]:
    """Run the classifier over ``lines`` and return the emitted drafts."""
    return reduce(step, lines, ParseState()).drafts


class ScreenplayParser:
    """Parse screenplay text into a ScriptDocument."""

    def __init__(self, id_factory: Callable[[], str] = new_block_id) -> None:
        """Initialize the parser.

        Args:
            id_factory: Callable returning a fresh block id on each call
        """
        self.id_factory = id_factory

    def parse(self, raw_text: Any) -> ScriptDocument:
        """Parse raw screenplay text.

        Every line is classified as something, so parsing never fails. Empty
        or non-string input gives an empty document.

        Args:
            raw_text: The full text of the screenplay

        Returns:
            A new ScriptDocument with freshly assigned block ids
        """
        if not raw_text or not isinstance(raw_text, str):
            return ScriptDocument()

        lines = raw_text.split("\n")
        drafts = fold_lines(lines)
        blocks = [
            Block(id=self.id_factory(), type=draft.type, text=draft.text)
            for draft in drafts
        ]

        logger.debug("Parsed screenplay text", lines=len(lines), blocks=len(blocks))
        return ScriptDocument(blocks=blocks)


_default_parser = ScreenplayParser()


def parse(raw_text: Any) -> ScriptDocument:
    """Parse raw screenplay text into a ScriptDocument.

    Args:
        raw_text: The full text of the screenplay

    Returns:
        The parsed document; empty for empty or non-string input
    """
    return _default_parser.parse(raw_text)

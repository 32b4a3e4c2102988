"""scriptblocks data models.

This module defines the block model that sits between raw screenplay text and
the editor: a script is an ordered list of typed blocks, each carrying one
logical unit of text and an id that stays stable while the block lives.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class BlockType(str, Enum):
    """Screenplay block types."""

    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"
    SHOT = "shot"
    CENTERED = "centered"
    SECTION = "section"
    SYNOPSIS = "synopsis"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Scene Heading"."""
        return self.value.replace("_", " ").title()


# Types the line classifier can produce from plain text. The rest are kept
# for documents built from richer sources.
CLASSIFIED_TYPES: frozenset[BlockType] = frozenset(
    {
        BlockType.SCENE_HEADING,
        BlockType.ACTION,
        BlockType.CHARACTER,
        BlockType.PARENTHETICAL,
        BlockType.DIALOGUE,
        BlockType.TRANSITION,
        BlockType.CENTERED,
    }
)


def new_block_id() -> str:
    """Return a fresh, collision-resistant block id."""
    return f"block_{uuid4().hex}"


class Block(BaseModel):
    """One classified unit of screenplay text."""

    id: str = Field(default_factory=new_block_id)
    type: BlockType
    text: str = ""

    def __str__(self) -> str:
        """Return the block as ``[Label] text``."""
        return f"[{self.type.label}] {self.text}"


class ScriptDocument(BaseModel):
    """An ordered sequence of blocks; order is the screenplay's line order."""

    blocks: list[Block] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:  # type: ignore[override]
        return iter(self.blocks)

    def ids(self) -> list[str]:
        """Return block ids in document order."""
        return [block.id for block in self.blocks]

    def get(self, block_id: str) -> Block | None:
        """Return the block with ``block_id``, or None."""
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def types_and_texts(self) -> list[tuple[BlockType, str]]:
        """Return the ordered ``(type, text)`` pairs, ignoring ids."""
        return [(block.type, block.text) for block in self.blocks]


class Metrics(BaseModel):
    """Size and screen-time estimates for a script."""

    page_count: int = Field(default=0, ge=0)
    char_count: int = Field(default=0, ge=0)
    word_count: int = Field(default=0, ge=0)
    estimated_minutes: int = Field(default=0, ge=0)


__all__ = [
    "CLASSIFIED_TYPES",
    "Block",
    "BlockType",
    "Metrics",
    "ScriptDocument",
    "new_block_id",
]

"""Serialize a block document back into screenplay text."""

from __future__ import annotations

from scriptblocks.models import Block, BlockType, ScriptDocument
from scriptblocks.parser.classifier import (
    FORCED_SCENE_HEADING_MARKER,
    classify_line,
    is_scene_heading,
)

BLOCK_SEPARATOR = "\n\n"
LINE_SEPARATOR = "\n"


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0].strip()


def render_block(block: Block) -> str:
    """Return the text written for a single block.

    Scene headings that would not read back as headings get the forced
    ``.`` marker.
    """
    if (
        block.type is BlockType.SCENE_HEADING
        and block.text
        and not is_scene_heading(_first_line(block.text))
    ):
        return FORCED_SCENE_HEADING_MARKER + block.text
    return block.text


def separator_between(previous: Block, block: Block, rendered: str) -> str:
    """Return the separator written between two consecutive blocks.

    A blank line normally separates blocks. A blank line after anything but
    action resets the reading context, so when the next block only reads as
    its own type directly under the previous one (dialogue under its cue,
    for example) a single line break is used instead.
    """
    if previous.type is BlockType.ACTION:
        return BLOCK_SEPARATOR

    first_line = _first_line(rendered)
    if not first_line:
        return BLOCK_SEPARATOR

    reads_alone = classify_line(first_line, None) is block.type
    reads_attached = classify_line(first_line, previous.type) is block.type
    if not reads_alone and reads_attached:
        return LINE_SEPARATOR
    return BLOCK_SEPARATOR


def serialize(document: ScriptDocument | None) -> str:
    """Serialize a ScriptDocument into screenplay text.

    Parsing the result yields the same ordered (type, text) pairs as the
    document it came from when that document was itself parsed from text.

    Args:
        document: The document to serialize

    Returns:
        The screenplay text; empty for an empty document
    """
    if document is None or not document.blocks:
        return ""

    parts: list[str] = []
    previous: Block | None = None
    for block in document.blocks:
        rendered = render_block(block)
        if previous is not None:
            parts.append(separator_between(previous, block, rendered))
        parts.append(rendered)
        previous = block
    return "".join(parts)

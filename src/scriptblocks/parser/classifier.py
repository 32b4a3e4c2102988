"""Line classifier for screenplay text.

A line's type depends on its content and on the type of the block before it,
nothing else. ``classify_line`` is a pure function of those two inputs so the
parser can thread the previous type through a fold.
"""

from __future__ import annotations

import re

from scriptblocks.models import BlockType

# INT. / EXT. / I/E. / INT./EXT. followed by a space
SCENE_HEADING_PATTERN = re.compile(r"^(?:INT\./EXT|INT|EXT|I/E)\. ", re.IGNORECASE)
# A single leading "." followed by more text forces a heading; "..." is an
# ellipsis, not a marker
FORCED_SCENE_HEADING_PATTERN = re.compile(r"^\.(?!\.).")
TRANSITION_PATTERN = re.compile(
    r"(?:FADE IN:|FADE OUT:|SMASH CUT TO:|CUT TO:|DISSOLVE TO:)$", re.IGNORECASE
)
CHARACTER_PATTERN = re.compile(
    r"^[A-Z0-9 \t]*[A-Z][A-Z0-9 \t]*(?:\((?:V\.O\.|O\.S\.)\))?$"
)
CENTERED_PATTERN = re.compile(r"^>.*<$", re.DOTALL)

FORCED_SCENE_HEADING_MARKER = "."

# Contexts in which an all-caps line stands alone and reads as a cue
STANDALONE_CONTEXTS: frozenset[BlockType | None] = frozenset(
    {None, BlockType.ACTION, BlockType.TRANSITION, BlockType.SCENE_HEADING}
)
SPEECH_CONTEXTS: frozenset[BlockType | None] = frozenset(
    {BlockType.CHARACTER, BlockType.PARENTHETICAL}
)


def is_forced_scene_heading(line: str) -> bool:
    """Return True if the line carries the forced scene heading marker."""
    return bool(FORCED_SCENE_HEADING_PATTERN.match(line))


def is_scene_heading(line: str) -> bool:
    """Return True for INT./EXT. style headings and forced headings."""
    return bool(SCENE_HEADING_PATTERN.match(line)) or is_forced_scene_heading(line)


def is_transition(line: str) -> bool:
    """Return True if the line ends with a transition such as ``CUT TO:``."""
    return bool(TRANSITION_PATTERN.search(line))


def is_wrapped_in_parentheses(line: str) -> bool:
    """Return True if the first ``(`` is closed by the line's last character.

    ``(beat) (then)`` starts and ends with parentheses but is two pairs, so it
    does not count.
    """
    if len(line) < 2 or line[0] != "(" or line[-1] != ")":
        return False
    depth = 0
    for index, char in enumerate(line):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index == len(line) - 1
    return False


def is_character_cue(line: str) -> bool:
    """Return True if the line has the shape of a character cue.

    Only uppercase letters, digits and spaces, at least one letter, and an
    optional ``(V.O.)`` or ``(O.S.)`` extension.
    """
    return bool(CHARACTER_PATTERN.match(line))


def is_centered(line: str) -> bool:
    """Return True for ``> text <`` lines."""
    return len(line) >= 2 and bool(CENTERED_PATTERN.match(line))


def classify_line(line: str, previous_type: BlockType | None) -> BlockType:
    """Classify one trimmed, non-empty line.

    Args:
        line: The line, already stripped of surrounding whitespace
        previous_type: Type of the block before this line, or None at the
            start of the document and after a blank-line reset

    Returns:
        The block type for the line. Action is the fallback, so every line
        gets a type.
    """
    if is_scene_heading(line):
        return BlockType.SCENE_HEADING
    if is_transition(line):
        return BlockType.TRANSITION
    if previous_type is BlockType.CHARACTER and is_wrapped_in_parentheses(line):
        return BlockType.PARENTHETICAL
    if previous_type in STANDALONE_CONTEXTS and is_character_cue(line):
        return BlockType.CHARACTER
    if previous_type in SPEECH_CONTEXTS:
        return BlockType.DIALOGUE
    if is_centered(line):
        return BlockType.CENTERED
    return BlockType.ACTION


def strip_markers(line: str, block_type: BlockType) -> str:
    """Return the block text for a classified line.

    The forced scene heading marker is formatting, not content.
    """
    if block_type is BlockType.SCENE_HEADING and is_forced_scene_heading(line):
        return line[len(FORCED_SCENE_HEADING_MARKER) :].lstrip()
    return line

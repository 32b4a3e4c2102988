"""Export block documents as Fountain screenplay text."""

from __future__ import annotations

from collections.abc import Callable

from scriptblocks.models import Block, BlockType, ScriptDocument
from scriptblocks.parser.classifier import (
    is_centered,
    is_character_cue,
    is_scene_heading,
    is_transition,
    is_wrapped_in_parentheses,
)

SPEECH_TYPES = frozenset(
    {BlockType.CHARACTER, BlockType.PARENTHETICAL, BlockType.DIALOGUE}
)
SPEECH_CONTINUATION_TYPES = frozenset({BlockType.PARENTHETICAL, BlockType.DIALOGUE})
# Line starts a Fountain reader gives another meaning: transition, section,
# synopsis, lyric, forced action, forced cue, note
ACTION_MARKER_PREFIXES = (">", "#", "=", "~", "!", "@", "[[")


class FountainExporter:
    """Render a ScriptDocument in Fountain syntax.

    Elements whose text alone would be read as something else by a Fountain
    reader get Fountain's forcing markers: ``.`` for headings, ``>`` for
    transitions, ``@`` for character cues and ``!`` for action lines.
    """

    def __init__(self, uppercase_characters: bool = True) -> None:
        """Initialize the exporter.

        Args:
            uppercase_characters: Uppercase character cues on export
        """
        self.uppercase_characters = uppercase_characters
        self._renderers: dict[BlockType, Callable[[str], str]] = {
            BlockType.SCENE_HEADING: self._scene_heading,
            BlockType.ACTION: self._action,
            BlockType.CHARACTER: self._character,
            BlockType.PARENTHETICAL: self._parenthetical,
            BlockType.DIALOGUE: str.strip,
            BlockType.TRANSITION: self._transition,
            BlockType.SHOT: lambda text: text.strip().upper(),
            BlockType.CENTERED: self._centered,
            BlockType.SECTION: lambda text: self._prefixed("#", text),
            BlockType.SYNOPSIS: lambda text: self._prefixed("=", text),
        }

    @staticmethod
    def _prefixed(marker: str, text: str) -> str:
        text = text.strip()
        return text if text.startswith(marker) else f"{marker} {text}"

    @staticmethod
    def _scene_heading(text: str) -> str:
        heading = text.strip().upper()
        return heading if is_scene_heading(heading) else f".{heading}"

    @staticmethod
    def _action(text: str) -> str:
        lines = []
        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if line and (
                line.startswith(ACTION_MARKER_PREFIXES)
                or is_character_cue(line)
                or is_scene_heading(line)
                or is_transition(line)
                or is_centered(line)
            ):
                line = f"!{line}"
            lines.append(line)
        return "\n".join(lines)

    def _character(self, text: str) -> str:
        name = text.strip()
        if self.uppercase_characters:
            name = name.upper()
        # Fountain reads an all-caps line with at least one letter as a cue;
        # extensions like (CONT'D) may follow the name
        base = name.split("(", 1)[0]
        if base != base.upper() or not any(char.isalpha() for char in base):
            return f"@{name}"
        return name

    @staticmethod
    def _parenthetical(text: str) -> str:
        text = text.strip()
        return text if is_wrapped_in_parentheses(text) else f"({text})"

    @staticmethod
    def _transition(text: str) -> str:
        transition = text.strip().upper()
        return transition if transition.endswith("TO:") else f"> {transition}"

    @staticmethod
    def _centered(text: str) -> str:
        text = text.strip()
        return text if is_centered(text) else f"> {text} <"

    def render_block(self, block: Block) -> str:
        """Return the Fountain text for one block."""
        return self._renderers[block.type](block.text)

    def export(self, document: ScriptDocument | None) -> str:
        """Export the document as Fountain text.

        Character, parenthetical and dialogue lines of one speech stay on
        consecutive lines; every other element is separated by a blank line.
        """
        if document is None or not document.blocks:
            return ""

        parts: list[str] = []
        previous: Block | None = None
        for block in document.blocks:
            if previous is not None:
                in_speech = (
                    previous.type in SPEECH_TYPES
                    and block.type in SPEECH_CONTINUATION_TYPES
                )
                parts.append("\n" if in_speech else "\n\n")
            parts.append(self.render_block(block))
            previous = block
        return "".join(parts) + "\n"


def export_to_fountain(
    document: ScriptDocument | None, uppercase_characters: bool = True
) -> str:
    """Export a ScriptDocument as Fountain text.

    Args:
        document: The document to export
        uppercase_characters: Uppercase character cues on export

    Returns:
        Fountain text ending in a newline, or "" for an empty document
    """
    return FountainExporter(uppercase_characters=uppercase_characters).export(
        document
    )

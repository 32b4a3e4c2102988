"""Scene outline and character roster derived from a block document."""

from __future__ import annotations

from dataclasses import dataclass

from scriptblocks.metrics import DEFAULT_WORDS_PER_MINUTE, count_words, words_to_units
from scriptblocks.models import BlockType, ScriptDocument
from scriptblocks.utils.screenplay import ScreenplayUtils


@dataclass
class SceneSummary:
    """One scene: its heading block and every block up to the next heading."""

    number: int
    block_id: str
    heading: str
    scene_type: str = ""
    location: str | None = None
    time_of_day: str | None = None
    block_count: int = 0
    word_count: int = 0
    estimated_minutes: int = 0


@dataclass
class CharacterSummary:
    """A speaking character and how much they say."""

    name: str
    cue_count: int = 0
    dialogue_blocks: int = 0
    word_count: int = 0


def build_scene_outline(
    document: ScriptDocument,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> list[SceneSummary]:
    """Split a document into scenes at its scene headings.

    Blocks before the first heading belong to no scene.

    Args:
        document: The block document
        words_per_minute: Words that make up one minute of screen time

    Returns:
        Scenes in document order, numbered from 1
    """
    scenes: list[SceneSummary] = []
    for block in document.blocks:
        if block.type is BlockType.SCENE_HEADING:
            scene_type, location, time_of_day = ScreenplayUtils.parse_scene_heading(
                block.text
            )
            scenes.append(
                SceneSummary(
                    number=len(scenes) + 1,
                    block_id=block.id,
                    heading=block.text,
                    scene_type=scene_type,
                    location=location,
                    time_of_day=time_of_day,
                )
            )
        elif not scenes:
            continue

        current = scenes[-1]
        current.block_count += 1
        current.word_count += count_words(block.text)

    for scene in scenes:
        scene.estimated_minutes = words_to_units(scene.word_count, words_per_minute)
    return scenes


def build_character_roster(document: ScriptDocument) -> list[CharacterSummary]:
    """Collect speaking characters from their cues.

    Dialogue is credited to the most recent cue; a cue's extension such as
    ``(V.O.)`` is not part of the name.

    Args:
        document: The block document

    Returns:
        Characters in order of first appearance
    """
    roster: dict[str, CharacterSummary] = {}
    speaker: CharacterSummary | None = None

    for block in document.blocks:
        if block.type is BlockType.CHARACTER:
            name = ScreenplayUtils.character_name(block.text)
            if not name:
                speaker = None
                continue
            speaker = roster.setdefault(name, CharacterSummary(name=name))
            speaker.cue_count += 1
        elif block.type is BlockType.DIALOGUE and speaker is not None:
            speaker.dialogue_blocks += 1
            speaker.word_count += count_words(block.text)
        elif block.type is not BlockType.PARENTHETICAL:
            speaker = None

    return list(roster.values())

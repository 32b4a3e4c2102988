"""Analyzers that summarize block documents."""

from scriptblocks.analyzers.outline import (
    CharacterSummary,
    SceneSummary,
    build_character_roster,
    build_scene_outline,
)

__all__ = [
    "CharacterSummary",
    "SceneSummary",
    "build_character_roster",
    "build_scene_outline",
]

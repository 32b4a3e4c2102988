"""Screenplay-specific utility functions."""

from __future__ import annotations

import re

# Trailing cue extensions such as (V.O.), (O.S.) or (CONT'D)
CUE_EXTENSION_PATTERN = re.compile(r"\s*\([^()]*\)\s*$")


class ScreenplayUtils:
    """Utility functions for screenplay text."""

    TIME_INDICATORS = (
        "MOMENTS LATER",
        "CONTINUOUS",
        "AFTERNOON",
        "MORNING",
        "EVENING",
        "SUNRISE",
        "SUNSET",
        "NIGHT",
        "LATER",
        "DAWN",
        "DUSK",
        "NOON",
        "DAY",
    )

    @staticmethod
    def _strip_scene_type(heading: str) -> str:
        heading_upper = heading.upper()
        if heading_upper.startswith("INT./EXT."):
            return heading[9:].strip()
        if heading_upper.startswith(("INT.", "EXT.", "I/E.")):
            return heading[4:].strip()
        return heading.strip()

    @staticmethod
    def extract_location(heading: str | None) -> str | None:
        """Extract location from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted location or None
        """
        if not heading:
            return None

        rest = ScreenplayUtils._strip_scene_type(heading)

        # Location is everything before the last " - "
        if " - " in rest:
            location, _ = rest.rsplit(" - ", 1)
            location = location.strip()
            return location if location else None

        if rest.startswith("- "):
            return None

        return rest if rest else None

    @staticmethod
    def extract_time(heading: str | None) -> str | None:
        """Extract time of day from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted time or None
        """
        if not heading or " - " not in heading:
            return None

        last_part = heading.upper().rsplit(" - ", 1)[-1]
        if re.search(r"\bMIDNIGHT\b", last_part):
            return "NIGHT"

        for indicator in ScreenplayUtils.TIME_INDICATORS:
            if re.search(rf"\b{re.escape(indicator)}\b", last_part):
                return indicator

        return None

    @staticmethod
    def scene_type(heading: str | None) -> str:
        """Return "INT", "EXT", "INT/EXT", or "" for a forced heading."""
        if not heading:
            return ""
        heading_upper = heading.upper()
        if heading_upper.startswith(("INT./EXT.", "I/E.")):
            return "INT/EXT"
        if heading_upper.startswith("INT."):
            return "INT"
        if heading_upper.startswith("EXT."):
            return "EXT"
        return ""

    @staticmethod
    def parse_scene_heading(heading: str | None) -> tuple[str, str | None, str | None]:
        """Parse a scene heading into its components.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (scene_type, location, time_of_day)
        """
        if not heading:
            return "", None, None

        return (
            ScreenplayUtils.scene_type(heading),
            ScreenplayUtils.extract_location(heading),
            ScreenplayUtils.extract_time(heading),
        )

    @staticmethod
    def character_name(cue: str) -> str:
        """Return the character name of a cue without its extension.

        Args:
            cue: Character cue (e.g., "JOHN (V.O.)")

        Returns:
            The bare name (e.g., "JOHN")
        """
        return CUE_EXTENSION_PATTERN.sub("", cue).strip()

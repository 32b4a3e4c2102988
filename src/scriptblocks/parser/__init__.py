"""Screenplay text <-> block document conversion for scriptblocks."""

from __future__ import annotations

from .classifier import classify_line
from .fountain_export import FountainExporter, export_to_fountain
from .screenplay_parser import ScreenplayParser, parse
from .serializer import serialize

__all__ = [
    "FountainExporter",
    "ScreenplayParser",
    "classify_line",
    "export_to_fountain",
    "parse",
    "serialize",
]

"""scriptblocks: screenplay text to typed blocks and back.

The package converts freeform screenplay text into an ordered list of typed
blocks (scene headings, action, character cues, parentheticals, dialogue,
transitions, centered text), serializes block documents back into text, and
estimates page count and screen time from the blocks.
"""

from .metrics import estimate_metrics
from .models import Block, BlockType, Metrics, ScriptDocument
from .parser import parse, serialize

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockType",
    "Metrics",
    "ScriptDocument",
    "__version__",
    "estimate_metrics",
    "parse",
    "serialize",
]

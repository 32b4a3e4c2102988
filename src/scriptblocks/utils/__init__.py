"""scriptblocks utilities module."""

from scriptblocks.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]

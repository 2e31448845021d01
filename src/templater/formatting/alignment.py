"""
Text alignment for formatted values.

An alignment pads a formatted value to a minimum width with a fill
character, and removes that padding again when the value is read back.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlignmentKind(Enum):
    """Side on which a value is placed within its padded width."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Alignment(BaseModel):
    """
    Alignment and padding of a formatted value.

    Params:
        kind: Where the value sits within the padded width
        width: Minimum width of the aligned text
        fill: Single padding character
    """

    model_config = ConfigDict(frozen=True)

    kind: AlignmentKind = AlignmentKind.NONE
    width: int = Field(default=0, ge=0)
    fill: str = " "

    @field_validator("fill")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"fill must be a single character, got {value!r}")
        return value

    def apply(self, text: str) -> str:
        """Pad text to the alignment width."""
        if self.kind == AlignmentKind.LEFT:
            return text.ljust(self.width, self.fill)
        if self.kind == AlignmentKind.RIGHT:
            return text.rjust(self.width, self.fill)
        if self.kind == AlignmentKind.CENTER:
            return text.center(self.width, self.fill)
        return text

    def strip(self, text: str) -> str:
        """
        Remove the padding added by apply.

        Every fill character on a padded side is removed, so the value must
        not begin or end with the fill there. Formats reject such alignments.
        """
        if self.kind == AlignmentKind.LEFT:
            return text.rstrip(self.fill)
        if self.kind == AlignmentKind.RIGHT:
            return text.lstrip(self.fill)
        if self.kind == AlignmentKind.CENTER:
            return text.strip(self.fill)
        return text

    def wrap_pattern(self, regex: str) -> str:
        """Extend a value regex so that padding may surround it."""
        padding = f"(?:{re.escape(self.fill)})*"
        if self.kind == AlignmentKind.LEFT:
            return f"(?:{regex}){padding}"
        if self.kind == AlignmentKind.RIGHT:
            return f"{padding}(?:{regex})"
        if self.kind == AlignmentKind.CENTER:
            return f"{padding}(?:{regex}){padding}"
        return regex

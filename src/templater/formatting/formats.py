"""
Value formats for typed templates.

A format converts a Python value to the text written into a template and
provides the pattern and parser used to read that text back. Formats are
frozen pydantic models discriminated by ``kind`` so they can be loaded from
configuration.
"""

import re
from abc import abstractmethod
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from templater.formatting.alignment import Alignment, AlignmentKind

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _clamp(value: int, minimum: int, maximum: int) -> int:
    return min(max(value, minimum), maximum)


def int_to_base(value: int, base: int) -> str:
    """Write an integer in the given base using lowercase digits."""
    if value < 0:
        return "-" + int_to_base(-value, base)
    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(DIGITS[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


class BaseFormat(BaseModel):
    """
    Common behavior of value formats.

    An alignment is rejected when its fill character can begin or end a
    value on a padded side, since stripping the padding would then also
    strip part of the value (``10`` left aligned with ``0`` reads back as
    ``1``).

    Params:
        alignment: Padding applied around the formatted value
    """

    model_config = ConfigDict(frozen=True)

    alignment: Alignment = Alignment()

    @model_validator(mode="after")
    def _fill_outside_values(self) -> "BaseFormat":
        kind = self.alignment.kind
        fill = self.alignment.fill
        name = type(self).__name__
        pads_end = kind in (AlignmentKind.LEFT, AlignmentKind.CENTER)
        pads_start = kind in (AlignmentKind.RIGHT, AlignmentKind.CENTER)
        if pads_end and self.can_end_with(fill):
            raise ValueError(
                f"fill {fill!r} can end a {name} value and would be stripped from it"
            )
        if pads_start and self.can_start_with(fill):
            raise ValueError(
                f"fill {fill!r} can start a {name} value and would be stripped from it"
            )
        return self

    @abstractmethod
    def value_regex(self) -> str:
        """Return the regex source matching an unaligned formatted value."""

    @abstractmethod
    def to_text(self, value) -> str:
        """Convert a value to its unaligned text."""

    @abstractmethod
    def from_text(self, text: str):
        """Convert unaligned text back to a value."""

    def can_start_with(self, char: str) -> bool:
        """Whether a formatted value may begin with char."""
        return re.fullmatch(self.value_regex(), char) is not None

    def can_end_with(self, char: str) -> bool:
        """Whether a formatted value may end with char."""
        return re.fullmatch(self.value_regex(), char) is not None

    def format_value(self, value) -> str:
        """Format and align a value."""
        return self.alignment.apply(self.to_text(value))

    def pattern(self) -> re.Pattern[str]:
        """Return the pattern matching an aligned formatted value."""
        return re.compile(self.alignment.wrap_pattern(self.value_regex()))

    def parse_value(self, text: str):
        """Remove alignment padding and convert text back to a value."""
        stripped = self.alignment.strip(text)
        if text and not stripped and re.fullmatch(self.value_regex(), "") is None:
            # value made only of fill characters, e.g. 0 right aligned with 0
            stripped = text[-1:]
        return self.from_text(stripped)


class IntFormat(BaseFormat):
    """
    Integer written in a given base.

    Params:
        base: Base between 2 and 36 (clamped), default 10
    """

    kind: Literal["int"] = "int"
    base: int = 10

    @field_validator("base")
    @classmethod
    def _clamp_base(cls, value: int) -> int:
        return _clamp(value, 2, 36)

    def value_regex(self) -> str:
        digits = DIGITS[: self.base]
        return f"-?[{digits}{digits.upper()}]+"

    def can_start_with(self, char: str) -> bool:
        # a lone 0 is the only value starting with 0 and survives stripping
        return char == "-" or (char != "0" and super().can_start_with(char))

    def to_text(self, value: int) -> str:
        return int_to_base(int(value), self.base)

    def from_text(self, text: str) -> int:
        return int(text, self.base)


class NumberFormat(BaseFormat):
    """
    Real number written with a fixed number of decimals.

    Params:
        digits: Digits after the decimal point, between 0 and 100 (clamped)
        exponential_notation: Write the number as ``d.ddde+XX``
    """

    kind: Literal["number"] = "number"
    digits: int = 2
    exponential_notation: bool = False

    @field_validator("digits")
    @classmethod
    def _clamp_digits(cls, value: int) -> int:
        return _clamp(value, 0, 100)

    def value_regex(self) -> str:
        fraction = rf"\.\d{{{self.digits}}}" if self.digits else ""
        if self.exponential_notation:
            return rf"-?\d{fraction}e[+-]\d+"
        return rf"-?\d+{fraction}"

    def can_start_with(self, char: str) -> bool:
        # leading zeros strip to ".5", which still parses
        return char == "-" or char in "123456789"

    def can_end_with(self, char: str) -> bool:
        return char in "0123456789"

    def to_text(self, value: float) -> str:
        notation = "e" if self.exponential_notation else "f"
        return f"{float(value):.{self.digits}{notation}}"

    def from_text(self, text: str) -> float:
        return float(text)


class StringFormat(BaseFormat):
    """
    Plain text value.

    Params:
        regex: Pattern a value must match when read; the default reads a run
            of non-whitespace characters
    """

    kind: Literal["string"] = "string"
    regex: str = r"\S*"

    @field_validator("regex")
    @classmethod
    def _valid_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    def value_regex(self) -> str:
        return self.regex

    def to_text(self, value: str) -> str:
        return str(value)

    def from_text(self, text: str) -> str:
        return text


Format = Annotated[
    IntFormat | NumberFormat | StringFormat, Field(discriminator="kind")
]

"""
templater value formatting.

This package provides the alignment and value formats used to write Python
values into templates and to read them back.
"""

from templater.formatting.alignment import Alignment, AlignmentKind
from templater.formatting.formats import (
    BaseFormat,
    Format,
    IntFormat,
    NumberFormat,
    StringFormat,
    int_to_base,
)

__all__ = [
    "Alignment",
    "AlignmentKind",
    "BaseFormat",
    "Format",
    "IntFormat",
    "NumberFormat",
    "StringFormat",
    "int_to_base",
]

"""
Core type definitions for templater.

This module contains the type aliases shared by the compiler, writer and
reader.
"""

import re
from collections.abc import Sequence

# A read pattern: compiled regex, regex source, or None for "no pattern"
PatternLike = re.Pattern[str] | str | None

TargetValues = Sequence[str]

TargetPatterns = Sequence[PatternLike]

ReadValues = tuple[str | None, ...]

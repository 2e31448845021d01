"""
Core templater components.

This package provides the search primitive and type definitions consumed by
the template compiler, writer and reader.
"""

from templater.core.search import SearchResult, search_all
from templater.core.types import (
    PatternLike,
    ReadValues,
    TargetPatterns,
    TargetValues,
)

__all__ = [
    "SearchResult",
    "search_all",
    "PatternLike",
    "ReadValues",
    "TargetPatterns",
    "TargetValues",
]

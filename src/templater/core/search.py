"""
Substring search utilities.

This module finds every occurrence of a literal needle in a haystack and
provides the ordering used to resolve overlapping occurrences.
"""

from attrs import frozen


@frozen
class SearchResult:
    """
    One occurrence of a needle in a haystack.

    Params:
        start_index: Offset of the first character (inclusive)
        end_index: Offset after the last character (exclusive)
    """

    start_index: int
    end_index: int

    @property
    def sort_key(self) -> tuple[int, int]:
        """Foremost first, then longest first among same-start occurrences."""
        return (self.start_index, -self.end_index)


def search_all(needle: str, haystack: str) -> list[SearchResult]:
    """
    Find all occurrences of a needle in a haystack.

    Occurrences are returned left to right and never overlap each other:
    searching resumes at the end of the previous match, so ``"aa"`` occurs
    twice in ``"aaaa"``, not three times. An empty needle has no occurrences.

    Params:
        needle: Literal text to search for
        haystack: Text to search in

    Returns:
        List of SearchResult in left-to-right order
    """
    if not needle:
        return []

    results = []
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        results.append(SearchResult(start_index=start, end_index=end))
        start = haystack.find(needle, end)
    return results

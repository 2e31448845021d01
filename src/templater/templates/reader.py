"""
Template reading.

Reads target values back from a filled-out template. The positions of the
targets in the compiled template tell where to start reading; the pattern
given for each target tells how much text to read from there. Reading is a
single left-to-right scan without backtracking: static text and patterns must
match in place, block after block.
"""

import re
from collections import defaultdict
from collections.abc import Sequence

from templater.core.types import PatternLike, ReadValues, TargetPatterns
from templater.exceptions import (
    BadFormatError,
    ErrorContext,
    TemplateReadError,
    TooManyError,
)
from templater.templates.compiler import CompiledTemplate


def _compile_patterns(
    patterns: TargetPatterns, target_count: int
) -> tuple[re.Pattern[str] | None, ...]:
    compiled: list[re.Pattern[str] | None] = []
    for target_index in range(target_count):
        pattern: PatternLike = (
            patterns[target_index] if target_index < len(patterns) else None
        )
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        compiled.append(pattern)
    return tuple(compiled)


class Reader:
    """
    Reads target values from strings filled out from a compiled template.

    A reader holds no state between calls and can be shared freely.

    Params:
        compiled: Compiled template the candidates were filled out from
        patterns: One pattern per target, in target order. A pattern is a
            compiled regex or its source; it is matched at the start of the
            text remaining after the current position, so ``^`` anchors there
            and lookbehinds see nothing before it. Missing or None patterns
            read nothing, extra patterns are ignored.
    """

    def __init__(self, compiled: CompiledTemplate, patterns: TargetPatterns):
        self.compiled = compiled
        self.patterns = _compile_patterns(patterns, len(compiled.targets))

    def __call__(self, candidate: str) -> ReadValues:
        """
        Read the target values from a filled-out string.

        Params:
            candidate: String filled out from the template

        Returns:
            One value per target, in target order. A value is None when the
            target does not appear in the template or has no pattern.

        Raises:
            BadFormatError: If the candidate deviates from the template
            TooManyError: If a repeated target captured more than one value
        """
        captures = self._scan(candidate)
        return self._reconcile(captures, candidate)

    def attempt(self, candidate: str) -> ReadValues | TemplateReadError:
        """Like calling the reader, but return the read error instead of raising it."""
        try:
            return self(candidate)
        except TemplateReadError as e:
            return e

    def _context(self, candidate: str) -> ErrorContext:
        return ErrorContext(template=self.compiled.source, candidate=candidate)

    def _scan(self, candidate: str) -> list[tuple[int, int, str]]:
        """Walk the blocks and collect (position, target_index, value) captures."""
        captures = []
        offset = 0

        for position, block in enumerate(self.compiled.blocks):
            static_end = offset + len(block.static_text)
            if candidate[offset:static_end] != block.static_text:
                raise BadFormatError(
                    expected=block.static_text,
                    actual=candidate[offset:static_end],
                    position=position,
                    offset=offset,
                    context=self._context(candidate),
                )
            offset = static_end

            pattern = self.patterns[block.target_index]
            if pattern is None:
                continue

            rest = candidate[offset:]
            match = pattern.match(rest)
            if match is None:
                raise BadFormatError(
                    expected=pattern.pattern,
                    actual=rest,
                    position=position,
                    offset=offset,
                    is_pattern=True,
                    context=self._context(candidate),
                )
            captures.append((position, block.target_index, match.group()))
            offset += match.end()

        if candidate[offset:] != self.compiled.final_static_text:
            raise BadFormatError(
                expected=self.compiled.final_static_text,
                actual=candidate[offset:],
                position=len(self.compiled.blocks),
                offset=offset,
                at_end=True,
                context=self._context(candidate),
            )

        return captures

    def _reconcile(
        self, captures: Sequence[tuple[int, int, str]], candidate: str
    ) -> ReadValues:
        """Collapse the captures of each target into a single optional value."""
        by_target: dict[int, list[tuple[int, str]]] = defaultdict(list)
        for position, target_index, value in captures:
            by_target[target_index].append((position, value))

        values: list[str | None] = []
        for target_index, target in enumerate(self.compiled.targets):
            found = by_target.get(target_index, [])
            if not found:
                values.append(None)
            elif len(found) == 1:
                values.append(found[0][1])
            else:
                # A repeated target may capture at most once, even with equal values
                raise TooManyError(
                    target=target,
                    target_index=target_index,
                    positions=tuple(position for position, _ in found),
                    values=tuple(value for _, value in found),
                    context=self._context(candidate),
                )
        return tuple(values)


def make_reader(compiled: CompiledTemplate, patterns: TargetPatterns) -> Reader:
    """
    Build a reader for strings filled out from a compiled template.

    Params:
        compiled: Compiled template
        patterns: One pattern per target, in target order

    Returns:
        Reader callable returning one optional value per target
    """
    return Reader(compiled, patterns)

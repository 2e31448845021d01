"""
Exception classes for templater.

This module defines the error types raised while reading filled-out
templates and while loading template definitions. Read errors carry their
details as attributes so callers can branch on ``kind`` instead of parsing
messages.
"""

from dataclasses import dataclass
from enum import Enum


class ReadErrorKind(Enum):
    """Kind of failure reported by a template reader."""

    BAD_FORMAT = "bad_format"  # Candidate deviates from the template structure
    TOO_MANY = "too_many"  # A target captured a value at several positions


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for read error messages.

    Params:
        template: Source of the compiled template that was read against
        candidate: The filled-out string that failed to read
        excerpt_length: Maximum number of candidate characters to show
    """

    template: str | None = None
    candidate: str | None = None
    excerpt_length: int = 40

    def format_location(self, offset: int | None = None) -> str:
        """
        Format location information for an error message.

        Params:
            offset: Character offset of the failure in the candidate

        Returns:
            Formatted multi-line location string (empty if nothing is known)
        """
        lines = []

        if self.template is not None:
            lines.append(f"  template: {self.template!r}")

        if self.candidate is not None:
            if offset is None:
                lines.append(f"  candidate: {self._excerpt(self.candidate)!r}")
            else:
                lines.append(
                    f"  candidate at offset {offset}: "
                    f"{self._excerpt(self.candidate[offset:])!r}"
                )

        return "\n".join(lines)

    def _excerpt(self, text: str) -> str:
        if len(text) <= self.excerpt_length:
            return text
        return text[: self.excerpt_length] + "..."


class TemplaterError(Exception):
    """Base exception for all templater errors."""

    pass


class TemplateReadError(TemplaterError):
    """Base exception for failures while reading a filled-out template."""

    kind: ReadErrorKind

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: Optional ErrorContext appended to the message
        """
        self.context = context
        self.primary_message = message
        location_info = context.format_location(self._context_offset()) if context else ""
        full_message = f"{message}\n{location_info}" if location_info else message
        super().__init__(full_message)

    def _context_offset(self) -> int | None:
        return None


class BadFormatError(TemplateReadError):
    """Raised when a filled-out string does not follow the template structure."""

    kind = ReadErrorKind.BAD_FORMAT

    def __init__(
        self,
        expected: str,
        actual: str,
        position: int,
        offset: int,
        *,
        is_pattern: bool = False,
        at_end: bool = False,
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            expected: Expected static text, or pattern source when is_pattern
            actual: Offending part of the filled-out string
            position: Block ordinal where reading failed (block count at the end)
            offset: Character offset in the filled-out string
            is_pattern: Whether a target pattern failed rather than static text
            at_end: Whether the trailing text after the last target failed
            context: Optional ErrorContext with template and candidate
        """
        self.expected = expected
        self.actual = actual
        self.position = position
        self.offset = offset
        self.is_pattern = is_pattern
        self.at_end = at_end

        if at_end:
            where = "at end of template"
        else:
            where = f"at position {position}"
        if is_pattern:
            what = f"Expected text matching pattern {expected!r}"
        else:
            what = f"Expected {expected!r}"

        super().__init__(
            f"{what} {where} (offset {offset}), got {actual!r}", context
        )

    def _context_offset(self) -> int | None:
        return self.offset


class TooManyError(TemplateReadError):
    """Raised when a repeated target captured a value at several positions."""

    kind = ReadErrorKind.TOO_MANY

    def __init__(
        self,
        target: str,
        target_index: int,
        positions: tuple[int, ...],
        values: tuple[str, ...],
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            target: Name of the target that was captured several times
            target_index: Index of the target in the template's target list
            positions: Block ordinals at which a value was captured
            values: Captured values, aligned with positions
            context: Optional ErrorContext with template and candidate
        """
        self.target = target
        self.target_index = target_index
        self.positions = positions
        self.values = values
        super().__init__(
            f"Target {target!r} was read {len(values)} times "
            f"at positions {list(positions)}: {list(values)}",
            context,
        )


class TemplateDefinitionError(TemplaterError):
    """Raised when a template definition cannot be loaded or validated."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: Where the definition came from (file path or "dict")
            reason: Why the definition is invalid
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid template definition from {source}: {reason}")


class UnknownTargetError(TemplaterError):
    """Raised when a value is supplied for a name that is not a target."""

    def __init__(self, names: list[str], targets: tuple[str, ...]):
        """
        Initialize the exception.

        Params:
            names: The unknown names
            targets: Targets of the template
        """
        self.names = names
        self.targets = targets
        super().__init__(
            f"Unknown targets {names}. Available targets: {list(targets)}"
        )

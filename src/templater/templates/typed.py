"""
Templates with typed targets.

A typed template attaches a value format to each target so that Python
values can be written into the template and parsed back out of filled-out
strings.
"""

import logging
from collections.abc import Mapping
from typing import Any

from templater.exceptions import UnknownTargetError
from templater.formatting.formats import BaseFormat
from templater.templates.compiler import CompiledTemplate, compile_template
from templater.templates.reader import make_reader
from templater.templates.writer import write

logger = logging.getLogger(__name__)


class TypedTemplate:
    """
    A compiled template whose targets carry value formats.

    Params:
        template: Template in which targets are searched
        formats: Ordered mapping of target name to its format; the mapping
            order defines the target order
    """

    def __init__(self, template: str, formats: Mapping[str, BaseFormat]):
        self.formats = dict(formats)
        self.compiled: CompiledTemplate = compile_template(template, tuple(self.formats))
        self._reader = make_reader(
            self.compiled, [fmt.pattern() for fmt in self.formats.values()]
        )
        logger.debug(
            "Compiled typed template with %d targets into %d blocks",
            len(self.formats),
            len(self.compiled.blocks),
        )

    @property
    def targets(self) -> tuple[str, ...]:
        return self.compiled.targets

    def write(self, values: Mapping[str, Any]) -> str:
        """
        Format values and write them into the template.

        Params:
            values: Mapping of target name to value; targets without a value
                are written as the empty string

        Returns:
            The filled-out template

        Raises:
            UnknownTargetError: If a name in values is not a target
        """
        unknown = [name for name in values if name not in self.formats]
        if unknown:
            raise UnknownTargetError(unknown, self.targets)

        texts = [
            fmt.format_value(values[name]) if name in values else ""
            for name, fmt in self.formats.items()
        ]
        return write(self.compiled, texts)

    def read(self, text: str) -> dict[str, Any]:
        """
        Read and parse target values from a filled-out string.

        Params:
            text: String filled out from the template

        Returns:
            Mapping of target name to parsed value, None for targets absent
            from the template

        Raises:
            BadFormatError: If text deviates from the template
            TooManyError: If a repeated target captured more than one value
        """
        raw_values = self._reader(text)
        return {
            name: None if raw is None else fmt.parse_value(raw)
            for (name, fmt), raw in zip(self.formats.items(), raw_values)
        }

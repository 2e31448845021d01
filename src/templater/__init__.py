"""
templater - Bidirectional text templating

templater writes values into templates whose targets are plain substrings,
and reads those values back out of filled-out strings.
"""

from importlib.metadata import version

from templater.definitions import TemplateDefinition
from templater.exceptions import BadFormatError, TemplateReadError, TooManyError
from templater.templates import (
    CompiledTemplate,
    TypedTemplate,
    compile_template,
    make_reader,
    write,
)

__version__ = version("templater")

__all__ = [
    "__version__",
    "compile_template",
    "CompiledTemplate",
    "write",
    "make_reader",
    "TypedTemplate",
    "TemplateDefinition",
    "TemplateReadError",
    "BadFormatError",
    "TooManyError",
]

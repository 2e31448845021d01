"""
templater template processing components.

This package provides the template compiler, writer and reader, and typed
templates built on top of them.
"""

from templater.templates.compiler import Block, CompiledTemplate, compile_template
from templater.templates.reader import Reader, make_reader
from templater.templates.typed import TypedTemplate
from templater.templates.writer import write

__all__ = [
    # Compilation
    "Block",
    "CompiledTemplate",
    "compile_template",
    # Writing and reading
    "write",
    "Reader",
    "make_reader",
    # Typed templates
    "TypedTemplate",
]

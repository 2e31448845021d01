"""
Template writing.

Fills a compiled template by replacing each target occurrence with the value
given for that target.
"""

from templater.core.types import TargetValues
from templater.templates.compiler import CompiledTemplate


def write(compiled: CompiledTemplate, values: TargetValues) -> str:
    """
    Substitute values for the targets of a compiled template.

    Values are positionally aligned with the template's targets. Missing
    values are written as the empty string and extra values are ignored.

    Params:
        compiled: Compiled template to fill
        values: One string per target, in target order

    Returns:
        The filled-out template
    """
    parts = []
    for block in compiled.blocks:
        parts.append(block.static_text)
        if block.target_index < len(values):
            parts.append(values[block.target_index])
    parts.append(compiled.final_static_text)
    return "".join(parts)

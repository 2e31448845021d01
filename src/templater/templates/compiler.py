"""
Template compilation.

A template is a plain string in which targets are found by literal search.
Each target can appear any number of times and targets can overlap, as with
``falling-tree``, ``tree`` and ``tree-shaking``. Overlaps are resolved by
keeping the foremost occurrence and, among occurrences starting at the same
offset, the longest one. In ``this bundler is good at tree-shaking`` the
target ``tree-shaking`` therefore wins over ``tree``.

Compilation splits the template at the boundary of each kept occurrence into
blocks of static text followed by a target reference, plus the static text
remaining after the last occurrence.
"""

import logging
from collections.abc import Sequence

from attrs import field, frozen

from templater.core.search import SearchResult, search_all

logger = logging.getLogger(__name__)


@frozen
class Block:
    """
    Static text followed by one target reference.

    Params:
        static_text: Text between the previous occurrence (or the template
            start) and this occurrence; may be empty
        target_index: Index of the referenced target in the target list
    """

    static_text: str
    target_index: int


@frozen
class CompiledTemplate:
    """
    Immutable segmentation of a template into blocks.

    Params:
        blocks: Blocks in template order
        final_static_text: Text after the last occurrence; may be empty
        targets: Target names, indexed by Block.target_index
    """

    blocks: tuple[Block, ...] = field(converter=tuple)
    final_static_text: str
    targets: tuple[str, ...] = field(converter=tuple)

    @property
    def source(self) -> str:
        """Rebuild the template the blocks were compiled from."""
        parts = []
        for block in self.blocks:
            parts.append(block.static_text)
            parts.append(self.targets[block.target_index])
        parts.append(self.final_static_text)
        return "".join(parts)

    def positions_of(self, target_index: int) -> tuple[int, ...]:
        """Return the ordinals of the blocks that reference a target."""
        return tuple(
            position
            for position, block in enumerate(self.blocks)
            if block.target_index == target_index
        )


def _find_occurrences(
    template: str, targets: Sequence[str]
) -> list[tuple[int, SearchResult]]:
    occurrences = [
        (target_index, result)
        for target_index, target in enumerate(targets)
        for result in search_all(target, template)
    ]
    # sort is stable: identical spans keep the lowest target index first
    occurrences.sort(key=lambda occurrence: occurrence[1].sort_key)
    return occurrences


def compile_template(template: str, targets: Sequence[str]) -> CompiledTemplate:
    """
    Compile a template against an ordered list of targets.

    Finds every occurrence of every target, keeps the foremost-longest
    occurrence wherever occurrences overlap, and splits the template around
    the kept occurrences. Targets absent from the template are simply never
    referenced by a block. Compilation never fails.

    Params:
        template: Template in which targets are searched
        targets: Ordered target names; their index identifies them afterwards

    Returns:
        CompiledTemplate whose source reproduces the template exactly
    """
    targets = tuple(targets)
    blocks = []
    cursor = 0

    for target_index, result in _find_occurrences(template, targets):
        if result.start_index < cursor:
            logger.debug(
                "Discarding target %r at %d:%d overlapping occurrence ending at %d",
                targets[target_index],
                result.start_index,
                result.end_index,
                cursor,
            )
            continue
        blocks.append(
            Block(
                static_text=template[cursor : result.start_index],
                target_index=target_index,
            )
        )
        cursor = result.end_index

    return CompiledTemplate(
        blocks=blocks, final_static_text=template[cursor:], targets=targets
    )

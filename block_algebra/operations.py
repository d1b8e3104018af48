"""
Function-style access to the block algebra.

Callers that hold plain numeric pairs can work entirely through these
functions; each one delegates to the matching Block / BlockSet method.
"""

from typing import Any

from .block import Block
from .block_set import BlockSet, merge

__all__ = [
    "make",
    "compare",
    "equals",
    "includes",
    "surrounds",
    "covers",
    "intersects_top",
    "intersects_bottom",
    "overlaps",
    "union",
    "subtract",
    "split",
    "trim_from",
    "trim_to",
    "limited",
    "padded",
    "merge",
]


def make(start: Any, end: Any) -> Block:
    """Build a normalized block. Raises InvalidRange for unorderable bounds."""
    return Block(start, end)


def compare(a: Block, b: Block) -> int:
    return a.compare(b)


def equals(a: Block | BlockSet, b: Block | BlockSet) -> bool:
    """
    Value equality across the two variants.

    A Block equals a BlockSet only when the set holds exactly that one block.
    """
    if isinstance(a, BlockSet) and isinstance(b, Block):
        a, b = b, a
    if isinstance(a, Block) and isinstance(b, BlockSet):
        return len(b) == 1 and b.sole() == a
    return a == b


def includes(block: Block, point: Any) -> bool:
    return block.includes(point)


def surrounds(a: Block, b: Block) -> bool:
    return a.surrounds(b)


def covers(a: Block, b: Block) -> bool:
    return a.covers(b)


def intersects_top(a: Block, b: Block) -> bool:
    return a.intersects_top(b)


def intersects_bottom(a: Block, b: Block) -> bool:
    return a.intersects_bottom(b)


def overlaps(a: Block, b: Block) -> bool:
    return a.overlaps(b)


def union(a: Block | BlockSet, b: Block | BlockSet) -> Block | BlockSet:
    return a.union(b)


def subtract(a: Block | BlockSet, b: Block | BlockSet) -> Block | BlockSet:
    return a.subtract(b)


def split(block: Block, cut: Block) -> BlockSet:
    return block.split(cut)


def trim_from(block: Block, new_top: Any) -> Block:
    return block.trim_from(new_top)


def trim_to(block: Block, new_bottom: Any) -> Block:
    return block.trim_to(new_bottom)


def limited(block: Block, bound: Block) -> Block | None:
    return block.limited(bound)


def padded(block: Block, top_padding: Any, bottom_padding: Any) -> Block:
    return block.padded(top_padding, bottom_padding)

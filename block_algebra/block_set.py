"""
BlockSet - an ordered run of disjoint Blocks, and the aggregate merge.

A BlockSet is what operations return when the answer is not one contiguous
range: subtracting a hole out of a block, adding two disjoint blocks, or
merging a day's worth of busy periods.

Invariants:
- Members are sorted by start
- No two members share an interior point (next.start >= prev.end)
- An empty BlockSet means "nothing"; there is no sentinel block
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .block import Block
from .errors import UnorderedBlocks

logger = logging.getLogger(__name__)


def _members(value: "Block | BlockSet") -> tuple[Block, ...]:
    if isinstance(value, BlockSet):
        return value.blocks
    if not isinstance(value, Block):
        raise TypeError(f"Expected a Block or BlockSet operand, got {type(value).__name__}")
    return (value,)


class BlockSet(Sequence):
    """
    Immutable sequence of non-overlapping Blocks sorted by start.

    Members may touch (``prev.end == next.start``): splitting a block at a
    point leaves two pieces sharing that edge. ``merge`` never produces
    touching members.
    """

    __slots__ = ("_blocks",)

    def __init__(self, blocks: Iterable[Block] = ()):
        members = tuple(blocks)
        for block in members:
            if not isinstance(block, Block):
                raise TypeError(f"BlockSet members must be Blocks, got {type(block).__name__}")
        for prev, nxt in zip(members, members[1:]):
            if nxt.start < prev.end:
                raise UnorderedBlocks(f"{nxt!r} overlaps or precedes {prev!r}; use merge()")
        self._blocks = members

    @classmethod
    def empty(cls) -> "BlockSet":
        return cls(())

    @classmethod
    def merged(cls, blocks: Iterable[Block]) -> "BlockSet":
        return merge(blocks)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self._blocks

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BlockSet(self._blocks[index])
        return self._blocks[index]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __eq__(self, other):
        if not isinstance(other, BlockSet):
            return NotImplemented
        return self._blocks == other._blocks

    def __hash__(self) -> int:
        return hash(self._blocks)

    def __repr__(self) -> str:
        return f"BlockSet([{', '.join(repr(b) for b in self._blocks)}])"

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def sole(self) -> Block:
        """
        The only member of a one-element set.

        This is the explicit way to treat a one-element BlockSet as a Block.

        Raises:
            ValueError: If the set does not hold exactly one block.
        """
        if len(self._blocks) != 1:
            raise ValueError(f"Expected exactly one block, found {len(self._blocks)}")
        return self._blocks[0]

    def span(self) -> Block | None:
        """Smallest block covering every member, or None for an empty set."""
        if not self._blocks:
            return None
        return Block(self._blocks[0].start, max(b.end for b in self._blocks))

    def total_length(self, zero: Any = 0) -> Any:
        """Sum of member lengths. Pass ``zero`` for non-numeric length types."""
        return sum((b.length for b in self._blocks), zero)

    def as_tuples(self) -> list[tuple[Any, Any]]:
        return [b.as_tuple() for b in self._blocks]

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    def includes(self, point: Any) -> bool:
        return any(b.includes(point) for b in self._blocks)

    def __contains__(self, item) -> bool:
        if isinstance(item, Block):
            return item in self._blocks
        return self.includes(item)

    def covers(self, block: Block) -> bool:
        """True if a single member covers ``block``."""
        return any(b.covers(block) for b in self._blocks)

    def overlaps(self, block: Block) -> bool:
        return any(b.overlaps(block) for b in self._blocks)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def union(self, other: "Block | BlockSet") -> "BlockSet":
        return merge([*self._blocks, *_members(other)])

    def subtract(self, other: "Block | BlockSet") -> "BlockSet":
        """
        Remove ``other`` from every member.

        Members are narrowed one cutter at a time, left to right.
        """
        remaining = self._blocks
        for cut in _members(other):
            pieces: list[Block] = []
            for block in remaining:
                pieces.extend(_members(block.subtract(cut)))
            remaining = tuple(pieces)
        return BlockSet(remaining)

    def limited(self, limiter: Block) -> "BlockSet":
        """Clamp every member to ``limiter``, dropping members left empty."""
        clamped = (b.limited(limiter) for b in self._blocks)
        return BlockSet(b for b in clamped if b is not None)

    def __add__(self, other):
        if not isinstance(other, (Block, BlockSet)):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other):
        if not isinstance(other, (Block, BlockSet)):
            return NotImplemented
        return self.subtract(other)


# =============================================================================
# MERGE
# =============================================================================


def merge(blocks: Iterable[Block]) -> BlockSet:
    """
    Collapse possibly-overlapping blocks into the minimal disjoint BlockSet.

    Sorts by start, then folds left to right: a block that overlaps (or
    touches) the last accumulated block is unioned into it, anything else
    starts a new entry.

    Args:
        blocks: Any iterable of Blocks, in any order

    Returns:
        BlockSet covering exactly the same points as the input
    """
    ordered = sorted(blocks)
    merged: list[Block] = []

    for block in ordered:
        if merged and merged[-1].overlaps(block):
            merged[-1] = merged[-1].union(block)
        else:
            merged.append(block)

    logger.debug("Merged %d blocks into %d", len(ordered), len(merged))
    return BlockSet(merged)

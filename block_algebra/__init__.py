"""
Block Algebra

Boolean-style operations on closed numeric ranges ("blocks"), used to compute
free and busy time on a schedule.

Objects:
- Block (immutable [start, end], start <= end)
- BlockSet (sorted, non-overlapping run of Blocks)

Invariants:
- Construction normalizes reversed bounds
- Every operation returns a new value; nothing is mutated
- "Nothing" is an empty BlockSet or None, never a zero block
"""

from .availability import busy_blocks, free_blocks, is_free
from .block import Block
from .block_set import BlockSet, merge
from .errors import (
    BlockAlgebraError,
    ConfigError,
    IncomparableValue,
    InvalidRange,
    InvalidSplit,
    UnorderedBlocks,
)
from .operations import (
    compare,
    covers,
    equals,
    includes,
    intersects_bottom,
    intersects_top,
    limited,
    make,
    overlaps,
    padded,
    split,
    subtract,
    surrounds,
    trim_from,
    trim_to,
    union,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "Block",
    "BlockSet",
    # Errors
    "BlockAlgebraError",
    "InvalidRange",
    "InvalidSplit",
    "IncomparableValue",
    "UnorderedBlocks",
    "ConfigError",
    # Operations
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
    # Availability
    "busy_blocks",
    "free_blocks",
    "is_free",
]

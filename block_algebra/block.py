"""
Block - a closed numeric range used to compute free and busy time.

A Block is a VALUE OBJECT with a starting value (``start``, a.k.a. ``top``) and
an ending value (``end``, a.k.a. ``bottom``). The bounds can be epoch seconds,
minutes since midnight, or any other totally ordered scalar.

Blocks combine into other blocks, or into a BlockSet when the result is not
contiguous:

    Block(3, 8) + Block(5, 12) == Block(3, 12)
    Block(5, 25) - Block(10, 20) == BlockSet([Block(5, 10), Block(20, 25)])

Invariants:
- start <= end, always (construction swaps reversed bounds)
- Blocks are never mutated; every operation returns a new value
- "Nothing" is an empty BlockSet or None, never a zero Block
"""

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import IncomparableValue, InvalidRange, InvalidSplit

if TYPE_CHECKING:
    from .block_set import BlockSet

logger = logging.getLogger(__name__)


def check_orderable(value: Any, other: Any) -> None:
    """
    Ensure ``value`` can be totally ordered against ``other``.

    Raises:
        IncomparableValue: If the two cannot be compared with ``<`` or
            ``value`` is not equal to itself (NaN).
    """
    # NaN first: Decimal NaN signals on < instead of returning False
    try:
        is_nan = value != value  # noqa: PLR0124
    except ArithmeticError as exc:
        raise IncomparableValue(f"{value!r} has no total order (NaN-like)") from exc
    if is_nan:
        raise IncomparableValue(f"{value!r} has no total order (NaN-like)")
    try:
        value < other  # noqa: B015
        other < value  # noqa: B015
    except (TypeError, ArithmeticError) as exc:
        raise IncomparableValue(f"{value!r} cannot be ordered against {other!r}") from exc


def _non_negative(value: Any) -> Any:
    # zero of the same type, so timedelta paddings work too
    if value != value:  # noqa: PLR0124
        return value
    zero = value * 0
    return value if value > zero else zero


def _require_operand(other: Any, block_set_type: type) -> None:
    if not isinstance(other, (Block, block_set_type)):
        raise TypeError(f"Expected a Block or BlockSet operand, got {type(other).__name__}")


# =============================================================================
# BLOCK
# =============================================================================


@functools.total_ordering
@dataclass(frozen=True)
class Block:
    """
    Immutable closed range ``[start, end]``.

    ``Block(10, 5)`` is the same value as ``Block(5, 10)``. A block with
    ``start == end`` is a valid zero-length block, not "no block".
    """

    start: Any
    end: Any

    def __post_init__(self):
        try:
            check_orderable(self.start, self.end)
            check_orderable(self.end, self.start)
        except IncomparableValue as exc:
            raise InvalidRange(
                f"Cannot build a block from {self.start!r} and {self.end!r}"
            ) from exc

        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def strict(cls, start: Any, end: Any) -> "Block":
        """Build a block without swapping: start > end raises InvalidRange."""
        try:
            check_orderable(start, end)
        except IncomparableValue as exc:
            raise InvalidRange(f"Cannot build a block from {start!r} and {end!r}") from exc
        if end < start:
            raise InvalidRange(f"Block start {start!r} is after end {end!r}")
        return cls(start, end)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def top(self) -> Any:
        return self.start

    @property
    def bottom(self) -> Any:
        return self.end

    @property
    def length(self) -> Any:
        """Distance between the bounds (zero for a point block)."""
        return self.end - self.start

    @property
    def is_point(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"Block({self.start!r}, {self.end!r})"

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "Block") -> int:
        """
        Lexicographic ordering by (start, end).

        Returns:
            -1, 0 or 1

        Raises:
            IncomparableValue: If ``other`` is not a Block or its bounds cannot
                be ordered against this block's bounds.
        """
        if not isinstance(other, Block):
            raise IncomparableValue(f"Cannot compare Block with {type(other).__name__}")
        try:
            mine, theirs = self.as_tuple(), other.as_tuple()
            if mine < theirs:
                return -1
            if mine > theirs:
                return 1
        except TypeError as exc:
            raise IncomparableValue(f"Cannot compare {self!r} with {other!r}") from exc
        return 0

    def __lt__(self, other):
        if not isinstance(other, Block):
            return NotImplemented
        return self.compare(other) < 0

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    def includes(self, point: Any) -> bool:
        """True if ``point`` lies within the block, edges included."""
        check_orderable(point, self.start)
        return self.start <= point <= self.end

    def __contains__(self, point: Any) -> bool:
        return self.includes(point)

    def surrounds(self, other: "Block") -> bool:
        """This block entirely surrounds the other block (no shared edges)."""
        return other.start > self.start and other.end < self.end

    def covers(self, other: "Block") -> bool:
        """This block contains the other block, shared edges allowed."""
        return other.start >= self.start and other.end <= self.end

    def intersects_top(self, other: "Block") -> bool:
        """This block's bottom edge falls inside the other block."""
        return self.start <= other.start and other.includes(self.end)

    def intersects_bottom(self, other: "Block") -> bool:
        """This block's top edge falls inside the other block."""
        return self.end >= other.end and other.includes(self.start)

    def overlaps(self, other: "Block") -> bool:
        """The blocks share at least one point. Touching edges count."""
        return self.includes(other.start) or other.includes(self.start)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def union(self, other: "Block | BlockSet") -> "Block | BlockSet":
        """
        Combine this block with another block or a BlockSet.

        Two overlapping (or touching) blocks collapse into the block spanning
        both. Disjoint blocks stay disjoint and come back as a BlockSet ordered
        by start. Adding a BlockSet always returns the merged BlockSet.
        """
        from .block_set import BlockSet, merge

        _require_operand(other, BlockSet)
        if isinstance(other, BlockSet):
            return merge([self, *other])
        if self.overlaps(other):
            return Block(min(self.start, other.start), max(self.end, other.end))
        return BlockSet(sorted((self, other)))

    def split(self, cut: "Block") -> "BlockSet":
        """
        Cut ``cut`` out of this block.

        Returns:
            Two-element BlockSet: the piece before the cutter and the piece
            after it. Either piece is a point block when the cutter touches
            that edge.

        Raises:
            InvalidSplit: If ``cut`` is not covered by this block.
        """
        from .block_set import BlockSet

        if not self.covers(cut):
            raise InvalidSplit(f"{cut!r} is not inside {self!r}")
        return BlockSet((Block(self.start, cut.start), Block(cut.end, self.end)))

    def subtract(self, other: "Block | BlockSet") -> "Block | BlockSet":
        """
        Remove ``other``'s range from this block.

        Against a single block the result is one of:
        - this block unchanged, when the two do not overlap (touching edges
          remove nothing)
        - an empty BlockSet, when ``other`` covers this block
        - the remaining Block, when ``other`` clips the top or the bottom
        - a two-element BlockSet, when ``other`` cuts a hole in the middle

        Against a BlockSet each member is removed in turn, left to right, and
        the result is always a BlockSet.
        """
        from .block_set import BlockSet

        _require_operand(other, BlockSet)
        if isinstance(other, BlockSet):
            remaining = BlockSet((self,))
            for cut in other:
                remaining = remaining.subtract(cut)
            return remaining

        if self.end <= other.start or other.end <= self.start:
            return self
        if other.start <= self.start and other.end >= self.end:
            return BlockSet.empty()
        if other.start <= self.start:
            return Block(other.end, self.end)
        if other.end >= self.end:
            return Block(self.start, other.start)
        return BlockSet((Block(self.start, other.start), Block(other.end, self.end)))

    def trim_from(self, new_top: Any) -> "Block":
        """A block created by cutting the top off this block."""
        return Block.strict(new_top, self.end)

    def trim_to(self, new_bottom: Any) -> "Block":
        """A block created by cutting the bottom off this block."""
        return Block.strict(self.start, new_bottom)

    def limited(self, limiter: "Block") -> "Block | None":
        """This block clamped to ``limiter``, or None if nothing is left."""
        start = max(self.start, limiter.start)
        end = min(self.end, limiter.end)
        if start > end:
            return None
        return Block(start, end)

    def padded(self, top_padding: Any, bottom_padding: Any) -> "Block":
        """Grow the block on both sides. Negative padding is treated as zero."""
        top, bottom = _non_negative(top_padding), _non_negative(bottom_padding)
        # zero padding is skipped so an int 0 can pad a datetime block
        return Block(self.start - top if top else self.start, self.end + bottom if bottom else self.end)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other):
        from .block_set import BlockSet

        if not isinstance(other, (Block, BlockSet)):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other):
        from .block_set import BlockSet

        if not isinstance(other, (Block, BlockSet)):
            return NotImplemented
        return self.subtract(other)

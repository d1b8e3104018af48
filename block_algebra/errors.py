"""
Errors raised by the block algebra.

All of these are precondition violations: the caller passed a malformed range
and must fix its input. Nothing here is transient, so nothing is retried.
"""


class BlockAlgebraError(Exception):
    """Base class for every error raised by block_algebra."""

    pass


class InvalidRange(BlockAlgebraError, ValueError):
    """A block would end up with start > end, or its bounds cannot be ordered."""

    pass


class InvalidSplit(BlockAlgebraError, ValueError):
    """The cutter passed to split() is not fully contained in the block."""

    pass


class IncomparableValue(BlockAlgebraError, TypeError):
    """A value has no total order against the block bounds (e.g. NaN)."""

    pass


class UnorderedBlocks(BlockAlgebraError, ValueError):
    """BlockSet members are not sorted by start or share interior points."""

    pass


class ConfigError(BlockAlgebraError):
    """Availability configuration could not be loaded or validated."""

    pass

"""
Free/busy helpers built on the block algebra.

Busy periods come in as Blocks in any order, possibly overlapping. They are
padded, clamped to the window of interest and merged; free time is whatever
of the window is left after subtracting them.

No calendars or timezones here: bounds are whatever scalar the caller uses
(epoch seconds, minutes since midnight, ...).
"""

import logging
from collections.abc import Iterable
from typing import Any

from . import config
from .block import Block
from .block_set import BlockSet, merge

logger = logging.getLogger(__name__)


def busy_blocks(
    busy: Iterable[Block],
    window: Block | None = None,
    pad_before: Any = None,
    pad_after: Any = None,
) -> BlockSet:
    """
    Normalize busy periods into a disjoint BlockSet.

    Args:
        busy: Busy blocks, any order, may overlap
        window: Optional bound; busy time outside it is dropped
        pad_before: Extra time reserved before each busy block
        pad_after: Extra time reserved after each busy block

    Returns:
        Merged BlockSet of busy time
    """
    if pad_before is None:
        pad_before = config.PAD_BEFORE
    if pad_after is None:
        pad_after = config.PAD_AFTER

    padded = (b.padded(pad_before, pad_after) for b in busy)
    if window is not None:
        clamped = (b.limited(window) for b in padded)
        padded = (b for b in clamped if b is not None)
    return merge(padded)


def free_blocks(
    window: Block,
    busy: Iterable[Block],
    min_length: Any = None,
    pad_before: Any = None,
    pad_after: Any = None,
) -> BlockSet:
    """
    Free time inside ``window`` once ``busy`` is taken out.

    Zero-length remainders are never reported. Free blocks shorter than
    ``min_length`` are dropped.
    """
    if min_length is None:
        min_length = config.MIN_FREE_LENGTH

    taken = busy_blocks(busy, window=window, pad_before=pad_before, pad_after=pad_after)
    remaining = BlockSet((window,)).subtract(taken)
    free = BlockSet(b for b in remaining if not b.is_point and (not min_length or b.length >= min_length))

    logger.debug(
        "Window %r: %d busy blocks, %d free blocks",
        window,
        len(taken),
        len(free),
    )
    return free


def is_free(window: Block, busy: Iterable[Block], candidate: Block, **kwargs) -> bool:
    """True if ``candidate`` fits entirely inside one free block of ``window``."""
    return free_blocks(window, busy, **kwargs).covers(candidate)

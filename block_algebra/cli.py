#!/usr/bin/env python3
"""
block_algebra CLI

Quick command-line access to the block algebra. Blocks are written as
START,END (ints or floats).

Usage:
    python -m block_algebra merge 1,5 3,8 10,12      # Merge overlapping blocks
    python -m block_algebra union 3,8 5,12           # Union of two blocks
    python -m block_algebra subtract 5,25 10,20      # Cut blocks out of the first
    python -m block_algebra free --window 540,1260 --busy 600,660 --busy 900,960
    python -m block_algebra free --window 0,100 --profile focus --config availability.yaml
"""

import argparse
import json
import logging
import sys

from . import config
from .availability import free_blocks
from .block import Block
from .block_set import BlockSet, merge
from .errors import BlockAlgebraError
from .observability import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_block(text: str) -> Block:
    """Parse ``START,END`` into a Block."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected START,END, got '{text}'")
    try:
        start, end = parse_number(parts[0].strip()), parse_number(parts[1].strip())
        return Block(start, end)
    except (ValueError, BlockAlgebraError) as exc:
        raise argparse.ArgumentTypeError(f"invalid block '{text}': {exc}") from exc


def render(result: Block | BlockSet, as_json: bool = False) -> str:
    """One ``start end`` line per block, or a JSON list of pairs."""
    blocks = [result] if isinstance(result, Block) else list(result)
    if as_json:
        return json.dumps([list(b.as_tuple()) for b in blocks])
    return "\n".join(f"{b.start} {b.end}" for b in blocks)


def cmd_merge(args) -> Block | BlockSet:
    """Merge overlapping blocks."""
    return merge(args.blocks)


def cmd_union(args) -> Block | BlockSet:
    """Union of two blocks."""
    return args.a.union(args.b)


def cmd_subtract(args) -> Block | BlockSet:
    """Subtract one or more blocks from the first."""
    if len(args.cuts) == 1:
        return args.a.subtract(args.cuts[0])
    return args.a.subtract(merge(args.cuts))


def cmd_free(args) -> Block | BlockSet:
    """Free time inside a window."""
    profile = config.get_profile(args.profile, args.config)

    def pick(value, default):
        return default if value is None else value

    free = free_blocks(
        args.window,
        args.busy,
        min_length=pick(args.min_length, profile.min_length),
        pad_before=pick(args.pad_before, profile.pad_before),
        pad_after=pick(args.pad_after, profile.pad_after),
    )
    logger.info("Found %d free blocks", len(free), extra={"window": args.window, "free": free})
    return free


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="block_algebra", description="Block algebra CLI")
    parser.add_argument("--json", action="store_true", help="Print a JSON list of [start, end] pairs")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL.upper(),
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # merge
    p = subparsers.add_parser("merge", help="Merge overlapping blocks")
    p.add_argument("blocks", nargs="+", type=parse_block, help="Blocks as START,END")

    # union
    p = subparsers.add_parser("union", help="Union of two blocks")
    p.add_argument("a", type=parse_block)
    p.add_argument("b", type=parse_block)

    # subtract
    p = subparsers.add_parser("subtract", help="Subtract blocks from the first block")
    p.add_argument("a", type=parse_block)
    p.add_argument("cuts", nargs="+", type=parse_block)

    # free
    p = subparsers.add_parser("free", help="Free time inside a window")
    p.add_argument("--window", required=True, type=parse_block, help="Window as START,END")
    p.add_argument("--busy", action="append", default=[], type=parse_block, help="Busy block (repeatable)")
    p.add_argument("--min-length", type=parse_number, help="Drop free blocks shorter than this")
    p.add_argument("--pad-before", type=parse_number, help="Padding before each busy block")
    p.add_argument("--pad-after", type=parse_number, help="Padding after each busy block")
    p.add_argument("--profile", default=config.DEFAULT_PROFILE, help="Availability profile name")
    p.add_argument("--config", help="YAML file with availability profiles")

    return parser


COMMANDS = {
    "merge": cmd_merge,
    "union": cmd_union,
    "subtract": cmd_subtract,
    "free": cmd_free,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, config.LOG_JSON)

    try:
        result = COMMANDS[args.command](args)
    except BlockAlgebraError as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    output = render(result, as_json=args.json)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

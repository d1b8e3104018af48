"""
Observability module: logging setup for the block_algebra command line.

Usage:
    from block_algebra.observability import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
    logger.info("Computed free time", extra={"free_blocks": 3})
"""

from .logging import HumanFormatter, JSONFormatter, configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
]

"""loguru setup for sqlcases.

Library modules import ``logger`` from here.  Output under the ``sqlcases``
name is disabled until the embedding application calls
:func:`setup_logging`, which adds one stderr sink of its own and leaves every
other sink in the process untouched.
"""
from __future__ import annotations

import sys

from loguru import logger

logger.disable("sqlcases")

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

#: Id of the sink installed by setup_logging, or None.
_sink_id: int | None = None


def setup_logging(level: str = "INFO") -> None:
    """Enable sqlcases log output on a human-readable stderr sink.

    Calling again replaces the sink this function installed earlier, so at
    most one sqlcases sink exists at a time.

    Args:
        level: Minimum level to emit.
    """
    global _sink_id

    if _sink_id is not None:
        logger.remove(_sink_id)
    _sink_id = logger.add(
        sys.stderr,
        level=level,
        format=_LOG_FORMAT,
        filter="sqlcases",
        colorize=True,
    )
    logger.enable("sqlcases")


def reset_logging() -> None:
    """Remove the sink added by :func:`setup_logging` and silence sqlcases again."""
    global _sink_id

    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None
    logger.disable("sqlcases")


__all__ = ["logger", "setup_logging", "reset_logging"]

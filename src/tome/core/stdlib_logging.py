from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "tome"
_TOME_STREAM_HANDLER: logging.Handler | None = None


def configure_logging(*, debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Configure the ``tome`` logger to write to stderr.

    stdout is reserved for command output (usage listings, completions,
    ``--json`` payloads), so the handler only ever targets stderr.

    Idempotent per-process: a second call replaces the handler installed by
    the first one and updates the level.
    """
    global _TOME_STREAM_HANDLER

    logger = logging.getLogger(_LOGGER_NAME)
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    if _TOME_STREAM_HANDLER is not None:
        logger.removeHandler(_TOME_STREAM_HANDLER)
        _TOME_STREAM_HANDLER.close()
        _TOME_STREAM_HANDLER = None

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    # Keep records out of the root logger's lastResort handler.
    logger.propagate = False

    _TOME_STREAM_HANDLER = handler
    return logger


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler and restore propagation."""
    global _TOME_STREAM_HANDLER
    logger = logging.getLogger(_LOGGER_NAME)
    if _TOME_STREAM_HANDLER is not None:
        logger.removeHandler(_TOME_STREAM_HANDLER)
        _TOME_STREAM_HANDLER.close()
    _TOME_STREAM_HANDLER = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = ["configure_logging", "reset_logging_for_tests"]

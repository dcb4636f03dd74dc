"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from typing import Mapping, Optional

from tome.core.config import TomeConfig, load_config
from tome.core.stdlib_logging import configure_logging


def get_config(args: argparse.Namespace, *, environ: Optional[Mapping[str, str]] = None) -> TomeConfig:
    """Build the invocation's config from parsed flags and set up logging.

    Args:
        args: Parsed arguments with optional root/executable/debug attributes
        environ: Environment override (tests)

    Returns:
        TomeConfig: Immutable configuration passed to every component
    """
    config = load_config(
        root=getattr(args, "root", None),
        executable=getattr(args, "executable", None),
        debug=bool(getattr(args, "debug", False)),
        environ=environ,
    )
    configure_logging(debug=config.debug)
    return config


__all__ = ["get_config"]

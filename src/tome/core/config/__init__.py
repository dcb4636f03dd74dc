"""Configuration for tome.

One immutable :class:`TomeConfig` per invocation; see :mod:`.loader` for the
precedence rules.
"""
from __future__ import annotations

from .loader import load_config, read_config_file, user_config_path
from .models import TomeConfig

__all__ = ["TomeConfig", "load_config", "read_config_file", "user_config_path"]

"""Utility helpers for tome core.

- text: identifier and env-prefix normalization
- shell: POSIX shell quoting for generated scripts
- patterns: gitignore-style ignore matching
"""
from __future__ import annotations

from .patterns import IgnorePatterns, load_ignore_patterns
from .shell import quote, quote_double, join
from .text import env_prefix, snake_case

__all__ = [
    "IgnorePatterns",
    "load_ignore_patterns",
    "quote",
    "quote_double",
    "join",
    "env_prefix",
    "snake_case",
]

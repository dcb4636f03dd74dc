"""Identifier normalization helpers.

Executable names become shell variable prefixes (``tome-cli`` -> ``TOME_CLI``),
so the conversion has to be deterministic and always yield a valid identifier.
"""
from __future__ import annotations

import re

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")

DEFAULT_ENV_PREFIX = "TOME"


def snake_case(value: str) -> str:
    """Convert ``value`` to snake_case.

    camelCase boundaries become underscores and every run of
    non-alphanumeric characters collapses into a single underscore.

    Examples:
        >>> snake_case("tome-cli")
        'tome_cli'
        >>> snake_case("myTool.sh")
        'my_tool_sh'
    """
    spaced = _CAMEL_BOUNDARY_RE.sub("_", value)
    return _NON_ALNUM_RE.sub("_", spaced).strip("_").lower()


def env_prefix(executable_name: str) -> str:
    """Return the upper-case env var prefix for an executable name."""
    prefix = snake_case(executable_name).upper()
    if not prefix:
        return DEFAULT_ENV_PREFIX
    if prefix[0].isdigit():
        return f"_{prefix}"
    return prefix


__all__ = ["snake_case", "env_prefix", "DEFAULT_ENV_PREFIX"]

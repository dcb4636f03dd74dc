"""POSIX shell quoting.

Every path, argument and value interpolated into generated shell text goes
through one of these helpers. Nothing user- or filesystem-derived is ever
emitted raw.
"""
from __future__ import annotations

import re
import shlex
from typing import Iterable

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_DOUBLE_QUOTE_SPECIALS_RE = re.compile(r'([\\"$`])')


def quote(value: str) -> str:
    """Quote ``value`` as a single shell word.

    Strings made only of safe characters are returned unchanged for
    readability; anything else is single-quoted.
    """
    return shlex.quote(str(value))


def quote_double(value: str) -> str:
    """Quote ``value`` inside double quotes with the four specials escaped.

    Inside ``"..."`` only backslash, double quote, dollar and backtick keep
    a special meaning, so escaping those makes the content literal.
    """
    return '"' + _DOUBLE_QUOTE_SPECIALS_RE.sub(r"\\\1", str(value)) + '"'


def join(words: Iterable[str]) -> str:
    """Quote each word and join them with single spaces."""
    return " ".join(quote(w) for w in words)


def is_identifier(name: str) -> bool:
    """Return True if ``name`` is usable as a shell variable name."""
    return bool(_IDENTIFIER_RE.match(name))


def comment_safe(value: str) -> str:
    """Make ``value`` safe to place after ``#`` on a single line."""
    return "".join(ch if ch.isprintable() else "?" for ch in str(value))


__all__ = ["quote", "quote_double", "join", "is_identifier", "comment_safe"]

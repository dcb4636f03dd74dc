"""gitignore-style path matching for the root's ignore file.

Only the subset of gitignore syntax that script trees actually use:

- blank lines and ``#`` comments are skipped
- ``!pattern`` re-includes a previously ignored path
- ``pattern/`` only matches directories
- a pattern without ``/`` matches a file or directory name at any depth
- a pattern containing ``/`` is anchored at the root (a leading ``/`` is optional)
- ``*``, ``?`` and ``[...]`` match within one path component, ``**`` spans
  any number of components

Example:
    ignore = IgnorePatterns.from_lines(["*.md", "scratch/", "!keep.md"])
    ignore.matches("docs/readme.md")        # True
    ignore.matches("scratch", is_dir=True)  # True
    ignore.matches("keep.md")               # False
"""
from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Iterable, Sequence

from tome.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Rule:
    parts: tuple[str, ...]
    negated: bool = False
    dir_only: bool = False


def _parse_line(line: str) -> _Rule | None:
    text = line.rstrip("\n").rstrip()
    if not text or text.startswith("#"):
        return None

    negated = False
    if text.startswith("!"):
        negated = True
        text = text[1:]
    elif text.startswith("\\"):
        # "\#foo" and "\!foo" are literal names
        text = text[1:]

    dir_only = text.endswith("/")
    text = text.rstrip("/")
    if not text:
        return None

    anchored = "/" in text
    parts = tuple(p for p in text.lstrip("/").split("/") if p)
    if not anchored:
        parts = ("**",) + parts
    return _Rule(parts=parts, negated=negated, dir_only=dir_only)


def _match_parts(path_parts: Sequence[str], pattern_parts: Sequence[str]) -> bool:
    if not pattern_parts:
        return not path_parts
    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(_match_parts(path_parts[i:], rest) for i in range(len(path_parts) + 1))
    if not path_parts:
        return False
    return fnmatch.fnmatchcase(path_parts[0], head) and _match_parts(path_parts[1:], rest)


@dataclass(frozen=True)
class IgnorePatterns:
    """Compiled ignore rules; the last matching rule wins."""

    rules: tuple[_Rule, ...] = field(default_factory=tuple)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "IgnorePatterns":
        rules = [r for r in (_parse_line(line) for line in lines) if r is not None]
        return cls(rules=tuple(rules))

    def _evaluate(self, parts: Sequence[str], is_dir: bool) -> bool:
        ignored = False
        for rule in self.rules:
            if rule.dir_only and not is_dir:
                continue
            if _match_parts(parts, rule.parts):
                ignored = not rule.negated
        return ignored

    def matches(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Return True if ``rel_path`` (relative to the root) is ignored.

        A path inside an ignored directory is ignored as well.
        """
        if not self.rules:
            return False
        parts = [p for p in PurePosixPath(rel_path).parts if p not in ("", ".", "/")]
        if not parts:
            return False
        for depth in range(1, len(parts)):
            if self._evaluate(parts[:depth], True):
                return True
        return self._evaluate(parts, is_dir)


def load_ignore_patterns(path: Path) -> IgnorePatterns:
    """Load an ignore file; a missing file yields an empty matcher."""
    path = Path(path)
    if not path.is_file():
        return IgnorePatterns()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read ignore file {path}: {exc}", context={"path": str(path)}) from exc
    rules = IgnorePatterns.from_lines(text.splitlines())
    logger.debug("loaded %d ignore rules from %s", len(rules.rules), path)
    return rules


__all__ = ["IgnorePatterns", "load_ignore_patterns"]

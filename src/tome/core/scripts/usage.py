"""Usage and help extraction from a script's leading comment block.

Expected layout::

    #!/bin/bash
    # USAGE: $0 [options] <arg1> <arg2>
    # This is the help text for the script.
    # It can span multiple lines.

    echo 1

The block is read lazily and reading stops at the first line that is not a
comment, so large script trees stay cheap to list.
"""
from __future__ import annotations

import logging
import re
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from tome.core.exceptions import ScriptReadError

logger = logging.getLogger(__name__)

COMMENT_PREFIX_CHARS = "#/-*"
USAGE_MARKERS = ("USAGE:", "SUMMARY:")

_STARTS_WITH_COMMENT_RE = re.compile(r"^[/*\-#]+")
_MARKER_RE = re.compile("|".join(re.escape(m) for m in USAGE_MARKERS))
# Option tokens meant for tome itself (e.g. TOME_COMPLETION), not for the user.
_INTERNAL_TOKEN_RE = re.compile(r"TOME_[A-Z_]+")


@dataclass(frozen=True)
class UsageInfo:
    usage: str = ""
    help: str = ""


def is_comment_line(line: str) -> bool:
    return bool(_STARTS_WITH_COMMENT_RE.match(line))


def strip_comment_prefix(line: str) -> str:
    return line.lstrip(COMMENT_PREFIX_CHARS)


def _clean_usage(line: str, script_name: str) -> str:
    text = _MARKER_RE.sub("", strip_comment_prefix(line), count=1)
    self_refs = [re.escape("$0")]
    if script_name:
        self_refs.append(re.escape(script_name))
    # Whole tokens only: "foo" must not be cut out of "--foo-bar".
    text = re.sub(r"(?<!\S)(?:" + "|".join(self_refs) + r")(?!\S)", "", text)
    text = _INTERNAL_TOKEN_RE.sub("", text)
    return text.strip()


def parse_usage_lines(lines: Iterable[str], script_name: str = "") -> UsageInfo:
    """Extract usage/help from an iterable of script lines.

    Consumes the iterable only up to the end of the leading comment run.
    """
    it: Iterator[str] = (line.rstrip("\r\n") for line in lines)

    first = next(it, None)
    if first is None:
        return UsageInfo()
    if first.startswith("#!"):
        first = next(it, None)
        if first is None:
            return UsageInfo()

    # The marker has to live in the comment block directly under the shebang.
    if not is_comment_line(first):
        return UsageInfo()

    block = [first]
    for line in it:
        if not is_comment_line(line):
            break
        block.append(line)

    for idx, line in enumerate(block):
        if _MARKER_RE.search(line):
            usage = _clean_usage(line, script_name)
            help_lines = [strip_comment_prefix(raw).rstrip() for raw in block[idx:]]
            help_text = textwrap.dedent("\n".join(help_lines)).strip("\n")
            return UsageInfo(usage=usage, help=help_text)

    return UsageInfo()


def parse_usage(path: Path) -> UsageInfo:
    """Read ``path`` and extract its usage/help.

    Raises:
        ScriptReadError: If the file cannot be opened or read
    """
    path = Path(path)
    logger.debug("parsing script %s", path)
    try:
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            return parse_usage_lines(fh, script_name=path.name)
    except OSError as exc:
        raise ScriptReadError(f"Failed to read script {path}: {exc}", context={"path": str(path)}) from exc


__all__ = [
    "UsageInfo",
    "USAGE_MARKERS",
    "COMMENT_PREFIX_CHARS",
    "is_comment_line",
    "strip_comment_prefix",
    "parse_usage_lines",
    "parse_usage",
]

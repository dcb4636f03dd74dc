"""Resolve CLI tokens to an executable under the root.

Tokens are joined onto the root one segment at a time. The first candidate
that is a regular file with the owner-exec bit wins and every token after it
becomes an argument for the script:

    root/
      deploy/
        web        (executable)

    ["deploy", "web", "--env", "prod"] -> root/deploy/web, ["--env", "prod"]
"""
from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from tome.core.exceptions import ExecutableNotFoundError, NoFileSpecifiedError

from .models import is_executable_by_owner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedScript:
    path: Path
    args: list[str] = field(default_factory=list)


def _within_root(candidate: str, root: str) -> bool:
    return candidate == root or candidate.startswith(root.rstrip(os.sep) + os.sep)


def resolve_script(root: Path, tokens: Sequence[str]) -> ResolvedScript:
    """Find the shortest token prefix that names an executable under ``root``.

    Args:
        root: Absolute root directory
        tokens: CLI tokens, path segments first, script arguments after

    Returns:
        ResolvedScript with the executable path and the remaining tokens

    Raises:
        NoFileSpecifiedError: If ``tokens`` is empty (no filesystem access happens)
        ExecutableNotFoundError: If no prefix names an executable, or a prefix
            names an existing file that is not executable
    """
    if not tokens:
        raise NoFileSpecifiedError()

    root_str = os.path.normpath(str(root))
    candidate = root_str
    for idx, token in enumerate(tokens):
        candidate = os.path.normpath(os.path.join(candidate, token))
        if not _within_root(candidate, root_str):
            logger.debug("candidate %s escapes root %s", candidate, root_str)
            continue
        try:
            st = os.stat(candidate)
        except FileNotFoundError:
            logger.debug("candidate %s does not exist", candidate)
            continue
        except OSError as exc:
            logger.debug("cannot stat candidate %s: %s", candidate, exc)
            continue

        if stat.S_ISDIR(st.st_mode):
            continue
        if stat.S_ISREG(st.st_mode) and is_executable_by_owner(st.st_mode):
            args = list(tokens[idx + 1 :])
            logger.debug("resolved %s with args %r", candidate, args)
            return ResolvedScript(path=Path(candidate), args=args)

        # Exists but is the wrong kind; nothing deeper can exist under a file.
        raise ExecutableNotFoundError(
            f"No executable file found: {candidate} is not executable",
            context={"path": candidate},
        )

    raise ExecutableNotFoundError(
        "No executable file found",
        context={"root": root_str, "tokens": list(tokens)},
    )


__all__ = ["ResolvedScript", "resolve_script"]

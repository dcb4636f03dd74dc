from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .usage import parse_usage

logger = logging.getLogger(__name__)

OWNER_EXEC_BIT = stat.S_IXUSR


def is_executable_by_owner(mode: int) -> bool:
    return bool(mode & OWNER_EXEC_BIT)


def is_executable_file(path: Path) -> bool:
    """True for a regular file (symlinks followed) with the owner-exec bit."""
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and is_executable_by_owner(st.st_mode)


@dataclass(frozen=True)
class Script:
    """An executable under the root together with its usage/help text.

    Usage and help are parsed once by :meth:`load` and never change.
    """

    path: Path
    root: Path
    usage: str = ""
    help: str = ""

    @classmethod
    def load(cls, path: Path, root: Path) -> "Script":
        info = parse_usage(path)
        return cls(path=Path(path), root=Path(root), usage=info.usage, help=info.help)

    @property
    def name(self) -> str:
        return self.path.name

    def path_without_root(self) -> str:
        try:
            return self.path.relative_to(self.root).as_posix()
        except ValueError:
            return self.path.as_posix()

    @property
    def path_segments(self) -> list[str]:
        return self.path_without_root().split("/")

    @property
    def command_name(self) -> str:
        """Space-joined segments, i.e. how the script is invoked on the CLI."""
        return " ".join(self.path_segments)

    def has_completions(self, marker: str = "TOME_COMPLETION") -> bool:
        """Return True if the script body mentions the completion marker."""
        try:
            body = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("cannot read %s for completion marker: %s", self.path, exc)
            return False
        return marker in body

    def usage_line(self) -> str:
        return f"{self.command_name}: {self.usage}"

    def help_text(self) -> str:
        return f"{self.command_name}\n---\n{self.help}"

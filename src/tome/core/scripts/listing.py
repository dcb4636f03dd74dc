"""Enumerate every executable under the root (for ``help`` and completion)."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from tome.core.utils.patterns import IgnorePatterns

from .models import is_executable_file

logger = logging.getLogger(__name__)


def collect_executables(
    root: Path,
    ignore: Optional[IgnorePatterns] = None,
    *,
    skip_dirs: tuple[str, ...] = (),
) -> list[Path]:
    """Return executable files under ``root`` sorted by path.

    Symlinked files are included (the link path is returned, not its target);
    broken links are skipped. Hidden directories, directories named in
    ``skip_dirs`` and ignored paths are not descended into.
    """
    root = Path(root)
    ignore = ignore or IgnorePatterns()
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        rel_dir = current.relative_to(root)

        kept = []
        for d in sorted(dirnames):
            if d.startswith(".") or d in skip_dirs:
                continue
            if ignore.matches((rel_dir / d).as_posix(), is_dir=True):
                logger.debug("ignoring directory %s", current / d)
                continue
            kept.append(d)
        dirnames[:] = kept

        for name in sorted(filenames):
            if name.startswith("."):
                continue
            if ignore.matches((rel_dir / name).as_posix()):
                continue
            path = current / name
            if not is_executable_file(path):
                if path.is_symlink() and not path.exists():
                    logger.debug("skipping broken symlink %s", path)
                continue
            found.append(path)

    return sorted(found)


__all__ = ["collect_executables"]

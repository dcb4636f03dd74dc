"""Discover pre-execution hooks in ``<root>/.hooks.d``.

Layout::

    .hooks.d/
      00-check-vpn          executed as a subprocess (needs owner-exec bit)
      05-env.source         dot-sourced into the wrapper shell
      10-audit              executed as a subprocess

Hooks run in ascending name order, so numeric prefixes set the order.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from tome.core.exceptions import HookDiscoveryError
from tome.core.scripts.models import is_executable_by_owner

from .models import Hook, HookKind

logger = logging.getLogger(__name__)


def classify_hook(name: str, source_suffix: str = ".source") -> HookKind:
    return HookKind.SOURCED if name.endswith(source_suffix) else HookKind.EXECUTED


def discover_hooks(hooks_dir: Path, *, source_suffix: str = ".source") -> list[Hook]:
    """Return the hooks in ``hooks_dir`` sorted by name.

    A missing directory is not an error and yields an empty list.

    Raises:
        HookDiscoveryError: If the directory exists but cannot be read
    """
    hooks_dir = Path(hooks_dir)
    if not hooks_dir.exists():
        logger.debug("hooks directory not found: %s", hooks_dir)
        return []

    try:
        entries = list(os.scandir(hooks_dir))
    except OSError as exc:
        raise HookDiscoveryError(
            f"Failed to read hooks directory {hooks_dir}: {exc}",
            context={"path": str(hooks_dir)},
        ) from exc

    hooks: list[Hook] = []
    for entry in entries:
        full_path = Path(entry.path)
        try:
            if entry.is_dir():
                continue
            st = entry.stat()
        except OSError as exc:
            logger.warning("failed to stat hook %s: %s", full_path, exc)
            continue

        kind = classify_hook(entry.name, source_suffix)
        if kind is HookKind.EXECUTED:
            if not stat.S_ISREG(st.st_mode) or not is_executable_by_owner(st.st_mode):
                logger.warning("skipping non-executable hook without %s suffix: %s", source_suffix, full_path)
                continue

        hook = Hook(path=full_path.absolute(), name=entry.name, kind=kind)
        hooks.append(hook)
        logger.debug("discovered hook %s (%s)", hook.path, hook.kind.value)

    # Byte order of the on-disk name, including undecodable (surrogateescape) names.
    hooks.sort(key=lambda h: os.fsencode(h.name))
    logger.debug("discovered %d hook(s)", len(hooks))
    return hooks


__all__ = ["classify_hook", "discover_hooks"]

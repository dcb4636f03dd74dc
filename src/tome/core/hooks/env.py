"""Environment injected into hooks and the target script."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

from tome.core.config import TomeConfig


def build_hook_env(config: TomeConfig, script_path: Path, script_args: Sequence[str]) -> Dict[str, str]:
    """Return the variables exported on both the direct-exec and wrapper paths.

    ``TOME_*`` names are always present; ``<PREFIX>_ROOT`` and
    ``<PREFIX>_EXECUTABLE`` repeat the root and executable under a prefix
    derived from the executable name, so differently-named installs don't
    collide.
    """
    root = str(Path(config.root).absolute())
    prefix = config.env_prefix

    env: Dict[str, str] = {}
    env["TOME_ROOT"] = root
    env["TOME_EXECUTABLE"] = config.executable
    env[f"{prefix}_ROOT"] = root
    env[f"{prefix}_EXECUTABLE"] = config.executable
    env["TOME_SCRIPT_PATH"] = str(script_path)
    env["TOME_SCRIPT_NAME"] = Path(script_path).name
    env["TOME_SCRIPT_ARGS"] = " ".join(str(a) for a in script_args)
    return env


__all__ = ["build_hook_env"]

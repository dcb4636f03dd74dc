from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tome.core.utils.text import env_prefix


@dataclass(frozen=True)
class TomeConfig:
    """Resolved configuration for one CLI invocation.

    Built once at startup by :func:`tome.core.config.load_config` and passed
    explicitly to every component.
    """

    root: Path
    executable: str
    debug: bool = False
    hooks_dir: str = ".hooks.d"
    source_suffix: str = ".source"
    ignore_file: str = ".tomeignore"
    completion_env: str = "TOME_COMPLETION"
    completion_flag: str = "--completion"

    @property
    def env_prefix(self) -> str:
        """Upper-case variable prefix derived from the executable name."""
        return env_prefix(self.executable)

    @property
    def hooks_path(self) -> Path:
        return self.root / self.hooks_dir

    @property
    def ignore_path(self) -> Path:
        return self.root / self.ignore_file

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

from tome.core.config import TomeConfig

from .discovery import discover_hooks
from .env import build_hook_env
from .models import Hook
from .wrapper import render_wrapper


class HookService:
    """Hook discovery and wrapper generation for one configuration.

    Hooks live in ``<root>/<hooks_dir>``. When any are present, the target is
    not exec'd directly; a generated POSIX-shell wrapper runs the hooks in
    order and then execs the target itself.
    """

    def __init__(self, config: TomeConfig) -> None:
        self.config = config

    @property
    def hooks_dir(self) -> Path:
        return self.config.hooks_path

    def discover_hooks(self) -> list[Hook]:
        return discover_hooks(self.hooks_dir, source_suffix=self.config.source_suffix)

    def build_env(self, script_path: Path, script_args: Sequence[str]) -> Dict[str, str]:
        return build_hook_env(self.config, script_path, script_args)

    def generate_wrapper(self, hooks: Sequence[Hook], script_path: Path, script_args: Sequence[str]) -> str:
        """Return wrapper text, or ``""`` when ``hooks`` is empty."""
        return render_wrapper(
            hooks,
            script_path,
            script_args,
            env=self.build_env(script_path, script_args),
            executable=self.config.executable,
        )

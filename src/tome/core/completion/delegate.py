"""Shell completion for scripts under the root.

Two cases:

1. The typed words already name an executable that opts in by mentioning
   ``TOME_COMPLETION``: the script is run as ``<script> --completion`` with a
   JSON request in ``$TOME_COMPLETION`` and prints ``value<TAB>description``
   lines, which are returned as-is.
2. Otherwise the words name a directory (or nothing yet) and its entries are
   offered: directories as ``name<TAB>directory``, executables as
   ``name<TAB><usage>``.
"""
from __future__ import annotations

import json
import logging
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from tome.core.config import TomeConfig
from tome.core.exceptions import CompletionError, ScriptReadError
from tome.core.scripts import Script, is_executable_file
from tome.core.utils.patterns import IgnorePatterns, load_ignore_patterns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionRequest:
    """Structured request passed to an opted-in script."""

    args: list[str] = field(default_factory=list)
    last_arg: str = ""
    current_word: str = ""

    @classmethod
    def build(cls, args: Sequence[str], current_word: str) -> "CompletionRequest":
        args = list(args)
        return cls(args=args, last_arg=args[-1] if args else "", current_word=current_word)

    def to_json(self) -> str:
        return json.dumps(asdict(self), separators=(",", ":"))


def parse_completion_output(output: str) -> list[str]:
    """Split script output into completion entries, dropping empty lines."""
    return [line for line in output.splitlines() if line.strip()]


def request_completions(
    script_path: Path,
    request: CompletionRequest,
    *,
    env_var: str = "TOME_COMPLETION",
    flag: str = "--completion",
    base_env: Optional[Mapping[str, str]] = None,
) -> list[str]:
    """Run ``script_path`` in completion mode and return its entries.

    Raises:
        CompletionError: If the script cannot be started or exits non-zero
    """
    env = dict(os.environ if base_env is None else base_env)
    env[env_var] = request.to_json()
    logger.debug("requesting completions from %s: %s", script_path, env[env_var])
    try:
        proc = subprocess.run(
            [str(script_path), flag],
            env=env,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise CompletionError(
            f"Failed to run completion for {script_path}: {exc}",
            context={"path": str(script_path)},
        ) from exc

    if proc.returncode != 0:
        raise CompletionError(
            f"Completion for {script_path} exited with status {proc.returncode}",
            context={"path": str(script_path), "exit_code": proc.returncode, "stderr": proc.stderr.strip()},
        )
    return parse_completion_output(proc.stdout)


def _directory_entries(
    config: TomeConfig,
    directory: Path,
    current_word: str,
    ignore: IgnorePatterns,
) -> list[str]:
    try:
        names = sorted(os.listdir(directory))
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return []

    out: list[str] = []
    for name in names:
        if name.startswith(".") or not name.startswith(current_word):
            continue
        path = directory / name
        if path == config.hooks_path:
            continue
        rel = path.relative_to(config.root).as_posix()
        if path.is_dir():
            if ignore.matches(rel, is_dir=True):
                continue
            out.append(f"{name}\tdirectory")
        elif is_executable_file(path):
            if ignore.matches(rel):
                continue
            try:
                usage = Script.load(path, config.root).usage
            except ScriptReadError as exc:
                logger.debug("no usage for %s: %s", path, exc)
                usage = ""
            out.append(f"{name}\t{usage}")
    return out


def _under_root(config: TomeConfig, parts: Sequence[str]) -> Optional[Path]:
    root = os.path.normpath(str(config.root))
    candidate = os.path.normpath(os.path.join(root, *parts)) if parts else root
    if candidate != root and not candidate.startswith(root.rstrip(os.sep) + os.sep):
        return None
    return Path(candidate)


def complete(config: TomeConfig, args: Sequence[str], current_word: str) -> list[str]:
    """Return completion entries for the typed ``args`` and the partial word.

    Raises:
        CompletionError: If an opted-in script fails to produce completions
    """
    ignore = load_ignore_patterns(config.ignore_path)
    typed = list(args)

    accumulated: list[str] = []
    for arg in typed:
        accumulated.append(arg)
        joint = _under_root(config, accumulated)
        if joint is None:
            continue
        if ignore.matches(joint.relative_to(config.root).as_posix()):
            continue
        if not is_executable_file(joint):
            continue
        script = Script(path=joint, root=config.root)
        if not script.has_completions(config.completion_env):
            continue
        request = CompletionRequest.build(typed, current_word)
        return request_completions(
            joint,
            request,
            env_var=config.completion_env,
            flag=config.completion_flag,
        )

    directory = _under_root(config, typed)
    if directory is None or not directory.is_dir():
        return []
    return _directory_entries(config, directory, current_word, ignore)


__all__ = [
    "CompletionRequest",
    "complete",
    "parse_completion_output",
    "request_completions",
]

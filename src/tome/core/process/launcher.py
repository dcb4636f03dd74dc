"""Hand the process over to the resolved script.

The last step of ``exec`` is always a :class:`ReplaceProcess`: the current
process image is replaced (``execve``), not forked. With hooks, the image is
``/bin/sh -c <wrapper>`` and the wrapper execs the target itself, so the same
contract holds one level down.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, NoReturn, Optional

from tome.core.config import TomeConfig
from tome.core.exceptions import ExecError
from tome.core.hooks import Hook, HookService
from tome.core.scripts import ResolvedScript

logger = logging.getLogger(__name__)

POSIX_SHELL = "/bin/sh"


@dataclass(frozen=True)
class ReplaceProcess:
    """Terminal action: replace the current process with ``path``.

    ``env`` is the complete environment of the new image; ``injected`` is the
    subset tome added, kept for display.
    """

    path: str
    argv: list[str]
    env: Dict[str, str] = field(default_factory=dict)
    injected: Dict[str, str] = field(default_factory=dict)
    wrapper: str = ""
    hooks: list[Hook] = field(default_factory=list)

    @property
    def uses_wrapper(self) -> bool:
        return bool(self.wrapper)

    def describe(self) -> dict:
        """JSON-friendly view used by dry runs."""
        return {
            "executable": self.path,
            "argv": list(self.argv),
            "env": dict(self.injected),
            "hooks": [h.to_dict() for h in self.hooks],
            "wrapper": self.wrapper or None,
        }

    def run(self) -> NoReturn:
        """Replace the current process. Returns only by raising.

        Raises:
            ExecError: If ``execve`` fails (e.g. permission revoked since resolution)
        """
        logger.debug("exec %s argv=%r", self.path, self.argv)
        try:
            os.execve(self.path, self.argv, self.env)
        except OSError as exc:
            raise ExecError(
                f"Error executing command {self.path}: {exc}",
                context={"path": self.path, "errno": exc.errno},
            ) from exc
        # execve only returns by raising
        raise ExecError(f"Error executing command {self.path}")  # pragma: no cover


def plan_execution(
    config: TomeConfig,
    resolved: ResolvedScript,
    *,
    skip_hooks: bool = False,
    base_env: Optional[Mapping[str, str]] = None,
) -> ReplaceProcess:
    """Build the terminal action for ``resolved``.

    Discovers hooks unless ``skip_hooks``; with no hooks the target is exec'd
    directly with ``argv = [path, *args]``.

    Raises:
        HookDiscoveryError: If the hooks directory is unreadable
        WrapperGenerationError: If the wrapper cannot be rendered
    """
    service = HookService(config)
    hooks: list[Hook] = [] if skip_hooks else service.discover_hooks()
    injected = service.build_env(resolved.path, resolved.args)

    env = dict(os.environ if base_env is None else base_env)
    env.update(injected)

    script_path = str(resolved.path)
    if not hooks:
        return ReplaceProcess(
            path=script_path,
            argv=[script_path, *resolved.args],
            env=env,
            injected=injected,
        )

    wrapper = service.generate_wrapper(hooks, resolved.path, resolved.args)
    # sh -c <text> <name>: <name> becomes $0 inside the wrapper.
    return ReplaceProcess(
        path=POSIX_SHELL,
        argv=[config.executable, "-c", wrapper, config.executable],
        env=env,
        injected=injected,
        wrapper=wrapper,
        hooks=hooks,
    )


__all__ = ["ReplaceProcess", "plan_execution", "POSIX_SHELL"]

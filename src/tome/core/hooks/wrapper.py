"""Render the POSIX-shell wrapper that runs hooks and then execs the target.

The wrapper is a fixed-shape script (see ``tome/data/templates/wrapper.sh.j2``):

    set -e
    export KEY=value ...
    # Hook: <name>
    set +e; . <path>; _tome_rc=$?; set -e   (sourced)
    if [ "$_tome_rc" -ne 0 ]; then ... exit 1; fi
    if ! <path>; then ... exit 1; fi        (executed)
    exec <script> <args>...

Sourced hooks run with ``set -e`` off: dash keeps errexit active inside a dot
script even under ``if !``, which would abort before the diagnostic prints.

Every path, argument, hook name and env value passes through
:mod:`tome.core.utils.shell` before it reaches the script text.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from jinja2 import TemplateError

from tome.core.exceptions import WrapperGenerationError
from tome.core.utils.shell import is_identifier
from tome.core.utils.templates import render_template

from .models import Hook

logger = logging.getLogger(__name__)

WRAPPER_TEMPLATE = "wrapper.sh.j2"
# Exported double-quoted and space-joined, unlike the exec line's word list.
SCRIPT_ARGS_VAR = "TOME_SCRIPT_ARGS"


@dataclass(frozen=True)
class EnvVar:
    key: str
    value: str
    double_quoted: bool = False


def _env_vars(env: Mapping[str, str]) -> list[EnvVar]:
    out: list[EnvVar] = []
    for key, value in env.items():
        if not is_identifier(key):
            raise WrapperGenerationError(
                f"Invalid environment variable name for wrapper: {key!r}",
                context={"key": key},
            )
        out.append(EnvVar(key=key, value=str(value), double_quoted=key == SCRIPT_ARGS_VAR))
    return out


def render_wrapper(
    hooks: Sequence[Hook],
    script_path: Path,
    script_args: Sequence[str],
    *,
    env: Mapping[str, str],
    executable: str = "tome",
) -> str:
    """Render wrapper text for ``hooks``; empty string when there are none.

    An empty result means no wrapper is needed and the caller should exec the
    target directly.

    Raises:
        WrapperGenerationError: If an env key is not a shell identifier or the
            template fails to render
    """
    if not hooks:
        return ""

    context = {
        "executable": executable,
        "env": _env_vars(env),
        "hooks": list(hooks),
        "command": [str(script_path), *[str(a) for a in script_args]],
    }
    try:
        rendered = render_template(WRAPPER_TEMPLATE, context)
    except (TemplateError, OSError) as exc:
        raise WrapperGenerationError(f"Failed to render wrapper script: {exc}") from exc

    logger.debug("generated wrapper script for %d hook(s)", len(hooks))
    return rendered


__all__ = ["EnvVar", "render_wrapper", "SCRIPT_ARGS_VAR", "WRAPPER_TEMPLATE"]

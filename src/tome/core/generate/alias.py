"""Alias wrappers.

An alias is a tiny POSIX script that pins ``TOME_ROOT`` and
``TOME_EXECUTABLE`` and re-invokes the CLI, so one installation can serve
several script trees under different command names:

    $ tome alias --root ~/ops --executable ops --write ~/bin/ops
    $ ops deploy web
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from jinja2 import TemplateError

from tome.core.config import TomeConfig
from tome.core.exceptions import WrapperGenerationError
from tome.core.utils.templates import render_template

logger = logging.getLogger(__name__)

ALIAS_TEMPLATE = "alias.sh.j2"
ALIAS_MODE = 0o744


def render_alias(config: TomeConfig, cli_command: Sequence[str]) -> str:
    """Return the alias script text for ``config``.

    Args:
        config: Configuration whose root and executable name get pinned
        cli_command: argv prefix that starts the CLI (e.g. ``["/usr/local/bin/tome"]``)

    Raises:
        WrapperGenerationError: If the template cannot be rendered
    """
    if not cli_command:
        raise WrapperGenerationError("alias needs a command to invoke")
    try:
        return render_template(
            ALIAS_TEMPLATE,
            {
                "executable": config.executable,
                "root": str(config.root),
                "command": list(cli_command),
            },
        )
    except (TemplateError, OSError) as exc:
        raise WrapperGenerationError(f"Failed to render alias: {exc}") from exc


def write_alias(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` with mode 0744 and return the path.

    Raises:
        WrapperGenerationError: If the file cannot be written
    """
    path = Path(path).expanduser()
    try:
        path.write_text(text, encoding="utf-8")
        path.chmod(ALIAS_MODE)
    except OSError as exc:
        raise WrapperGenerationError(
            f"Failed to write alias {path}: {exc}", context={"path": str(path)}
        ) from exc
    logger.debug("wrote alias %s", path)
    return path


__all__ = ["ALIAS_MODE", "ALIAS_TEMPLATE", "render_alias", "write_alias"]

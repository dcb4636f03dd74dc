"""Shell completion scripts.

Each script is a thin shim: the shell passes the words typed so far to
``<executable> complete -- <words...>`` and turns the ``value<TAB>description``
lines it prints into candidates.
"""
from __future__ import annotations

from jinja2 import TemplateError

from tome.core.exceptions import WrapperGenerationError
from tome.core.utils.templates import render_template
from tome.core.utils.text import snake_case

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


def _function_name(executable: str) -> str:
    name = snake_case(executable) or "tome"
    if name[0].isdigit():
        name = f"_{name}"
    return name


def render_completion_script(shell: str, executable: str) -> str:
    """Render the completion script for ``shell`` bound to ``executable``.

    Raises:
        ValueError: If ``shell`` is not supported
        WrapperGenerationError: If the template cannot be rendered
    """
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(f"Unsupported shell: {shell} (expected one of {', '.join(SUPPORTED_SHELLS)})")
    try:
        return render_template(
            f"completion/{shell}.j2",
            {"executable": executable, "func": _function_name(executable)},
        )
    except (TemplateError, OSError) as exc:
        raise WrapperGenerationError(f"Failed to render {shell} completion: {exc}") from exc


__all__ = ["SUPPORTED_SHELLS", "render_completion_script"]

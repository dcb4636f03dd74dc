"""Shell-script template rendering.

All bundled templates live in ``tome/data/templates`` and render through one
Jinja2 environment that registers the quoting helpers from :mod:`.shell` as
filters (``sh``, ``dq``, ``sh_join``, ``comment``). Templates never emit a raw
value; they always pipe it through one of those filters.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from jinja2 import Environment, StrictUndefined

from tome.data import read_text

from .shell import comment_safe, join, quote, quote_double


@lru_cache(maxsize=1)
def shell_environment() -> Environment:
    # Control blocks sit on their own lines; trimming keeps them from leaving
    # blank lines behind.
    env = Environment(
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["sh"] = quote
    env.filters["dq"] = quote_double
    env.filters["sh_join"] = join
    env.filters["comment"] = comment_safe
    return env


def render_template(name: str, context: Dict[str, Any]) -> str:
    """Render the bundled template ``name`` with ``context``.

    Raises:
        jinja2.TemplateError: On syntax errors or undefined variables
        OSError: If the template file cannot be read
    """
    return shell_environment().from_string(read_text("templates", name)).render(**context)


__all__ = ["render_template", "shell_environment"]

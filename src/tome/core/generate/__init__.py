"""Shell files generated for the user: alias wrappers and completion scripts."""
from __future__ import annotations

from .alias import ALIAS_MODE, render_alias, write_alias
from .completion import SUPPORTED_SHELLS, render_completion_script

__all__ = [
    "ALIAS_MODE",
    "SUPPORTED_SHELLS",
    "render_alias",
    "render_completion_script",
    "write_alias",
]

"""Scripts under the root: resolution, listing and usage/help metadata."""
from __future__ import annotations

from .listing import collect_executables
from .models import Script, is_executable_by_owner, is_executable_file
from .resolver import ResolvedScript, resolve_script
from .usage import UsageInfo, parse_usage, parse_usage_lines

__all__ = [
    "Script",
    "ResolvedScript",
    "UsageInfo",
    "collect_executables",
    "is_executable_by_owner",
    "is_executable_file",
    "parse_usage",
    "parse_usage_lines",
    "resolve_script",
]

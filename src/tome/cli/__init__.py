"""
tome CLI package.

Commands are auto-discovered from cli/commands/. Each command module
exposes SUMMARY, register_args(parser) and main(args) -> int.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Config construction from parsed flags
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_root_flag,
    add_executable_flag,
    add_debug_flag,
    add_dry_run_flag,
    add_standard_flags,
)
from ._utils import get_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_root_flag",
    "add_executable_flag",
    "add_debug_flag",
    "add_dry_run_flag",
    "add_standard_flags",
    # Utilities
    "get_config",
]

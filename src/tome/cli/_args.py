"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --root flag for the scripts root directory."""
    parser.add_argument(
        "--root",
        "-r",
        type=str,
        help="Root directory containing scripts (default: $TOME_ROOT or .)",
    )


def add_executable_flag(parser: argparse.ArgumentParser) -> None:
    """Add --executable flag overriding the program name used in env vars and output."""
    parser.add_argument(
        "--executable",
        "-e",
        type=str,
        help="Executable name (default: name this program was invoked as)",
    )


def add_debug_flag(parser: argparse.ArgumentParser) -> None:
    """Add --debug flag."""
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Debug logs on stderr",
    )


def add_dry_run_flag(parser: argparse.ArgumentParser) -> None:
    """Add --dry-run flag."""
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Show what would be executed without executing anything",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags every command accepts.

    Adds: --root, --executable, --debug
    """
    add_root_flag(parser)
    add_executable_flag(parser)
    add_debug_flag(parser)


__all__ = [
    "add_json_flag",
    "add_root_flag",
    "add_executable_flag",
    "add_debug_flag",
    "add_dry_run_flag",
    "add_standard_flags",
]

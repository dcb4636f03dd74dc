"""
tome alias command.

SUMMARY: Print (or write) a wrapper script that pins the root and executable name
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys

from tome.cli import OutputFormatter, add_json_flag, add_standard_flags, get_config
from tome.core.exceptions import TomeError
from tome.core.generate import render_alias, write_alias

SUMMARY = "Print (or write) a wrapper script that pins the root and executable name"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--write",
        "-w",
        metavar="PATH",
        help="Write the alias to PATH (mode 0744) instead of printing it",
    )
    parser.add_argument(
        "--cli",
        metavar="COMMAND",
        help="Command the alias invokes (default: the running tome program)",
    )
    add_json_flag(parser)
    add_standard_flags(parser)


def _cli_command() -> list[str]:
    """Locate the program currently running so the alias can call it back."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and os.path.isfile(argv0):
        return [os.path.abspath(argv0)]
    found = shutil.which("tome")
    return [found] if found else ["tome"]


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        config = get_config(args)
        cli = [args.cli] if getattr(args, "cli", None) else _cli_command()
        text = render_alias(config, cli)
        target = getattr(args, "write", None)
        if target:
            path = write_alias(target, text)
            if formatter.json_mode:
                formatter.json_output({"path": str(path), "executable": config.executable, "root": str(config.root)})
            else:
                formatter.text(f"Wrote alias {config.executable} -> {path}")
            return 0
    except TomeError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        formatter.json_output({"executable": config.executable, "root": str(config.root), "script": text})
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

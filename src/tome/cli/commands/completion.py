"""
tome completion command.

SUMMARY: Print a shell completion script (bash, zsh or fish)
"""

from __future__ import annotations

import argparse
import sys

from tome.cli import OutputFormatter, add_standard_flags, get_config
from tome.core.exceptions import TomeError
from tome.core.generate import SUPPORTED_SHELLS, render_completion_script

SUMMARY = "Print a shell completion script (bash, zsh or fish)"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("shell", choices=SUPPORTED_SHELLS, help="Target shell")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=False)
    try:
        config = get_config(args)
        script = render_completion_script(args.shell, config.executable)
    except TomeError as e:
        formatter.error(e)
        return 1
    sys.stdout.write(script)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

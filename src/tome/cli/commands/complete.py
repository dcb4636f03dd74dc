"""
tome complete command.

SUMMARY: Print completion candidates for the words typed so far
"""

from __future__ import annotations

import argparse
import sys

from tome.cli import OutputFormatter, add_json_flag, add_standard_flags, get_config
from tome.core.completion import complete
from tome.core.exceptions import TomeError

SUMMARY = "Print completion candidates for the words typed so far"

SCRIPT_COMMANDS = ("exec", "help")


def register_args(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_standard_flags(parser)
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="Typed words; the last one is the word being completed",
    )


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    words = list(getattr(args, "words", []) or [])
    if words and words[0] == "--":
        words = words[1:]
    typed, current = (words[:-1], words[-1]) if words else ([], "")
    # "exec" and "help" take script paths too.
    if typed and typed[0] in SCRIPT_COMMANDS:
        typed = typed[1:]

    try:
        config = get_config(args)
        entries = complete(config, typed, current)
    except TomeError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        rows = []
        for entry in entries:
            value, _, description = entry.partition("\t")
            rows.append({"value": value, "description": description})
        formatter.json_output({"completions": rows})
    else:
        for entry in entries:
            formatter.text(entry)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
tome exec command.

SUMMARY: Run a script under the root, after the pre-execution hooks
"""

from __future__ import annotations

import argparse
import sys

from tome.cli import (
    OutputFormatter,
    add_dry_run_flag,
    add_json_flag,
    add_standard_flags,
    get_config,
)
from tome.core.exceptions import TomeError
from tome.core.process import ReplaceProcess, plan_execution
from tome.core.scripts import resolve_script
from tome.core.utils import join

SUMMARY = "Run a script under the root, after the pre-execution hooks"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--skip-hooks",
        action="store_true",
        help="Exec the script directly without running hooks",
    )
    add_dry_run_flag(parser)
    add_json_flag(parser)
    add_standard_flags(parser)
    parser.add_argument(
        "argv",
        nargs=argparse.REMAINDER,
        metavar="path",
        help="Path segments of the script, then its arguments",
    )


def _print_plan(formatter: OutputFormatter, plan: ReplaceProcess) -> None:
    if formatter.json_mode:
        formatter.json_output(plan.describe())
        return
    formatter.text_kv("executable", plan.path, prefix="")
    argv = list(plan.argv)
    if plan.uses_wrapper:
        argv[2] = "<wrapper>"
    formatter.text_kv("argv", join(argv), prefix="")
    formatter.text("env:")
    for key, value in plan.injected.items():
        formatter.text_kv(key, value)
    if plan.uses_wrapper:
        formatter.text("hooks:")
        for hook in plan.hooks:
            formatter.text_kv(hook.name, hook.kind.value)
        formatter.text("---")
        formatter.text(plan.wrapper.rstrip("\n"))


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    argv = list(getattr(args, "argv", []) or [])
    if argv and argv[0] == "--":
        argv = argv[1:]

    try:
        config = get_config(args)
        resolved = resolve_script(config.root, argv)
        plan = plan_execution(config, resolved, skip_hooks=bool(getattr(args, "skip_hooks", False)))
        if getattr(args, "dry_run", False):
            _print_plan(formatter, plan)
            return 0
        # Flush before the process image is replaced.
        sys.stdout.flush()
        sys.stderr.flush()
        plan.run()
    except TomeError as e:
        formatter.error(e)
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
tome help command.

SUMMARY: List scripts with their usage, or show the full help of one script
"""

from __future__ import annotations

import argparse
import logging
import sys

from tome.cli import OutputFormatter, add_json_flag, add_standard_flags, get_config
from tome.core.config import TomeConfig
from tome.core.exceptions import ScriptReadError, TomeError
from tome.core.scripts import Script, collect_executables, resolve_script
from tome.core.utils import load_ignore_patterns

logger = logging.getLogger(__name__)

SUMMARY = "List scripts with their usage, or show the full help of one script"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="*",
        help="Path segments of one script (default: list every script)",
    )
    add_json_flag(parser)
    add_standard_flags(parser)


def list_scripts(config: TomeConfig) -> list[Script]:
    """Load every executable under the root, in path order."""
    ignore = load_ignore_patterns(config.ignore_path)
    scripts: list[Script] = []
    for path in collect_executables(config.root, ignore, skip_dirs=(config.hooks_dir,)):
        try:
            scripts.append(Script.load(path, config.root))
        except ScriptReadError as e:
            logger.warning("%s", e)
            scripts.append(Script(path=path, root=config.root))
    return scripts


def _script_payload(script: Script) -> dict:
    return {
        "command": script.command_name,
        "path": str(script.path),
        "usage": script.usage,
        "help": script.help,
    }


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        config = get_config(args)
        segments = list(getattr(args, "path", []) or [])

        if not segments:
            scripts = list_scripts(config)
            if formatter.json_mode:
                formatter.json_output(
                    {"root": str(config.root), "scripts": [_script_payload(s) for s in scripts]}
                )
            else:
                for script in scripts:
                    formatter.text(script.usage_line())
            return 0

        resolved = resolve_script(config.root, segments)
        script = Script.load(resolved.path, config.root)
        if formatter.json_mode:
            formatter.json_output(_script_payload(script))
        else:
            formatter.text(script.help_text())
        return 0
    except TomeError as e:
        formatter.error(e)
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

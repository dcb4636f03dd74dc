from __future__ import annotations

from pathlib import Path

import pytest

from tome.core.scripts import Script, is_executable_by_owner, is_executable_file

pytestmark = pytest.mark.fast


def test_load_reads_usage_and_help(tome_root: Path, make_script) -> None:
    path = make_script("db/backup", "# USAGE: $0 <target>\n# Back up a database.\nexit 0")

    script = Script.load(path, tome_root)

    assert script.usage == "<target>"
    assert script.help == "USAGE: $0 <target>\nBack up a database."
    assert script.name == "backup"
    assert script.path_without_root() == "db/backup"
    assert script.path_segments == ["db", "backup"]
    assert script.command_name == "db backup"


def test_usage_line_and_help_text_formats(tome_root: Path) -> None:
    script = Script(path=tome_root / "db" / "backup", root=tome_root, usage="<target>", help="Back up.")

    assert script.usage_line() == "db backup: <target>"
    assert script.help_text() == "db backup\n---\nBack up."


def test_has_completions_looks_for_the_marker(tome_root: Path, make_script) -> None:
    with_marker = make_script("a", 'if [ -n "$TOME_COMPLETION" ]; then echo x; fi')
    without = make_script("b", "echo b")

    assert Script(path=with_marker, root=tome_root).has_completions()
    assert not Script(path=without, root=tome_root).has_completions()
    assert not Script(path=tome_root / "missing", root=tome_root).has_completions()


def test_executable_checks(tome_root: Path, make_script) -> None:
    exe = make_script("exe")
    plain = make_script("plain", executable=False)

    assert is_executable_by_owner(0o100)
    assert not is_executable_by_owner(0o011)
    assert is_executable_file(exe)
    assert not is_executable_file(plain)
    assert not is_executable_file(tome_root)

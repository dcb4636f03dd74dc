from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest

from tome.cli._dispatcher import main

pytestmark = pytest.mark.fast


@pytest.mark.parametrize("shell", ["bash", "zsh", "fish"])
def test_completion_command_uses_executable_name(shell: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["completion", shell, "-e", "ops"]) == 0
    assert "ops complete --" in capsys.readouterr().out


def test_completion_rejects_unknown_shell(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["completion", "powershell"])

    assert exc.value.code == 2


def test_alias_prints_script(tome_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["alias", "-r", str(tome_root), "-e", "ops", "--cli", "/opt/tome/bin/tome"])

    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith("#!/bin/sh\n")
    assert f"TOME_ROOT={tome_root}" in out
    assert "TOME_EXECUTABLE=ops" in out
    assert 'exec /opt/tome/bin/tome "$@"' in out


def test_alias_write(tome_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "ops"

    rc = main(["alias", "--json", "-r", str(tome_root), "-e", "ops", "--cli", "tome", "--write", str(target)])

    payload = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert payload == {"path": str(target), "executable": "ops", "root": str(tome_root)}
    assert stat.S_IMODE(target.stat().st_mode) == 0o744
    assert "TOME_EXECUTABLE=ops" in target.read_text(encoding="utf-8")

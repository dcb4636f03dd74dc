from __future__ import annotations

import json
from pathlib import Path

import pytest

from tome.cli._dispatcher import main

pytestmark = pytest.mark.fast


@pytest.fixture
def tree(tome_root: Path, make_script) -> Path:
    make_script("deploy/web", "# USAGE: $0 <env>\n# Deploy the web tier.\n#   --fast  skip checks\necho")
    make_script("db/backup", "# SUMMARY: back up the database\necho")
    make_script("plain")
    make_script("notes.txt", executable=False)
    make_script(".hooks.d/00-pre")
    make_script("scratch/tmp")
    (tome_root / ".tomeignore").write_text("scratch/\n", encoding="utf-8")
    return tome_root


def test_help_lists_every_script_with_usage(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["help", "-r", str(tree)])

    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "db backup: back up the database",
        "deploy web: <env>",
        "plain: ",
    ]


def test_help_for_one_script(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["help", "-r", str(tree), "deploy", "web"])

    assert rc == 0
    assert capsys.readouterr().out == (
        "deploy web\n---\nUSAGE: $0 <env>\nDeploy the web tier.\n  --fast  skip checks\n"
    )


def test_help_json(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["help", "--json", "-r", str(tree)])

    payload = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert payload["root"] == str(tree)
    assert [s["command"] for s in payload["scripts"]] == ["db backup", "deploy web", "plain"]
    assert payload["scripts"][1]["usage"] == "<env>"


def test_help_for_unknown_script(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["help", "-r", str(tree), "nope"]) == 1
    assert "No executable file found" in capsys.readouterr().err


def test_help_lists_symlinked_scripts(tome_root: Path, make_script, tmp_path: Path, capsys) -> None:
    real = make_script("real", "# USAGE: $0 <x>", root=tmp_path)
    (tome_root / "alias-of-real").symlink_to(real)
    (tome_root / "dangling").symlink_to(tmp_path / "gone")

    assert main(["help", "-r", str(tome_root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["alias-of-real: <x>"]

from __future__ import annotations

import os
import stat
import subprocess
from pathlib import Path

import pytest

from tome.core.config import TomeConfig
from tome.core.exceptions import WrapperGenerationError
from tome.core.generate import ALIAS_MODE, SUPPORTED_SHELLS, render_alias, render_completion_script, write_alias


@pytest.mark.fast
def test_alias_pins_root_and_executable(tmp_path: Path) -> None:
    config = TomeConfig(root=tmp_path / "my scripts", executable="ops")

    text = render_alias(config, ["/usr/local/bin/tome"])

    assert text.startswith("#!/bin/sh\n")
    assert f"TOME_ROOT='{tmp_path / 'my scripts'}'" in text
    assert "TOME_EXECUTABLE=ops" in text
    assert text.rstrip().endswith('exec /usr/local/bin/tome "$@"')


@pytest.mark.fast
def test_alias_needs_a_command(tome_config: TomeConfig) -> None:
    with pytest.raises(WrapperGenerationError):
        render_alias(tome_config, [])


def test_written_alias_is_owner_executable_and_forwards_args(tmp_path: Path) -> None:
    config = TomeConfig(root=tmp_path, executable="ops")
    # Stand-in for the CLI: print what the alias passed along.
    fake_cli = tmp_path / "fake-cli"
    fake_cli.write_text('#!/bin/sh\necho "$TOME_ROOT|$TOME_EXECUTABLE|$#|$1"\n', encoding="utf-8")
    os.chmod(fake_cli, 0o755)

    path = write_alias(tmp_path / "ops", render_alias(config, [str(fake_cli)]))
    out = subprocess.run([str(path), "a b", "c"], capture_output=True, text=True, check=True).stdout

    assert stat.S_IMODE(path.stat().st_mode) == ALIAS_MODE
    assert out.strip() == f"{tmp_path}|ops|2|a b"


@pytest.mark.fast
def test_write_alias_to_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(WrapperGenerationError):
        write_alias(tmp_path / "no" / "such" / "dir" / "ops", "#!/bin/sh\n")


@pytest.mark.fast
@pytest.mark.parametrize("shell", SUPPORTED_SHELLS)
def test_completion_scripts_call_back_into_complete(shell: str) -> None:
    text = render_completion_script(shell, "my-ops")

    assert "my-ops complete --" in text
    assert "my_ops" in text


@pytest.mark.fast
def test_bash_completion_registers_the_executable() -> None:
    text = render_completion_script("bash", "ops")

    assert "complete -o default -F _ops_complete ops" in text


@pytest.mark.fast
def test_unsupported_shell() -> None:
    with pytest.raises(ValueError, match="Unsupported shell"):
        render_completion_script("powershell", "tome")


def test_bash_completion_script_is_valid_syntax(tmp_path: Path) -> None:
    script = tmp_path / "completion.bash"
    script.write_text(render_completion_script("bash", "tome"), encoding="utf-8")
    bash = "/bin/bash"
    if not os.path.exists(bash):
        pytest.skip("bash not available")

    subprocess.run([bash, "-n", str(script)], check=True)

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tome.core.config import TomeConfig
from tome.core.completion import CompletionRequest, complete, parse_completion_output, request_completions
from tome.core.exceptions import CompletionError

# Scripts that echo the request back, so tests can assert on what they received.
ECHO_REQUEST = """\
# USAGE: $0 <thing>
if [ "$1" = "--completion" ]; then
  printf 'alpha\\tfirst\\n\\nbeta\\tsecond\\n'
  printf 'request\\t%s\\n' "$TOME_COMPLETION"
  exit 0
fi
echo ran
"""

FAILING = """\
# TOME_COMPLETION
if [ "$1" = "--completion" ]; then
  echo broken >&2
  exit 3
fi
"""


def _request_line(entries: list[str]) -> dict:
    line = next(e for e in entries if e.startswith("request\t"))
    return json.loads(line.split("\t", 1)[1])


@pytest.mark.fast
def test_request_serialization() -> None:
    req = CompletionRequest.build(["deploy", "web"], "pr")

    assert req.last_arg == "web"
    assert json.loads(req.to_json()) == {"args": ["deploy", "web"], "last_arg": "web", "current_word": "pr"}
    assert CompletionRequest.build([], "").last_arg == ""


@pytest.mark.fast
def test_output_parsing_drops_blank_lines() -> None:
    assert parse_completion_output("a\tx\n\n  \nb\ty\n") == ["a\tx", "b\ty"]


def test_request_completions_passes_json_in_env(make_script) -> None:
    script = make_script("pick", ECHO_REQUEST + "# TOME_COMPLETION\n")

    entries = request_completions(script, CompletionRequest.build(["pick"], "al"))

    assert entries[:2] == ["alpha\tfirst", "beta\tsecond"]
    assert _request_line(entries) == {"args": ["pick"], "last_arg": "pick", "current_word": "al"}


def test_non_zero_exit_is_an_error(make_script) -> None:
    script = make_script("bad", FAILING)

    with pytest.raises(CompletionError) as exc:
        request_completions(script, CompletionRequest.build([], ""))

    assert exc.value.context["exit_code"] == 3
    assert exc.value.context["stderr"] == "broken"


def test_unstartable_script_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(CompletionError):
        request_completions(tmp_path / "missing", CompletionRequest.build([], ""))


def test_complete_delegates_to_opted_in_script(tome_config: TomeConfig, make_script) -> None:
    make_script("tools/pick", ECHO_REQUEST + "# TOME_COMPLETION\n")

    entries = complete(tome_config, ["tools", "pick", "x"], "b")

    assert "beta\tsecond" in entries
    assert _request_line(entries) == {"args": ["tools", "pick", "x"], "last_arg": "x", "current_word": "b"}


def test_complete_propagates_delegate_failure(tome_config: TomeConfig, make_script) -> None:
    make_script("bad", FAILING)

    with pytest.raises(CompletionError):
        complete(tome_config, ["bad"], "")


@pytest.mark.fast
def test_script_without_marker_gets_no_completions(tome_config: TomeConfig, make_script) -> None:
    make_script("plain", "echo hi")

    assert complete(tome_config, ["plain"], "") == []


@pytest.mark.fast
def test_directory_listing_with_usage(tome_config: TomeConfig, make_script) -> None:
    make_script("deploy/web", "# USAGE: $0 <env>\necho")
    make_script("deploy/worker")
    make_script("deploy/notes", executable=False)
    make_script(".hooks.d/00-pre")
    make_script("db/backup")

    assert complete(tome_config, [], "") == ["db\tdirectory", "deploy\tdirectory"]
    assert complete(tome_config, ["deploy"], "w") == ["web\t<env>", "worker\t"]
    assert complete(tome_config, ["deploy"], "x") == []


@pytest.mark.fast
def test_ignored_entries_are_not_offered(tome_config: TomeConfig, tome_root: Path, make_script) -> None:
    make_script("keep")
    make_script("scratch/tmp")
    make_script("old.bak")
    (tome_root / ".tomeignore").write_text("scratch/\n*.bak\n", encoding="utf-8")

    assert complete(tome_config, [], "") == ["keep\t"]


@pytest.mark.fast
def test_configured_ignore_file_name_is_used(tome_root: Path, make_script) -> None:
    config = TomeConfig(root=tome_root, executable="tome", ignore_file=".skip")
    make_script("keep")
    make_script("old.bak")
    (tome_root / ".skip").write_text("*.bak\n", encoding="utf-8")
    (tome_root / ".tomeignore").write_text("keep\n", encoding="utf-8")

    assert complete(config, [], "") == ["keep\t"]


@pytest.mark.fast
def test_visible_hooks_dir_is_never_offered(tome_root: Path, make_script) -> None:
    config = TomeConfig(root=tome_root, executable="tome", hooks_dir="hooks")
    make_script("hooks/00-pre")
    make_script("run")

    assert complete(config, [], "") == ["run\t"]


@pytest.mark.fast
def test_paths_outside_the_root_yield_nothing(tome_config: TomeConfig) -> None:
    assert complete(tome_config, ["..", ".."], "") == []


@pytest.mark.fast
def test_unknown_directory_yields_nothing(tome_config: TomeConfig) -> None:
    assert complete(tome_config, ["nope"], "") == []

from __future__ import annotations

import pytest

from tome.core.utils import env_prefix, snake_case

pytestmark = pytest.mark.fast


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("tome-cli", "tome_cli"),
        ("myTool.sh", "my_tool_sh"),
        ("HTTPServer", "http_server"),
        ("  spaced  out ", "spaced_out"),
        ("already_snake", "already_snake"),
        ("", ""),
    ],
)
def test_snake_case(value: str, expected: str) -> None:
    assert snake_case(value) == expected


def test_env_prefix_is_deterministic() -> None:
    assert env_prefix("my-tool") == env_prefix("my-tool") == "MY_TOOL"


def test_env_prefix_fallbacks() -> None:
    assert env_prefix("") == "TOME"
    assert env_prefix("...") == "TOME"
    assert env_prefix("9lives") == "_9LIVES"

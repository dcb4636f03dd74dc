import os
import stat
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'tome'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from tome.core.config import TomeConfig
from tome.core.stdlib_logging import reset_logging_for_tests
from tome.data import clear_caches

# Variables that change how config resolves; tests start without them.
_TOME_ENV_KEYS = (
    "TOME_ROOT",
    "TOME_EXECUTABLE",
    "TOME_DEBUG",
    "TOME_CONFIG",
    "TOME_COMPLETION",
)


@pytest.fixture(autouse=True)
def _isolate_tome_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    for key in _TOME_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Point the user config lookup at an empty directory.
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    clear_caches()
    yield
    reset_logging_for_tests()


@pytest.fixture
def tome_root(tmp_path: Path) -> Path:
    """Empty scripts root (resolved, so paths compare equal to config.root)."""
    root = tmp_path / "root"
    root.mkdir()
    return root.resolve()


MakeScript = Callable[..., Path]


@pytest.fixture
def make_script(tome_root: Path) -> MakeScript:
    """Create a file under the root.

    ``make_script("deploy/web", "echo hi")`` writes a ``#!/bin/sh`` script with
    the given body and the owner-exec bit set. ``executable=False`` leaves the
    mode at 0644; ``shebang=None`` writes the body as-is.
    """

    def _make(
        rel: str,
        body: str = "",
        *,
        executable: bool = True,
        shebang: Optional[str] = "#!/bin/sh",
        root: Optional[Path] = None,
    ) -> Path:
        path = (root or tome_root) / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        text = body if shebang is None else f"{shebang}\n{body}"
        if text and not text.endswith("\n"):
            text += "\n"
        path.write_text(text, encoding="utf-8")
        mode = 0o644 | (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH if executable else 0)
        os.chmod(path, mode)
        return path

    return _make


@pytest.fixture
def tome_config(tome_root: Path) -> TomeConfig:
    return TomeConfig(root=tome_root, executable="tome")

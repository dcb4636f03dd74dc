"""Bundled defaults, the config schema and shell templates.

Files are read through :mod:`importlib.resources`, so they work the same from
a source checkout, an installed wheel or a zip.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml


def read_text(subpackage: str, filename: str) -> str:
    """Return the text of ``tome/data/<subpackage>/<filename>``."""
    return (resources.files(__name__) / subpackage / filename).read_text(encoding="utf-8")


@lru_cache(maxsize=None)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    return yaml.safe_load(read_text(subpackage, filename)) or {}


@lru_cache(maxsize=None)
def read_json(subpackage: str, filename: str) -> dict[str, Any]:
    return json.loads(read_text(subpackage, filename))


def clear_caches() -> None:
    """Forget parsed YAML and JSON so tests can patch bundled files."""
    read_yaml.cache_clear()
    read_json.cache_clear()


__all__ = ["clear_caches", "read_json", "read_text", "read_yaml"]

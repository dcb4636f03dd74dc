"""Configuration loading.

Sources (highest to lowest priority):
1. Explicit values (command-line flags)
2. Environment: <PREFIX>_ROOT, TOME_ROOT, TOME_EXECUTABLE, TOME_DEBUG
3. User config: $TOME_CONFIG or $XDG_CONFIG_HOME/tome/config.yaml
4. Bundled defaults: tome.data/config/defaults.yaml

<PREFIX> is derived from the executable name (``my-tool`` -> ``MY_TOOL``) so
several differently-named instances can point at different roots.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema
import yaml

from tome.core.exceptions import ConfigError
from tome.core.utils.text import env_prefix
from tome.data import read_json, read_yaml

from .models import TomeConfig

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _as_bool(value: str) -> Optional[bool]:
    low = value.strip().lower()
    if low in _TRUTHY:
        return True
    if low in _FALSY:
        return False
    return None


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(out.get(key), dict):
            out[key] = _deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def user_config_path(environ: Mapping[str, str]) -> Path:
    """Return the user config file location (which may not exist)."""
    explicit = environ.get("TOME_CONFIG")
    if explicit:
        return Path(explicit).expanduser()
    xdg = environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "tome" / "config.yaml"


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read and validate a user config file; a missing file is empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}", context={"path": str(path)}) from exc
    if data is None:
        return {}
    schema = read_json("schemas", "config.schema.json")
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigError(
            f"Invalid config file {path}: {location}: {exc.message}",
            context={"path": str(path), "field": location},
        ) from exc
    return data


def _default_executable(argv0: Optional[str]) -> str:
    name = Path(argv0 or sys.argv[0] or "tome").name
    return name or "tome"


def load_config(
    *,
    root: Optional[str] = None,
    executable: Optional[str] = None,
    debug: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
    argv0: Optional[str] = None,
) -> TomeConfig:
    """Build the immutable :class:`TomeConfig` for this invocation.

    Args:
        root: --root flag value, if given
        executable: --executable flag value, if given
        debug: --debug flag value; ``None`` or ``False`` defers to env/files
        environ: Environment mapping (defaults to ``os.environ``)
        argv0: Program path used to derive the default executable name

    Raises:
        ConfigError: If the user config file is unreadable or invalid
    """
    env = os.environ if environ is None else environ

    data = _deep_merge(read_yaml("config", "defaults.yaml"), read_config_file(user_config_path(env)))

    exe = executable or env.get("TOME_EXECUTABLE") or data.get("executable") or _default_executable(argv0)
    prefix = env_prefix(exe)

    root_value = root or env.get(f"{prefix}_ROOT") or env.get("TOME_ROOT") or data.get("root") or "."
    root_path = Path(str(root_value)).expanduser().resolve()

    if debug:
        debug_value = True
    else:
        env_debug = _as_bool(env["TOME_DEBUG"]) if "TOME_DEBUG" in env else None
        debug_value = env_debug if env_debug is not None else bool(data.get("debug", False))

    hooks = data.get("hooks") or {}
    completion = data.get("completion") or {}
    cfg = TomeConfig(
        root=root_path,
        executable=str(exe),
        debug=bool(debug_value),
        hooks_dir=str(hooks.get("directory", ".hooks.d")),
        source_suffix=str(hooks.get("source_suffix", ".source")),
        ignore_file=str(data.get("ignore_file", ".tomeignore")),
        completion_env=str(completion.get("env_var", "TOME_COMPLETION")),
        completion_flag=str(completion.get("flag", "--completion")),
    )
    logger.debug("resolved config root=%s executable=%s prefix=%s", cfg.root, cfg.executable, prefix)
    return cfg


__all__ = ["load_config", "read_config_file", "user_config_path"]

"""Pre-execution hooks: discovery, environment and wrapper generation."""
from __future__ import annotations

from .discovery import classify_hook, discover_hooks
from .env import build_hook_env
from .models import Hook, HookKind
from .service import HookService
from .wrapper import render_wrapper

__all__ = [
    "Hook",
    "HookKind",
    "HookService",
    "build_hook_env",
    "classify_hook",
    "discover_hooks",
    "render_wrapper",
]

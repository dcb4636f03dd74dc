"""Process replacement for the final step of ``exec``."""
from __future__ import annotations

from .launcher import POSIX_SHELL, ReplaceProcess, plan_execution

__all__ = ["ReplaceProcess", "plan_execution", "POSIX_SHELL"]

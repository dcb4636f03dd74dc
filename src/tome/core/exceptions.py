from __future__ import annotations

from typing import Any, Dict, Mapping


class TomeError(Exception):
    """Base exception for tome."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(TomeError, ValueError):
    """Raised when the configuration file is unreadable or invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class NoFileSpecifiedError(TomeError, ValueError):
    """Raised when exec is called without any path tokens."""

    def __init__(self, message: str = "No file specified", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ExecutableNotFoundError(TomeError, FileNotFoundError):
    """Raised when no argument prefix names an executable under the root."""

    def __init__(
        self, message: str = "No executable file found", *, context: Mapping[str, Any] | None = None
    ) -> None:
        TomeError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ScriptReadError(TomeError, OSError):
    """Raised when a script cannot be read for usage/help extraction."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class HookDiscoveryError(TomeError, OSError):
    """Raised when the hooks directory exists but cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class WrapperGenerationError(TomeError, RuntimeError):
    """Raised when the hook wrapper script cannot be rendered."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class ExecError(TomeError, OSError):
    """Raised when replacing the current process image fails."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TomeError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class CompletionError(TomeError):
    """Raised when a script's completion request exits non-zero."""


__all__ = [
    "TomeError",
    "ConfigError",
    "NoFileSpecifiedError",
    "ExecutableNotFoundError",
    "ScriptReadError",
    "HookDiscoveryError",
    "WrapperGenerationError",
    "ExecError",
    "CompletionError",
]

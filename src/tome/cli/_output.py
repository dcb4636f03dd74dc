"""Unified CLI output formatting utilities.

Commands print through :class:`OutputFormatter` so every command supports
both text and ``--json`` output. Logging never goes to stdout.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Optional

from tome.core.exceptions import TomeError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception | str,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output an error on stderr.

        Args:
            error: The exception that occurred, or a plain message
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output (TomeError supplies its own)
        """
        msg = message or str(error)
        if self.json_mode:
            if isinstance(error, TomeError):
                payload = {"error": error.to_json_error()["code"], "message": msg, "context": error.context}
            else:
                payload = {"error": error_code, "message": msg}
            print(json.dumps(payload, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        """Output plain text message."""
        print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Output key-value pair in text mode."""
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")


__all__ = ["OutputFormatter"]

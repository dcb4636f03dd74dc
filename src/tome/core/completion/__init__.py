"""Shell completion: path completion and delegation to opted-in scripts."""
from __future__ import annotations

from .delegate import CompletionRequest, complete, parse_completion_output, request_completions

__all__ = ["CompletionRequest", "complete", "parse_completion_output", "request_completions"]

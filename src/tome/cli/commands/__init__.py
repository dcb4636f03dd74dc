"""Top-level tome commands (auto-discovered by the dispatcher)."""

"""Core execution pipeline: script resolution, hooks, wrapper generation, exec."""

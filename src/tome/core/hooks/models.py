from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class HookKind(str, Enum):
    """How the wrapper runs a hook; decided once at discovery time."""

    SOURCED = "sourced"
    EXECUTED = "executed"


@dataclass(frozen=True)
class Hook:
    """One pre-execution hook from the hooks directory."""

    path: Path
    name: str
    kind: HookKind = HookKind.EXECUTED

    @property
    def sourced(self) -> bool:
        return self.kind is HookKind.SOURCED

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": str(self.path), "kind": self.kind.value}

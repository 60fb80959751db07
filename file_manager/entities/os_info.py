"""
Host information entity.
"""

from dataclasses import dataclass, field
from typing import Any

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class OsInfo:
    """Read-only snapshot of the host: architecture, memory and current user."""

    architecture: str
    total_memory: int
    free_memory: int
    user_info: dict[str, Any] = field(default_factory=dict)

    @property
    def total_memory_mb(self) -> float:
        return self.total_memory / BYTES_PER_MB

    @property
    def free_memory_mb(self) -> float:
        return self.free_memory / BYTES_PER_MB

"""
Outcome of a single shell operation.
"""

from dataclasses import dataclass
from typing import Any, Optional

GENERIC_FAILURE_MESSAGE = "Operation failed"


@dataclass(frozen=True)
class OperationResult:
    """Either a success message (with an optional payload) or the generic failure."""

    ok: bool
    message: str
    payload: Optional[Any] = None

    @classmethod
    def success(cls, message: str, payload: Optional[Any] = None) -> "OperationResult":
        return cls(ok=True, message=message, payload=payload)

    @classmethod
    def failure(cls) -> "OperationResult":
        return cls(ok=False, message=GENERIC_FAILURE_MESSAGE)

    def lines(self) -> list[str]:
        """Lines to print for this outcome."""
        return self.message.splitlines() if self.message else []

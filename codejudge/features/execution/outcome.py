from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .schemas import ExecutionResult

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Tagged success/failure passed between the submit, poll and execute layers.

    A failed outcome already carries the ``ExecutionResult`` the caller will
    see, so layers compose with plain ``if not outcome.ok: return outcome.failure``.
    """

    value: Optional[T] = None
    failure: Optional[ExecutionResult] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: str, output: Optional[str] = None) -> "Outcome[T]":
        return cls(failure=ExecutionResult(success=False, output=output, error=error))

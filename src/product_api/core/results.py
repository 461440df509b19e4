"""Explicit success/failure values returned by the product service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories the HTTP layer distinguishes."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


@dataclass(frozen=True)
class StoreError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either ``value`` or ``error`` is set, never both."""

    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> StoreResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> StoreResult[T]:
        return cls(error=StoreError(kind=kind, message=message))

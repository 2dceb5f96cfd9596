"""Error kinds, fault records and the Result type used by the views."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Fault kinds contained at the view boundary."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class Fault:
    """One contained failure: what went wrong, where, and for which identifier."""

    kind: ErrorKind
    operation: str
    identifier: Any = None
    message: str = ""

    def __str__(self) -> str:
        text = f"{self.kind.value} in {self.operation}"
        if self.identifier is not None:
            text += f" ({self.identifier!r})"
        if self.message:
            text += f": {self.message}"
        return text


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or a fault, never both.
    """

    value: Optional[T] = None
    fault: Optional[Fault] = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    @staticmethod
    def success(value: T) -> "Result[T]":
        return Result(value=value)

    @staticmethod
    def failure(fault: Fault) -> "Result[Any]":
        return Result(fault=fault)


class ScheduleDataError(Exception):
    """Base class for errors raised while building the store."""


class InvalidEntityError(ScheduleDataError):
    """Raised when a raw entity cannot be normalized (e.g. it has no id)."""

    def __init__(self, entity_type: str, raw: Any) -> None:
        super().__init__(f"{entity_type} without a usable id: {raw!r}")
        self.entity_type = entity_type
        self.raw = raw


class PayloadLoadError(ScheduleDataError):
    """Raised when a raw payload file is missing or not valid JSON."""

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"Cannot load schedule payload from {path}: {reason}")
        self.path = path
        self.reason = reason

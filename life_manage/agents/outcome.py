"""Workflow result type: model answer, static fallback, or error."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    OK = "ok"
    FALLBACK = "fallback"
    ERROR = "error"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of one workflow call.

    OK carries the model's answer, FALLBACK the static default used after a
    failure (reason says why), ERROR a failure with no usable value.
    """
    kind: OutcomeKind
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(OutcomeKind.OK, value)

    @classmethod
    def fallback(cls, value: T, reason: str) -> "Outcome[T]":
        return cls(OutcomeKind.FALLBACK, value, reason)

    @classmethod
    def error(cls, reason: str) -> "Outcome[T]":
        return cls(OutcomeKind.ERROR, None, reason)

    @property
    def is_ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def is_fallback(self) -> bool:
        return self.kind is OutcomeKind.FALLBACK

    @property
    def is_error(self) -> bool:
        return self.kind is OutcomeKind.ERROR

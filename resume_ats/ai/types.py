from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class AICompletionError(RuntimeError):
    def __init__(self, message: str, *, code: str = "ai_exception"):
        super().__init__(message)
        self.code = code


class CompletionClient(Protocol):
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw model text, or raise AICompletionError."""


class AIResult(BaseModel, Generic[T]):
    success: bool
    data: T | None = None
    error: str | None = None
    latency_ms: int | None = None

    @classmethod
    def ok(cls, data: T, *, latency_ms: int | None = None) -> "AIResult[T]":
        return cls(success=True, data=data, latency_ms=latency_ms)

    @classmethod
    def fail(cls, error: str, *, latency_ms: int | None = None) -> "AIResult[T]":
        return cls(success=False, error=error, latency_ms=latency_ms)

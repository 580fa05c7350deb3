from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """An argument vector for an external program. Never run through a shell."""

    parts: tuple[str, ...]

    def __init__(self, parts: Iterable[str]):
        parts = tuple(parts)
        if not parts:
            raise ValueError("Command must name an executable")
        object.__setattr__(self, "parts", parts)

    @classmethod
    def of(cls, *parts: str) -> Command:
        return cls(parts)

    @property
    def executable(self) -> str:
        return self.parts[0]

    def argv(self) -> list[str]:
        return list(self.parts)

    def __str__(self) -> str:
        return " ".join(self.parts)


@dataclass(frozen=True)
class ExecutionResult:
    text: str
    cause: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.cause is None

    @property
    def failed(self) -> bool:
        return self.cause is not None

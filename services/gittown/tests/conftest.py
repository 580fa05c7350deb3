from __future__ import annotations

from typing import NoReturn

import pytest

from gittown.domain.command import Command, ExecutionResult


class ScriptedRunner:
    def __init__(self, results: dict[tuple[str, ...], ExecutionResult] | None = None):
        self.results = dict(results or {})
        self.calls: list[Command] = []

    def script(self, parts: tuple[str, ...], result: ExecutionResult) -> None:
        self.results[parts] = result

    def run(self, command: Command) -> ExecutionResult:
        self.calls.append(command)
        return self.results.get(
            command.parts, ExecutionResult("", RuntimeError("unscripted command"))
        )


class RecordingConsole:
    def __init__(self) -> None:
        self.errors: list[tuple[str, ...]] = []
        self.labels: list[tuple[str, str]] = []
        self.lines: list[str] = []

    def echo(self, message: str = "") -> None:
        self.lines.append(message)

    def print_error(self, *messages: str) -> None:
        self.errors.append(messages)

    def print_label_and_value(self, label: str, value: str) -> None:
        self.labels.append((label, value))

    def abort(self, *messages: str) -> NoReturn:
        self.print_error(*messages)
        raise SystemExit(1)


@pytest.fixture
def runner() -> ScriptedRunner:
    return ScriptedRunner()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()

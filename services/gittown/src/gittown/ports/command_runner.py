from typing import Protocol

from gittown.domain.command import Command, ExecutionResult


class CommandRunnerPort(Protocol):
    def run(self, command: Command) -> ExecutionResult: ...

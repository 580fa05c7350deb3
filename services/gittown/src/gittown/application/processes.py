from __future__ import annotations

from gittown.domain.command import Command, ExecutionResult
from gittown.domain.text import sequence_contains
from gittown.ports.command_runner import CommandRunnerPort
from gittown.ports.console import ConsolePort


def run_capturing_output(
    command: Command, *, runner: CommandRunnerPort
) -> ExecutionResult:
    """Run ``command`` and report its output and outcome without aborting."""
    return runner.run(command)


def require_success(
    command: Command, result: ExecutionResult, *, console: ConsolePort
) -> str:
    if result.ok:
        return result.text
    console.abort(
        f"Command: {command}",
        f"Output: {result.text}",
        f"Cause: {result.cause}",
    )


def run_require_output(
    command: Command, *, runner: CommandRunnerPort, console: ConsolePort
) -> str:
    """Run ``command`` and return its output, aborting the process on failure.

    Only for lookups that have no recovery path. Probes that expect failure
    go through ``run_capturing_output``.
    """
    result = run_capturing_output(command, runner=runner)
    return require_success(command, result, console=console)


def output_contains(
    command: Command,
    target: str,
    *,
    runner: CommandRunnerPort,
    console: ConsolePort,
) -> bool:
    return target in run_require_output(command, runner=runner, console=console)


def output_contains_line(
    command: Command,
    target: str,
    *,
    runner: CommandRunnerPort,
    console: ConsolePort,
) -> bool:
    lines = run_require_output(command, runner=runner, console=console).split("\n")
    return sequence_contains(lines, target)

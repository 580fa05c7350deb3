from __future__ import annotations

import logging
import subprocess

from gittown.adapters.errors import CommandFailed, CommandNotFound
from gittown.domain.command import Command, ExecutionResult
from gittown.domain.text import capture_text

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Runs commands to completion with stderr folded into stdout."""

    def run(self, command: Command) -> ExecutionResult:
        logger.debug("running %s", command)
        try:
            completed = subprocess.run(
                command.argv(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            logger.debug("executable not found: %s", command.executable)
            return ExecutionResult(
                "",
                CommandNotFound(
                    f"Executable not found: {command.executable}",
                    details={"command": command.argv()},
                    cause=exc,
                ),
            )
        except OSError as exc:
            logger.debug("cannot start %s: %s", command.executable, exc)
            return ExecutionResult(
                "",
                CommandFailed(
                    f"Cannot start {command.executable}: {exc.strerror or exc}",
                    details={"command": command.argv(), "errno": exc.errno},
                    cause=exc,
                ),
            )

        text = capture_text(completed.stdout or "")
        if completed.returncode != 0:
            logger.debug("%s exited with status %d", command, completed.returncode)
            return ExecutionResult(
                text,
                CommandFailed(
                    f"exit status {completed.returncode}",
                    details={
                        "command": command.argv(),
                        "exit_code": completed.returncode,
                    },
                ),
            )
        return ExecutionResult(text)

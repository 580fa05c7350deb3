from __future__ import annotations

import logging
import sys

from gittown.application.processes import run_capturing_output
from gittown.domain.command import Command
from gittown.ports.command_runner import CommandRunnerPort
from gittown.ports.console import ConsolePort

logger = logging.getLogger(__name__)

WINDOWS_BROWSER_COMMAND = "start"

OPEN_BROWSER_COMMANDS = (
    "xdg-open",
    "open",
    "cygstart",
    "x-www-browser",
    "firefox",
    "opera",
    "mozilla",
    "netscape",
)

MISSING_BROWSER_MESSAGES = (
    "Cannot open a browser.",
    "If you think this is a bug,",
    "please open an issue at https://github.com/Originate/git-town/issues",
    "and mention your OS and browser.",
)


def get_open_browser_command(
    *,
    runner: CommandRunnerPort,
    console: ConsolePort,
    platform: str | None = None,
    override: str | None = None,
) -> str:
    """Return the console command that opens the default browser."""
    if override:
        return override
    platform = platform or sys.platform
    if platform.startswith("win"):
        # "explorer" cannot handle "?" and "=" in URLs
        return WINDOWS_BROWSER_COMMAND
    for candidate in OPEN_BROWSER_COMMANDS:
        result = run_capturing_output(Command.of("which", candidate), runner=runner)
        if result.ok and result.text != "":
            logger.debug("using browser launcher %s", candidate)
            return candidate
    console.abort(*MISSING_BROWSER_MESSAGES)

from __future__ import annotations

from typing import NoReturn

from gittown.ports.console import ConsolePort


def exit_with_error_message(*messages: str, console: ConsolePort) -> NoReturn:
    console.abort(*messages)


def print_label_and_value(label: str, value: str, *, console: ConsolePort) -> None:
    """Print the label bold and underlined, the value indented beneath it."""
    console.print_label_and_value(label, value)

from __future__ import annotations

from gittown.adapters.errors import InputReadError
from gittown.ports.console import ConsolePort
from gittown.ports.input_reader import InputReaderPort


def get_user_input(*, reader: InputReaderPort, console: ConsolePort) -> str:
    try:
        text = reader.read_line()
    except InputReadError as exc:
        console.abort("Error getting user input", str(exc))
    return text.strip()

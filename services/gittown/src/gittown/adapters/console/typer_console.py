from __future__ import annotations

from typing import Any, NoReturn

import typer

from gittown.domain.text import indent


class TyperConsole:
    """Console output styled through typer, with the fatal error block.

    ``color=None`` lets click decide based on whether the stream is a
    terminal; ``False`` strips all styling.
    """

    def __init__(self, color: bool | None = None):
        self.color = color

    def _write(self, message: str = "", **style: Any) -> None:
        try:
            typer.secho(message, color=self.color, **style)
        except OSError as exc:
            raise SystemExit(1) from exc

    def echo(self, message: str = "") -> None:
        self._write(message)

    def print_error(self, *messages: str) -> None:
        self._write()
        self._write("  Error", fg=typer.colors.RED, bold=True)
        for message in messages:
            self._write("  " + message, fg=typer.colors.RED)
        self._write()

    def print_label_and_value(self, label: str, value: str) -> None:
        self._write(label + ":", bold=True, underline=True)
        self._write(indent(value, 1))
        self._write()

    def abort(self, *messages: str) -> NoReturn:
        self.print_error(*messages)
        raise SystemExit(1)

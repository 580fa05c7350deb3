from typing import NoReturn, Protocol


class ConsolePort(Protocol):
    def print_error(self, *messages: str) -> None: ...
    def print_label_and_value(self, label: str, value: str) -> None: ...
    def echo(self, message: str = "") -> None: ...
    def abort(self, *messages: str) -> NoReturn: ...

from typing import Protocol


class InputReaderPort(Protocol):
    def read_line(self) -> str: ...

from __future__ import annotations

import sys
from typing import TextIO

from gittown.adapters.errors import InputReadError


class StreamInputReader:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str:
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as exc:
            raise InputReadError("Cannot read from input stream", cause=exc) from exc
        if line == "":
            raise InputReadError("Input stream is closed")
        if not line.endswith("\n"):
            raise InputReadError("Input ended before end of line")
        return line

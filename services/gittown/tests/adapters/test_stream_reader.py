import io

import pytest

from gittown.adapters.errors import InputReadError
from gittown.adapters.input.stream_reader import StreamInputReader


def test_reads_one_line_at_a_time():
    reader = StreamInputReader(io.StringIO("yes\nno\n"))
    assert reader.read_line() == "yes\n"
    assert reader.read_line() == "no\n"


def test_closed_stream_raises():
    with pytest.raises(InputReadError):
        StreamInputReader(io.StringIO("")).read_line()


def test_read_error_keeps_cause():
    stream = io.StringIO("x\n")
    stream.close()
    with pytest.raises(InputReadError) as excinfo:
        StreamInputReader(stream).read_line()
    assert isinstance(excinfo.value.cause, ValueError)


def test_unterminated_last_line_raises():
    reader = StreamInputReader(io.StringIO("yes\nabc"))
    assert reader.read_line() == "yes\n"
    with pytest.raises(InputReadError):
        reader.read_line()

import io

import pytest

from containerkit.execproc import (
    DaemonStreamError,
    ProcessOption,
    ProcessOptions,
    multiplexed,
    std_copy,
)


def _frame(stream, payload):
    return bytes([stream, 0, 0, 0]) + len(payload).to_bytes(4, "big") + payload


def test_std_copy_splits_streams():
    source = io.BytesIO(_frame(1, b"out-1 ") + _frame(2, b"err") + _frame(1, b"out-2"))
    out, err = io.BytesIO(), io.BytesIO()
    written = std_copy(out, err, source)
    assert out.getvalue() == b"out-1 out-2"
    assert err.getvalue() == b"err"
    assert written == len(b"out-1 ") + len(b"err") + len(b"out-2")


def test_std_copy_stdin_goes_to_stdout():
    out, err = io.BytesIO(), io.BytesIO()
    std_copy(out, err, io.BytesIO(_frame(0, b"typed")))
    assert out.getvalue() == b"typed"
    assert err.getvalue() == b""


def test_std_copy_empty_source():
    out, err = io.BytesIO(), io.BytesIO()
    assert std_copy(out, err, io.BytesIO()) == 0


def test_std_copy_truncated_frame_stops_quietly():
    data = _frame(1, b"whole") + _frame(1, b"partial")[:-3]
    out, err = io.BytesIO(), io.BytesIO()
    written = std_copy(out, err, io.BytesIO(data))
    assert out.getvalue() == b"whole"
    assert written == len(b"whole")


def test_std_copy_unknown_stream_raises():
    with pytest.raises(ValueError, match="Unrecognized input header: 7"):
        std_copy(io.BytesIO(), io.BytesIO(), io.BytesIO(_frame(7, b"x")))


def test_std_copy_systemerr_raises():
    with pytest.raises(DaemonStreamError, match="error from daemon in stream: boom"):
        std_copy(io.BytesIO(), io.BytesIO(), io.BytesIO(_frame(3, b"boom")))


def test_multiplexed_keeps_only_stdout():
    opts = ProcessOptions(io.BytesIO(_frame(1, b"0\n") + _frame(2, b"warning\n")))
    multiplexed().apply(opts)
    assert opts.reader.read() == b"0\n"


def test_process_option_applies_function():
    replacement = io.BytesIO(b"replaced")
    opts = ProcessOptions(io.BytesIO(b"original"))
    ProcessOption(lambda o: setattr(o, "reader", replacement)).apply(opts)
    assert opts.reader is replacement
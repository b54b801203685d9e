import bz2
import io

import pytest

from toolbox.bzip import Writer


def test_million_hellos():
    compressed = io.BytesIO()
    uncompressed = io.BytesIO()
    w = Writer(compressed)
    for _ in range(1_000_000):
        w.write(b"hello")
        uncompressed.write(b"hello")
    w.close()

    assert len(compressed.getvalue()) == 255
    assert bz2.decompress(compressed.getvalue()) == uncompressed.getvalue()


def test_write_returns_length():
    w = Writer(io.BytesIO())
    assert w.write(b"abcdef") == 6


def test_context_manager_round_trip():
    out = io.BytesIO()
    with Writer(out) as w:
        w.write(b"some text ")
        w.write(b"and more")
    assert w.closed
    assert bz2.decompress(out.getvalue()) == b"some text and more"


def test_close_does_not_close_output():
    out = io.BytesIO()
    w = Writer(out)
    w.close()
    assert not out.closed
    assert bz2.decompress(out.getvalue()) == b""


def test_use_after_close_raises():
    w = Writer(io.BytesIO())
    w.close()
    with pytest.raises(ValueError, match="closed"):
        w.write(b"x")
    with pytest.raises(ValueError, match="closed"):
        w.close()
import pytest

from vpinlink.fifo import Fifo


def test_put_get_round_trip():
    f = Fifo(16)
    assert f.put(b"hello") == 5
    assert len(f) == 5
    assert f.get(5) == b"hello"
    assert len(f) == 0


def test_free_and_size_invariant():
    capacity = 10
    f = Fifo(capacity)
    for chunk in (b"ab", b"cde", b"f"):
        f.put(chunk)
        assert f.free() + len(f) == capacity - 1
    f.get(2)
    assert f.free() + len(f) == capacity - 1


def test_put_stops_when_full():
    capacity = 4
    f = Fifo(capacity)
    assert f.put(b"abcdef") == capacity - 1
    assert not f.writeable()
    assert f.put(b"z") == 0
    assert f.get(100) == b"abcdef"[: capacity - 1]


def test_wraparound_keeps_order():
    f = Fifo(5)
    f.put(b"abc")
    assert f.get(2) == b"ab"
    room = f.free()
    assert f.put(b"defg") == room
    assert f.get(10) == b"c" + b"defg"[:room]


def test_get_more_than_available():
    f = Fifo(8)
    f.put(b"xy")
    assert f.get(10) == b"xy"
    assert f.get(3) == b""


def test_peek():
    f = Fifo(8)
    with pytest.raises(IndexError):
        f.peek()
    f.put(b"q")
    assert f.peek() == ord("q")
    assert len(f) == 1


def test_readable_and_clear():
    f = Fifo(8)
    assert not f.readable()
    f.put(b"abc")
    assert f.readable()
    f.clear()
    assert not f.readable()
    assert len(f) == 0


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Fifo(0)
    with pytest.raises(ValueError):
        Fifo(4).get(-1)
    with pytest.raises(TypeError):
        Fifo(4).put(3)


def test_default_get_reads_one_byte():
    f = Fifo()
    f.put(b"mn")
    assert f.get() == b"m"
    assert f.get() == b"n"
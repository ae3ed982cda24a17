import pytest
from vfspath._lazybuf import LazyBuffer


def test_mirroring_input_does_not_allocate():
    buf = LazyBuffer("a/b", "a/b", 0)
    for c in "a/b":
        buf.append(c)
    assert not buf.diverged
    assert buf.string() == "a/b"


def test_divergence_allocates_and_copies_prefix():
    buf = LazyBuffer("a//b", "a//b", 0)
    buf.append("a")
    buf.append("/")
    buf.append("b")
    assert buf.diverged
    assert buf.string() == "a/b"
    assert buf.written() == ["a", "/", "b"]


def test_backtracking_reads_written_chars():
    buf = LazyBuffer("abc/x", "abc/x", 0)
    for c in "abc/":
        buf.append(c)
    buf.w = 1
    assert buf.index(0) == "a"
    buf.append("z")
    assert buf.diverged
    assert buf.string() == "az"


def test_volume_is_reattached():
    buf = LazyBuffer("\\a", "C:\\a", 2)
    buf.append("\\")
    buf.append("a")
    assert buf.string() == "C:\\a"
    buf.w = 1
    buf.append("b")
    assert buf.string() == "C:\\b"


def test_append_past_input_length():
    buf = LazyBuffer("x", "x", 0)
    buf.append(".")
    buf.append(".")
    assert buf.string() == ".."


def test_prepend_after_divergence():
    buf = LazyBuffer("a:", "a:", 0)
    buf.append("c")
    buf.append(":")
    buf.prepend(".", "\\")
    assert buf.string() == ".\\c:"
    assert buf.w == 4


def test_prepend_and_written_require_divergence():
    buf = LazyBuffer("a", "a", 0)
    with pytest.raises(RuntimeError):
        buf.prepend(".")
    with pytest.raises(RuntimeError):
        buf.written()

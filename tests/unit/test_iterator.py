import copy

import pytest
from vfspath import POSIX, WINDOWS, PathIterator

from tests.helpers.asserts import assert_iterator_consistent

ITERATOR_TESTS = [
    (WINDOWS, "C:\\", []),
    (WINDOWS, "C:\\Users", ["Users"]),
    (WINDOWS, "c:\\नमस्ते\\दुनिया", ["नमस्ते", "दुनिया"]),
    (WINDOWS, "\\\\host\\share\\a\\b", ["a", "b"]),
    (POSIX, "/", []),
    (POSIX, "/a", ["a"]),
    (POSIX, "/b/c/d", ["b", "c", "d"]),
    (POSIX, "/नमस्ते/दुनिया", ["नमस्ते", "दुनिया"]),
]


@pytest.mark.parametrize("sem, path, parts", ITERATOR_TESTS)
def test_iterates_parts(sem, path, parts):
    pi = PathIterator(sem, path)
    got = []
    while pi.next():
        assert_iterator_consistent(pi)
        assert pi.is_last == (len(got) == len(parts) - 1)
        got.append(pi.part)
    assert got == parts

    if sem.is_windows:
        assert pi.volume_name_len > 0
        assert pi.volume_name != ""
    else:
        assert pi.volume_name_len == 0
        assert pi.volume_name == ""


def test_exhausted_iterator_stays_exhausted():
    pi = PathIterator(POSIX, "/a")
    assert pi.next()
    assert not pi.next()
    assert not pi.next()


def test_iter_protocol():
    assert list(PathIterator(POSIX, "/usr/lib/xorg")) == ["usr", "lib", "xorg"]
    assert list(PathIterator(WINDOWS, "C:\\")) == []


def test_reset_restarts():
    pi = PathIterator(POSIX, "/a/b")
    assert list(pi) == ["a", "b"]
    pi.reset()
    assert pi.next()
    assert pi.part == "a"


def test_positions():
    pi = PathIterator(POSIX, "/first/second/third/fourth")
    for _ in range(3):
        pi.next()
    assert pi.part == "third"
    assert pi.left == "/first/second/"
    assert pi.left_part == "/first/second/third"
    assert pi.right == "/fourth"
    assert pi.right_part == "third/fourth"
    assert not pi.is_last


REPLACE_TESTS = [
    (WINDOWS, "c:\\path", "path", "..\\..\\..", "c:\\", True),
    (WINDOWS, "c:\\an\\absolute\\path", "absolute", "c:\\just\\another",
     "c:\\just\\another\\path", True),
    (WINDOWS, "c:\\a\\random\\path", "random", "very\\long",
     "c:\\a\\very\\long\\path", False),
    (POSIX, "/a/very/very/long/path", "long", "/a", "/a/path", True),
    (POSIX, "/path", "path", "../../..", "/", True),
    (POSIX, "/a/relative/path", "relative", "../../..", "/path", True),
    (POSIX, "/an/absolute/path", "absolute", "/just/another",
     "/just/another/path", True),
    (POSIX, "/a/relative/path", "relative", "very/long", "/a/very/long/path", False),
]


@pytest.mark.parametrize("sem, path, part, new_part, new_path, reset", REPLACE_TESTS)
def test_replace_part(sem, path, part, new_part, new_path, reset):
    pi = PathIterator(sem, path)
    while pi.next():
        if pi.part == part:
            assert pi.replace_part(new_part) is reset
            assert pi.path == new_path
            break
    else:
        pytest.fail(f"part {part!r} not found in {path!r}")


def test_replace_part_rewinds_to_replacement():
    pi = PathIterator(POSIX, "/a/relative/path")
    pi.next()
    pi.next()
    assert not pi.replace_part("very/long")
    assert list(pi) == ["very", "long", "path"]


def test_replace_part_reset_starts_over():
    pi = PathIterator(POSIX, "/a/relative/path")
    pi.next()
    pi.next()
    assert pi.replace_part("/x")
    assert list(pi) == ["x", "path"]


def test_replace_part_recomputes_volume():
    pi = PathIterator(WINDOWS, "\\\\host\\share\\a\\b")
    pi.next()
    assert pi.volume_name == "\\\\host\\share"
    assert pi.replace_part("D:\\x")
    assert pi.path == "D:\\x\\b"
    assert pi.volume_name == "D:"
    assert list(pi) == ["x", "b"]


def test_cannot_be_copied():
    pi = PathIterator(POSIX, "/a")
    with pytest.raises(TypeError):
        copy.copy(pi)
    with pytest.raises(TypeError):
        copy.deepcopy(pi)


def test_repr():
    pi = PathIterator(POSIX, "/a")
    assert repr(pi) == "PathIterator('/a', start=0, end=0)"

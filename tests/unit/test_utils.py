import pytest
from vfspath import (
    POSIX,
    WINDOWS,
    MalformedPatternError,
    OSType,
    PathIterator,
    PathUtils,
    UnrelatablePathError,
)

from tests.helpers.tree import FakeTree


def test_construct_from_any_os_type_form():
    assert PathUtils("windows").semantics == WINDOWS
    assert PathUtils(OSType.LINUX).semantics == POSIX
    assert PathUtils(2).os_type is OSType.WINDOWS
    assert PathUtils(WINDOWS).semantics is WINDOWS


def test_invalid_os_type():
    with pytest.raises(ValueError):
        PathUtils("beos")


def test_repr():
    assert repr(PathUtils("windows")) == "PathUtils('Windows')"


def test_fixtures_use_fixed_semantics(posix_paths, windows_paths):
    assert posix_paths.sep == "/"
    assert windows_paths.sep == "\\"
    assert posix_paths.os_type is OSType.LINUX
    assert windows_paths.os_type is OSType.WINDOWS


def test_separator_and_volume_helpers(posix_paths, windows_paths):
    assert windows_paths.is_path_separator("/")
    assert not posix_paths.is_path_separator("\\")
    assert windows_paths.from_slash("a/b") == "a\\b"
    assert windows_paths.to_slash("a\\b") == "a/b"
    assert windows_paths.volume_name("C:\\x") == "C:"
    assert windows_paths.volume_name_len("\\\\h\\s\\x") == 5
    assert posix_paths.volume_name("C:\\x") == ""
    assert windows_paths.is_abs("C:\\x")
    assert not windows_paths.is_abs("\\x")
    assert posix_paths.is_abs("/x")


def test_lexical_operations(posix_paths, windows_paths):
    assert posix_paths.clean("a//b/../c") == "a/c"
    assert windows_paths.clean("a/../c:") == ".\\c:"
    assert windows_paths.join("C:", "f") == "C:f"
    assert posix_paths.join("a", "", "b") == "a/b"
    assert windows_paths.split("c:\\a\\b") == ("c:\\a\\", "b")
    assert posix_paths.split_abs("/home/user") == ("/home", "user")
    assert windows_paths.dirname("c:\\a\\b") == "c:\\a"
    assert windows_paths.basename("c:\\a\\b") == "b"
    assert windows_paths.rel("C:\\a", "c:\\a\\b") == "b"
    assert windows_paths.abs_path("x", "C:\\w") == "C:\\w\\x"
    assert windows_paths.from_unix_path("/tmp") == "C:\\tmp"
    with pytest.raises(UnrelatablePathError):
        posix_paths.rel("a", "/a")


def test_patterns(posix_paths, windows_paths):
    assert posix_paths.match("*.txt", "notes.txt")
    assert not windows_paths.match("*", "a\\b")
    assert posix_paths.has_meta("a\\b")
    assert not windows_paths.has_meta("a\\b")
    with pytest.raises(MalformedPatternError):
        posix_paths.match("[", "x")


def test_glob(windows_paths):
    tree = FakeTree(windows_paths.semantics, ["C:\\data\\a.txt", "C:\\data\\b.log"])
    assert windows_paths.glob("C:\\data\\*.txt", tree) == ["C:\\data\\a.txt"]


def test_path_iterator(posix_paths):
    pi = posix_paths.path_iterator("/a/b")
    assert isinstance(pi, PathIterator)
    assert list(pi) == ["a", "b"]


def test_is_immutable_binding():
    paths = PathUtils("linux")
    with pytest.raises(AttributeError):
        paths.extra = 1

from __future__ import annotations

from ._ostype import PathSemantics


def _is_slash(c: str) -> bool:
    return c == "\\" or c == "/"


def is_path_separator(sem: PathSemantics, c: str) -> bool:
    """Report whether *c* is a directory separator character."""
    if not sem.is_windows:
        return c == "/"
    return c == "\\" or c == "/"


def from_slash(sem: PathSemantics, path: str) -> str:
    """Replace each ``/`` in *path* with the native separator."""
    if not sem.is_windows:
        return path
    return path.replace("/", sem.sep)


def to_slash(sem: PathSemantics, path: str) -> str:
    """Replace each native separator in *path* with ``/``."""
    if sem.sep == "/":
        return path
    return path.replace(sem.sep, "/")


def volume_name_len(sem: PathSemantics, path: str) -> int:
    """Return the length of the leading volume name.

    ``C:`` style drive letters and ``\\\\host\\share`` UNC prefixes are only
    recognized under Windows semantics; elsewhere the result is always 0.
    """
    if not sem.is_windows:
        return 0
    if len(path) < 2:
        return 0

    # drive letter
    c = path[0]
    if path[1] == ":" and c.isascii() and c.isalpha():
        return 2

    # UNC: \\host\share, host and share must not start with a separator or '.'
    n_total = len(path)
    if (
        n_total >= 5
        and _is_slash(path[0])
        and _is_slash(path[1])
        and not _is_slash(path[2])
        and path[2] != "."
    ):
        n = 3
        while n < n_total - 1:
            if _is_slash(path[n]):
                n += 1
                if not _is_slash(path[n]):
                    if path[n] == ".":
                        break
                    while n < n_total and not _is_slash(path[n]):
                        n += 1
                    return n
                break
            n += 1
    return 0


def volume_name(sem: PathSemantics, path: str) -> str:
    """Return the leading volume name, e.g. ``C:`` or ``\\\\host\\share``."""
    return from_slash(sem, path[: volume_name_len(sem, path)])


# Reserved Windows device names, see "Naming Files, Paths, and Namespaces".
_RESERVED_NAMES = (
    "CON", "PRN", "AUX", "NUL",
    "COM1", "COM2", "COM3", "COM4", "COM5", "COM6", "COM7", "COM8", "COM9",
    "LPT1", "LPT2", "LPT3", "LPT4", "LPT5", "LPT6", "LPT7", "LPT8", "LPT9",
)


def _is_reserved_name(path: str) -> bool:
    if not path:
        return False
    return path.upper() in _RESERVED_NAMES


def is_abs(sem: PathSemantics, path: str) -> bool:
    """Report whether *path* is absolute.

    Under Windows semantics a reserved device name such as ``NUL`` or
    ``com1`` is absolute on its own.
    """
    if not sem.is_windows:
        return path.startswith("/")

    if _is_reserved_name(path):
        return True

    n = volume_name_len(sem, path)
    if n == 0:
        return False
    # UNC volumes are always absolute
    if _is_slash(path[0]) and _is_slash(path[1]):
        return True
    path = path[n:]
    if not path:
        return False
    return _is_slash(path[0])

from __future__ import annotations

import enum
import sys
from typing import NoReturn


class OSType(enum.IntEnum):
    """Operating system whose path syntax is emulated."""

    UNKNOWN = 0
    LINUX = 1
    WINDOWS = 2
    DARWIN = 3

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: OSType | int | str) -> OSType:
        """Return the OSType named by *value* (member, integer value or name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "posix":
                return cls.LINUX
            for member in cls:
                if member.name.lower() == key:
                    return member
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ValueError(
            f"Invalid OS type: {value!r}. "
            "Expected 'linux', 'darwin', 'windows', 'posix' or 'unknown'."
        )


def current_os_type() -> OSType:
    """Return the OSType of the running interpreter."""
    if sys.platform.startswith("linux"):
        return OSType.LINUX
    if sys.platform == "darwin":
        return OSType.DARWIN
    if sys.platform == "win32":
        return OSType.WINDOWS
    return OSType.UNKNOWN


class PathSemantics:
    """Immutable OS-semantics context threaded through every path function.

    It selects the separator, the volume syntax and the pattern escaping
    rules. ``OSType.UNKNOWN`` resolves to the host OS type; a host that is
    itself unknown gets POSIX syntax.
    """

    __slots__ = ("_os_type", "_sep")

    def __init__(self, os_type: OSType | int | str = OSType.UNKNOWN) -> None:
        resolved = OSType.parse(os_type)
        if resolved == OSType.UNKNOWN:
            resolved = current_os_type()
        object.__setattr__(self, "_os_type", resolved)
        object.__setattr__(self, "_sep", "\\" if resolved == OSType.WINDOWS else "/")

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathSemantics):
            return NotImplemented
        return self._os_type == other._os_type

    def __hash__(self) -> int:
        return hash(self._os_type)

    def __repr__(self) -> str:
        return f"PathSemantics({str(self._os_type)!r})"

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (PathSemantics, (int(self._os_type),))

    @property
    def os_type(self) -> OSType:
        return self._os_type

    @property
    def sep(self) -> str:
        """The native path separator, ``"/"`` or ``"\\\\"``."""
        return self._sep

    @property
    def is_windows(self) -> bool:
        return self._os_type == OSType.WINDOWS


POSIX = PathSemantics(OSType.LINUX)
WINDOWS = PathSemantics(OSType.WINDOWS)

from __future__ import annotations

from . import _glob, _match, _path, _volume
from ._iterator import PathIterator
from ._ostype import OSType, PathSemantics
from ._typing import GlobSource


class PathUtils:
    """All path operations bound to one OS-semantics context.

    Build one per logical filesystem::

        paths = PathUtils("windows")
        paths.join("C:", "f")        # 'C:f'
        paths.rel("C:\\a", "c:\\a\\b")  # 'b'
    """

    __slots__ = ("_sem",)

    def __init__(self, os_type: PathSemantics | OSType | int | str = OSType.UNKNOWN) -> None:
        if isinstance(os_type, PathSemantics):
            self._sem = os_type
        else:
            self._sem = PathSemantics(os_type)

    def __repr__(self) -> str:
        return f"PathUtils({str(self._sem.os_type)!r})"

    @property
    def semantics(self) -> PathSemantics:
        return self._sem

    @property
    def os_type(self) -> OSType:
        return self._sem.os_type

    @property
    def sep(self) -> str:
        return self._sem.sep

    # -- separators and volumes --

    def is_path_separator(self, c: str) -> bool:
        return _volume.is_path_separator(self._sem, c)

    def from_slash(self, path: str) -> str:
        return _volume.from_slash(self._sem, path)

    def to_slash(self, path: str) -> str:
        return _volume.to_slash(self._sem, path)

    def volume_name(self, path: str) -> str:
        return _volume.volume_name(self._sem, path)

    def volume_name_len(self, path: str) -> int:
        return _volume.volume_name_len(self._sem, path)

    def is_abs(self, path: str) -> bool:
        return _volume.is_abs(self._sem, path)

    # -- lexical operations --

    def clean(self, path: str) -> str:
        return _path.clean(self._sem, path)

    def join(self, *elem: str) -> str:
        return _path.join(self._sem, *elem)

    def split(self, path: str) -> tuple[str, str]:
        return _path.split(self._sem, path)

    def split_abs(self, path: str) -> tuple[str, str]:
        return _path.split_abs(self._sem, path)

    def dirname(self, path: str) -> str:
        return _path.dirname(self._sem, path)

    def basename(self, path: str) -> str:
        return _path.basename(self._sem, path)

    def rel(self, basepath: str, targpath: str) -> str:
        return _path.rel(self._sem, basepath, targpath)

    def abs_path(self, path: str, cwd: str) -> str:
        return _path.abs_path(self._sem, path, cwd)

    def from_unix_path(self, path: str) -> str:
        return _path.from_unix_path(self._sem, path)

    # -- patterns --

    def match(self, pattern: str, name: str) -> bool:
        return _match.match(self._sem, pattern, name)

    def has_meta(self, path: str) -> bool:
        return _match.has_meta(self._sem, path)

    def glob(self, pattern: str, source: GlobSource | None = None) -> list[str]:
        return _glob.glob(self._sem, pattern, source)

    # -- iteration --

    def path_iterator(self, path: str) -> PathIterator:
        return PathIterator(self._sem, path)

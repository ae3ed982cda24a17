from __future__ import annotations

from collections.abc import Iterator
from typing import NoReturn

from ._ostype import PathSemantics
from ._path import join
from ._volume import is_abs, volume_name_len


class PathIterator:
    """Iterate through the components of an absolute, clean path.

    Each call to :meth:`next` moves to the next component. The volume name
    is not a component; it is available through :attr:`volume_name`.

    With ``third`` as the current part::

        /first/second/third/fourth/fifth
                     |part-|
                   start  end
        |--- left ---|     |--- right --|
        |--- left_part ----|
                     |--- right_part ---|

    A PathIterator is a single cursor over one path resolution. It cannot be
    copied and must not be shared between concurrent resolutions.
    """

    __slots__ = ("_sem", "_path", "_start", "_end", "_volume_name_len")

    def __init__(self, sem: PathSemantics, path: str) -> None:
        self._sem = sem
        self._path = path
        self._start = 0
        self._end = 0
        self._volume_name_len = 0
        self.reset()

    def __copy__(self) -> NoReturn:
        raise TypeError("PathIterator cursors cannot be copied")

    def __deepcopy__(self, memo: dict) -> NoReturn:
        raise TypeError("PathIterator cursors cannot be copied")

    def __iter__(self) -> Iterator[str]:
        while self.next():
            yield self.part

    def __repr__(self) -> str:
        return (
            f"PathIterator({self._path!r}, start={self._start}, end={self._end})"
        )

    def next(self) -> bool:
        """Move to the next part of the path. Return False when exhausted."""
        self._start = self._end + 1
        if self._start >= len(self._path):
            self._end = self._start
            return False

        pos = self._path.find(self._sem.sep, self._start)
        self._end = len(self._path) if pos == -1 else pos
        return True

    def reset(self) -> None:
        """Go back to before the first part."""
        self._volume_name_len = volume_name_len(self._sem, self._path)
        self._end = self._volume_name_len

    def replace_part(self, new_path: str) -> bool:
        """Replace the current part with *new_path*, e.g. a symlink target.

        An absolute *new_path* replaces everything up to and including the
        current part. If the path before the current part changed, the
        iterator is reset and True is returned. Otherwise the iterator is
        rewound so that the next call to :meth:`next` starts at the
        replacement, and False is returned.
        """
        sem = self._sem
        old_path = self._path
        start = self._start

        if is_abs(sem, new_path):
            self._path = join(sem, new_path, old_path[self._end :])
        else:
            self._path = join(sem, old_path[:start], new_path, old_path[self._end :])

        if start >= len(self._path) or self._path[:start] != old_path[:start]:
            self.reset()
            return True

        self._end = start - 1
        return False

    @property
    def path(self) -> str:
        return self._path

    @property
    def part(self) -> str:
        return self._path[self._start : self._end]

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def is_last(self) -> bool:
        return self._end == len(self._path)

    @property
    def left(self) -> str:
        """The path before the current part."""
        return self._path[: self._start]

    @property
    def left_part(self) -> str:
        """The path up to and including the current part."""
        return self._path[: self._end]

    @property
    def right(self) -> str:
        """The path after the current part."""
        return self._path[self._end :]

    @property
    def right_part(self) -> str:
        """The current part and the path after it."""
        return self._path[self._start :]

    @property
    def volume_name(self) -> str:
        return self._path[: self._volume_name_len]

    @property
    def volume_name_len(self) -> int:
        return self._volume_name_len

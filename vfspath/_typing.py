from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class GlobSource(Protocol):
    """Directory access the globber needs from a filesystem implementation."""

    def lexists(self, path: str) -> bool:
        """Return True if *path* exists, without following a final symlink.

        Errors must be reported as False.
        """
        ...

    def listdir(self, path: str) -> Iterable[str]:
        """Return the entry names of directory *path*.

        May raise OSError, which the globber ignores.
        """
        ...

class LazyBuffer:
    """A lazily constructed path buffer used by :func:`vfspath.clean`.

    It supports appending, reading back previously appended characters and
    retrieving the final string. No buffer is allocated while the output is
    still a prefix of the input; on the first divergence a single buffer
    sized to the input is allocated and owns a copy of everything written
    so far.

    ``w`` is the write cursor. Callers move it backwards directly to erase
    output (``..`` handling).
    """

    __slots__ = ("_path", "_vol_and_path", "_vol_len", "_buf", "w")

    def __init__(self, path: str, vol_and_path: str, vol_len: int) -> None:
        self._path = path
        self._vol_and_path = vol_and_path
        self._vol_len = vol_len
        self._buf: list[str] | None = None
        self.w: int = 0

    @property
    def diverged(self) -> bool:
        return self._buf is not None

    @property
    def vol_len(self) -> int:
        return self._vol_len

    def index(self, i: int) -> str:
        if self._buf is not None:
            return self._buf[i]
        return self._path[i]

    def written(self) -> list[str]:
        """Return the characters written so far (after divergence only)."""
        if self._buf is None:
            raise RuntimeError("written() called before the buffer diverged")
        return self._buf[: self.w]

    def append(self, c: str) -> None:
        if self._buf is None:
            if self.w < len(self._path) and self._path[self.w] == c:
                self.w += 1
                return
            # Allocate once; slots past the cursor are overwritten before use.
            self._buf = list(self._path)
        if self.w < len(self._buf):
            self._buf[self.w] = c
        else:
            self._buf.append(c)
        self.w += 1

    def prepend(self, *prefix: str) -> None:
        if self._buf is None:
            raise RuntimeError("prepend() called before the buffer diverged")
        self._buf[0:0] = prefix
        self.w += len(prefix)

    def string(self) -> str:
        if self._buf is None:
            return self._vol_and_path[: self._vol_len + self.w]
        return self._vol_and_path[: self._vol_len] + "".join(self._buf[: self.w])

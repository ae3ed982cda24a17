from __future__ import annotations

from ._exceptions import UnrelatablePathError
from ._lazybuf import LazyBuffer
from ._ostype import PathSemantics
from ._volume import (
    _is_slash,
    from_slash,
    is_abs,
    is_path_separator,
    volume_name,
    volume_name_len,
)

# Volume used for absolute unix paths converted to Windows syntax.
DEFAULT_VOLUME = "C:"


def clean(sem: PathSemantics, path: str) -> str:
    """Return the shortest path name equivalent to *path* by lexical processing.

    The following rules are applied until no further processing can be done:

    1. Replace multiple separators with a single one.
    2. Eliminate each ``.`` path name element.
    3. Eliminate each inner ``..`` element along with the non-``..``
       element that precedes it.
    4. Eliminate ``..`` elements that begin a rooted path.

    The result ends in a separator only if it is a root, such as ``/`` or
    ``C:\\``. Slashes in the result are replaced by the native separator and
    an empty result becomes ``"."``. The volume name is never modified other
    than by that separator conversion, so ``//host/share/../x`` cleans to
    ``\\\\host\\share\\x`` under Windows semantics.
    """
    sep = sem.sep
    original = path
    vol_len = volume_name_len(sem, path)

    path = path[vol_len:]
    if not path:
        if (
            vol_len > 1
            and is_path_separator(sem, original[0])
            and is_path_separator(sem, original[1])
        ):
            # UNC root
            return from_slash(sem, original)
        return original + "."

    rooted = is_path_separator(sem, path[0])

    # r is the index of the next char to read from path, out.w the index of
    # the next char to write. dotdot is where .. must stop erasing: the root
    # separator or the end of a leading ../../.. prefix.
    n = len(path)
    out = LazyBuffer(path, original, vol_len)
    r = dotdot = 0
    if rooted:
        out.append(sep)
        r = dotdot = 1

    while r < n:
        c = path[r]
        if is_path_separator(sem, c):
            # empty element
            r += 1
        elif c == "." and (r + 1 == n or is_path_separator(sem, path[r + 1])):
            # . element
            r += 1
        elif (
            c == "."
            and path[r + 1] == "."
            and (r + 2 == n or is_path_separator(sem, path[r + 2]))
        ):
            # .. element: remove to last separator
            r += 2
            if out.w > dotdot:
                out.w -= 1
                while out.w > dotdot and not is_path_separator(sem, out.index(out.w)):
                    out.w -= 1
            elif not rooted:
                # cannot backtrack, keep the .. element
                if out.w > 0:
                    out.append(sep)
                out.append(".")
                out.append(".")
                dotdot = out.w
        else:
            # real element
            if (rooted and out.w != 1) or (not rooted and out.w != 0):
                out.append(sep)
            while r < n and not is_path_separator(sem, path[r]):
                out.append(path[r])
                r += 1

    if out.w == 0:
        out.append(".")

    if sem.is_windows:
        _post_clean(sem, out)

    return from_slash(sem, out.string())


def _post_clean(sem: PathSemantics, out: LazyBuffer) -> None:
    """Keep a cleaned relative Windows path from turning into a volume path."""
    if out.vol_len != 0 or not out.diverged:
        return

    written = out.written()
    # a/../c: must not become the drive-relative c:
    for c in written:
        if is_path_separator(sem, c):
            break
        if c == ":":
            out.prepend(".", sem.sep)
            return

    # \a\..\??\c:\x must not become the root local device path \??\c:\x
    if (
        len(written) >= 3
        and is_path_separator(sem, written[0])
        and written[1] == "?"
        and written[2] == "?"
    ):
        out.prepend(sem.sep, ".")


def split(sem: PathSemantics, path: str) -> tuple[str, str]:
    """Split *path* immediately following the final separator.

    The returned ``(dir, file)`` satisfy ``dir + file == path``. ``dir`` is
    empty when there is no separator after the volume name.
    """
    vol = volume_name(sem, path)
    i = len(path) - 1
    while i >= len(vol) and not is_path_separator(sem, path[i]):
        i -= 1
    return path[: i + 1], path[i + 1 :]


def split_abs(sem: PathSemantics, path: str) -> tuple[str, str]:
    """Split an absolute path immediately preceding the final separator.

    The returned ``(dir, file)`` satisfy ``dir + sep + file == path``.
    """
    n = volume_name_len(sem, path)
    i = len(path) - 1
    while i >= n and not is_path_separator(sem, path[i]):
        i -= 1
    if i < 0:
        return "", path
    return path[:i], path[i + 1 :]


def dirname(sem: PathSemantics, path: str) -> str:
    """Return all but the last element of *path*, cleaned.

    Trailing separators are removed unless the result is a root.
    """
    vol = volume_name(sem, path)
    i = len(path) - 1
    while i >= len(vol) and not is_path_separator(sem, path[i]):
        i -= 1

    d = clean(sem, path[len(vol) : i + 1])
    if d == "." and len(vol) > 2:
        # a UNC share is not relative
        return vol
    return vol + d


def basename(sem: PathSemantics, path: str) -> str:
    """Return the last element of *path*.

    Trailing separators are removed first. An empty path gives ``"."`` and a
    path made only of separators gives a single separator.
    """
    if not path:
        return "."

    while path and is_path_separator(sem, path[-1]):
        path = path[:-1]

    path = path[len(volume_name(sem, path)) :]

    i = len(path) - 1
    while i >= 0 and not is_path_separator(sem, path[i]):
        i -= 1
    if i >= 0:
        path = path[i + 1 :]

    if not path:
        return sem.sep
    return path


def join(sem: PathSemantics, *elem: str) -> str:
    """Join path elements with the separator and clean the result.

    Empty elements are ignored; joining only empty elements gives ``""``.
    """
    if sem.is_windows:
        return _join_windows(sem, elem)

    for i, e in enumerate(elem):
        if e:
            return clean(sem, sem.sep.join(elem[i:]))
    return ""


def _join_windows(sem: PathSemantics, elem: tuple[str, ...]) -> str:
    b = ""
    last_char = ""
    for e in elem:
        if not b:
            # first non-empty element is kept unchanged
            pass
        elif _is_slash(last_char):
            # Strip leading separators so that non-UNC elements never
            # produce a UNC path. Join("\\", "host", "share") still gives
            # \\host\share.
            while e and _is_slash(e[0]):
                e = e[1:]
            # \ followed by ?? would make a root local device path
            if len(b) == 1 and _path_has_prefix_fold(e, "??"):
                b += ".\\"
        elif last_char == ":":
            # Drive-relative: Join("C:", "f") is C:f, Join("C:", "\\f") is C:\f.
            pass
        else:
            b += "\\"
            last_char = "\\"

        if e:
            b += e
            last_char = e[-1]

    if not b:
        return ""
    return clean(sem, b)


def _path_has_prefix_fold(s: str, prefix: str) -> bool:
    """Report whether *s* starts with *prefix*, ignoring ASCII case.

    Separators are equivalent to each other and, if *s* is longer than
    *prefix*, ``s[len(prefix)]`` must be a separator.
    """
    if len(s) < len(prefix):
        return False
    for i, p in enumerate(prefix):
        if _is_slash(p):
            if not _is_slash(s[i]):
                return False
        elif _to_upper(p) != _to_upper(s[i]):
            return False
    if len(s) > len(prefix) and not _is_slash(s[len(prefix)]):
        return False
    return True


def _to_upper(c: str) -> str:
    if "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c


def _same_word(sem: PathSemantics, a: str, b: str) -> bool:
    if not sem.is_windows:
        return a == b
    return a.lower() == b.lower()


def rel(sem: PathSemantics, basepath: str, targpath: str) -> str:
    """Return a relative path lexically equivalent to *targpath* from *basepath*.

    ``join(sem, basepath, rel(sem, basepath, targpath))`` is equivalent to
    *targpath*. The result is always relative, even when the two paths share
    no elements, and it is cleaned.

    Raises:
        UnrelatablePathError: the volumes differ, only one path is rooted, or
            computing the result would require knowing the working directory.
    """
    sep = sem.sep
    base_vol = volume_name(sem, basepath)
    targ_vol = volume_name(sem, targpath)
    base = clean(sem, basepath)
    targ = clean(sem, targpath)
    if _same_word(sem, targ, base):
        return "."

    base = base[len(base_vol) :]
    targ = targ[len(targ_vol) :]
    if base == ".":
        base = ""
    elif base == "" and volume_name_len(sem, base_vol) > 2:
        # a bare \\host\share base is rooted
        base = sep

    # IsAbs can't be used: \a and a are both relative on Windows.
    base_slashed = len(base) > 0 and base[0] == sep
    targ_slashed = len(targ) > 0 and targ[0] == sep
    if base_slashed != targ_slashed or not _same_word(sem, base_vol, targ_vol):
        raise UnrelatablePathError(basepath, targpath)

    # Position base[b0:bi] and targ[t0:ti] at the first differing elements.
    bl = len(base)
    tl = len(targ)
    b0 = bi = t0 = ti = 0
    while True:
        while bi < bl and base[bi] != sep:
            bi += 1
        while ti < tl and targ[ti] != sep:
            ti += 1
        if not _same_word(sem, targ[t0:ti], base[b0:bi]):
            break
        if bi < bl:
            bi += 1
        if ti < tl:
            ti += 1
        b0 = bi
        t0 = ti

    if base[b0:bi] == "..":
        raise UnrelatablePathError(basepath, targpath)

    if b0 != bl:
        # base elements left: go up before going down
        seps = base.count(sep, b0, bl)
        result = ".." + (sep + "..") * seps
        if t0 != tl:
            result += sep + targ[t0:]
        return result
    return targ[t0:]


def from_unix_path(sem: PathSemantics, path: str) -> str:
    """Convert a unix-style path to the syntax of *sem*.

    Under Windows semantics absolute paths are placed on
    :data:`DEFAULT_VOLUME` and relative paths keep being relative.
    """
    if not sem.is_windows or not path:
        return path
    if path[0] != "/":
        return from_slash(sem, path)
    return join(sem, DEFAULT_VOLUME, from_slash(sem, path))


def abs_path(sem: PathSemantics, path: str, cwd: str) -> str:
    """Return an absolute representation of *path* relative to *cwd*."""
    if is_abs(sem, path):
        return clean(sem, path)
    return join(sem, cwd, path)

"""Shell file name pattern matching.

The pattern syntax is::

    pattern:
        { term }
    term:
        '*'         matches any sequence of non-separator characters
        '?'         matches any single non-separator character
        '[' [ '^' ] { character-range } ']'
                    character class (must be non-empty)
        c           matches character c (c != '*', '?', '\\', '[')
        '\\' c      matches character c

    character-range:
        c           matches character c (c != '\\', '-', ']')
        '\\' c      matches character c
        lo '-' hi   matches character c for lo <= c <= hi

Under Windows semantics escaping is disabled and ``\\`` is the path
separator.
"""

from __future__ import annotations

from ._exceptions import MalformedPatternError
from ._ostype import PathSemantics


def match(sem: PathSemantics, pattern: str, name: str) -> bool:
    """Report whether *name* matches the shell pattern *pattern*.

    The whole of *name* must match, not just a substring.

    Raises:
        MalformedPatternError: *pattern* is malformed. This is detected even
            when *name* does not match.
    """
    try:
        return _match(sem, pattern, name)
    except MalformedPatternError as exc:
        if exc.pattern is not None:
            raise
        raise MalformedPatternError(pattern) from None


def _match(sem: PathSemantics, pattern: str, name: str) -> bool:
    sep = sem.sep
    while pattern:
        star, chunk, pattern = scan_chunk(sem, pattern)
        if star and not chunk:
            # trailing * matches the rest of name unless it has a separator
            return sep not in name

        # Look for a match at the current position. The last chunk must
        # exhaust name, otherwise the star retry below may still match.
        rest, ok = match_chunk(sem, chunk, name)
        if ok and (not rest or pattern):
            name = rest
            continue

        advanced = False
        if star:
            # look for a match skipping i+1 chars, never skipping a separator
            i = 0
            while i < len(name) and name[i] != sep:
                rest, ok = match_chunk(sem, chunk, name[i + 1 :])
                if ok and (pattern or not rest):
                    name = rest
                    advanced = True
                    break
                i += 1
        if not advanced:
            return False

    return name == ""


def scan_chunk(sem: PathSemantics, pattern: str) -> tuple[bool, str, str]:
    """Split off the next non-star chunk of *pattern*.

    Returns ``(star, chunk, rest)`` where *star* reports whether the chunk
    was preceded by one or more ``*``.
    """
    star = False
    while pattern and pattern[0] == "*":
        pattern = pattern[1:]
        star = True

    escapes = not sem.is_windows
    in_range = False
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\":
            # a trailing escape is reported by match_chunk
            if escapes and i + 1 < len(pattern):
                i += 1
        elif c == "[":
            in_range = True
        elif c == "]":
            in_range = False
        elif c == "*" and not in_range:
            break
        i += 1
    return star, pattern[:i], pattern[i:]


def match_chunk(sem: PathSemantics, chunk: str, s: str) -> tuple[str, bool]:
    """Check whether *chunk* matches the beginning of *s*.

    *chunk* holds single-character operators only: literals, character
    classes and ``?``. Returns ``(rest, True)`` with the unmatched remainder
    of *s* on success and ``("", False)`` otherwise.

    After a mismatch the rest of the chunk is still scanned, without
    consuming *s*, so that a malformed chunk always raises
    :class:`MalformedPatternError`.
    """
    sep = sem.sep
    escapes = not sem.is_windows
    failed = False

    while chunk:
        if not failed and not s:
            failed = True

        c = chunk[0]
        if c == "[":
            r = ""
            if not failed:
                r = s[0]
                s = s[1:]
            chunk = chunk[1:]

            negated = False
            if chunk and chunk[0] == "^":
                negated = True
                chunk = chunk[1:]

            matched = False
            nrange = 0
            while True:
                if chunk and chunk[0] == "]" and nrange > 0:
                    chunk = chunk[1:]
                    break
                lo, chunk = get_esc(sem, chunk)
                hi = lo
                if chunk[0] == "-":
                    hi, chunk = get_esc(sem, chunk[1:])
                if r and lo <= r <= hi:
                    matched = True
                nrange += 1

            if matched == negated:
                failed = True

        elif c == "?":
            if not failed:
                if s[0] == sep:
                    failed = True
                s = s[1:]
            chunk = chunk[1:]

        else:
            if c == "\\" and escapes:
                chunk = chunk[1:]
                if not chunk:
                    raise MalformedPatternError()
            if not failed:
                if chunk[0] != s[0]:
                    failed = True
                s = s[1:]
            chunk = chunk[1:]

    if failed:
        return "", False
    return s, True


def get_esc(sem: PathSemantics, chunk: str) -> tuple[str, str]:
    """Read a possibly escaped character from a character class.

    Returns the character and the remaining chunk, which is never empty since
    a class must still be closed.
    """
    if not chunk or chunk[0] == "-" or chunk[0] == "]":
        raise MalformedPatternError()

    if chunk[0] == "\\" and not sem.is_windows:
        chunk = chunk[1:]
        if not chunk:
            raise MalformedPatternError()

    r = chunk[0]
    rest = chunk[1:]
    if not rest:
        raise MalformedPatternError()
    return r, rest


def has_meta(sem: PathSemantics, path: str) -> bool:
    """Report whether *path* contains any character special to :func:`match`."""
    magic = "*?[" if sem.is_windows else "*?[\\"
    return any(c in magic for c in path)

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from ._exceptions import MalformedPatternError
from ._match import has_meta, match
from ._ostype import PathSemantics
from ._path import join, split
from ._typing import GlobSource
from ._volume import is_path_separator, volume_name_len

logger = logging.getLogger(__name__)


class HostSource:
    """A :class:`GlobSource` backed by the host operating system."""

    def lexists(self, path: str) -> bool:
        return os.path.lexists(path)

    def listdir(self, path: str) -> Iterable[str]:
        return os.listdir(path)


def glob(
    sem: PathSemantics, pattern: str, source: GlobSource | None = None
) -> list[str]:
    """Return the paths matching *pattern*.

    The pattern syntax is the one of :func:`vfspath.match`; it may describe
    hierarchical names such as ``/usr/*/bin/ed``. Matches within a directory
    are sorted; matches under several directories keep the order in which
    those directories were found.

    Errors reading directories are ignored. *source* defaults to the host
    filesystem.

    Raises:
        MalformedPatternError: *pattern* is malformed. This is the only
            error glob raises.
    """
    if source is None:
        source = HostSource()

    # check pattern is well-formed
    match(sem, pattern, "")

    if not has_meta(sem, pattern):
        if not source.lexists(pattern):
            return []
        return [pattern]

    dir_, file = split(sem, pattern)
    if sem.is_windows:
        volume_len, dir_ = _clean_glob_path_windows(sem, dir_)
    else:
        volume_len, dir_ = 0, _clean_glob_path(sem, dir_)

    if not has_meta(sem, dir_[volume_len:]):
        return _glob_dir(sem, source, dir_, file, [])

    # a directory part that re-derives the pattern would recurse forever
    if dir_ == pattern:
        raise MalformedPatternError(pattern)

    matches: list[str] = []
    for d in glob(sem, dir_, source):
        _glob_dir(sem, source, d, file, matches)
    return matches


def _clean_glob_path(sem: PathSemantics, path: str) -> str:
    if path == "":
        return "."
    if path == sem.sep:
        return path
    # chop off trailing separator
    return path[:-1]


def _clean_glob_path_windows(sem: PathSemantics, path: str) -> tuple[int, str]:
    vol_len = volume_name_len(sem, path)
    if path == "":
        return 0, "."
    if vol_len + 1 == len(path) and is_path_separator(sem, path[-1]):
        # \, /, C:\ and C:/
        return vol_len + 1, path
    if vol_len == len(path) and len(path) == 2:
        # C: becomes C:.
        return vol_len, path + "."
    if vol_len >= len(path):
        vol_len = len(path) - 1
    return vol_len, path[:-1]


def _glob_dir(
    sem: PathSemantics,
    source: GlobSource,
    dir_: str,
    pattern: str,
    matches: list[str],
) -> list[str]:
    """Append the entries of *dir_* matching *pattern* to *matches*, sorted."""
    try:
        names = sorted(source.listdir(dir_))
    except OSError as exc:
        logger.debug("glob: ignoring unreadable directory %r: %s", dir_, exc)
        return matches

    for name in names:
        if match(sem, pattern, name):
            matches.append(join(sem, dir_, name))
    return matches

from ._exceptions import MalformedPatternError, UnrelatablePathError, VfsPathError
from ._glob import HostSource, glob
from ._iterator import PathIterator
from ._match import has_meta, match
from ._ostype import POSIX, WINDOWS, OSType, PathSemantics, current_os_type
from ._path import (
    DEFAULT_VOLUME,
    abs_path,
    basename,
    clean,
    dirname,
    from_unix_path,
    join,
    rel,
    split,
    split_abs,
)
from ._typing import GlobSource
from ._utils import PathUtils
from ._volume import (
    from_slash,
    is_abs,
    is_path_separator,
    to_slash,
    volume_name,
    volume_name_len,
)

__all__ = [
    "OSType",
    "PathSemantics",
    "POSIX",
    "WINDOWS",
    "current_os_type",
    "PathUtils",
    "PathIterator",
    "GlobSource",
    "HostSource",
    "VfsPathError",
    "MalformedPatternError",
    "UnrelatablePathError",
    "DEFAULT_VOLUME",
    "clean",
    "join",
    "split",
    "split_abs",
    "dirname",
    "basename",
    "rel",
    "abs_path",
    "from_unix_path",
    "volume_name",
    "volume_name_len",
    "is_abs",
    "is_path_separator",
    "from_slash",
    "to_slash",
    "match",
    "has_meta",
    "glob",
]
__version__ = "0.1.0"

"""XDG base directory resolution."""

import logging

__version__ = "0.1.0"

from .basedirs import BaseDirs, get_base_dirs, resolve, with_suffix
from .paths import (
    GlobPatternError,
    InvalidPathError,
    XdgPath,
    XdgPathList,
    is_valid,
    path_with_default,
    paths_with_default,
)

# Output is left to the application's logging configuration.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseDirs",
    "get_base_dirs",
    "resolve",
    "with_suffix",
    "GlobPatternError",
    "InvalidPathError",
    "XdgPath",
    "XdgPathList",
    "is_valid",
    "path_with_default",
    "paths_with_default",
]

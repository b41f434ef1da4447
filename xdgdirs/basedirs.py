"""XDG base directory resolution.

Data:    $XDG_DATA_HOME   (default ~/.local/share), $XDG_DATA_DIRS   (default /usr/local/share:/usr/share)
Config:  $XDG_CONFIG_HOME (default ~/.config),      $XDG_CONFIG_DIRS (default /etc/xdg)
Cache:   $XDG_CACHE_HOME  (default ~/.cache)
Runtime: $XDG_RUNTIME_DIR (no default)

See https://specifications.freedesktop.org/basedir-spec/latest/
"""
from __future__ import annotations

import logging
import os
import pwd
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from xdgdirs.paths import (
    XdgPath,
    XdgPathList,
    is_valid,
    path_with_default,
    paths_with_default,
)

logger = logging.getLogger(__name__)

_LIST_SEP = ":"

_DATA_DIRS_DEFAULT = XdgPathList(("/usr/local/share", "/usr/share"))
_CONFIG_DIRS_DEFAULT = XdgPathList(("/etc/xdg",))


@dataclass(frozen=True)
class BaseDirs:
    """Resolved base directories.

    ``data`` and ``config`` are derived: the home directory followed by
    the search directories.
    """

    data_home: XdgPath
    data_dirs: XdgPathList
    data: XdgPathList = field(init=False)
    config_home: XdgPath
    config_dirs: XdgPathList
    config: XdgPathList = field(init=False)
    cache_home: XdgPath
    runtime_dir: XdgPath | None = None  # None when $XDG_RUNTIME_DIR is unset or invalid

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_dirs", XdgPathList(self.data_dirs))
        object.__setattr__(self, "config_dirs", XdgPathList(self.config_dirs))
        object.__setattr__(self, "data", XdgPathList((self.data_home, *self.data_dirs)))
        object.__setattr__(
            self, "config", XdgPathList((self.config_home, *self.config_dirs))
        )

    def with_suffix(self, name: str) -> BaseDirs:
        """Return a copy with *name* appended to every resolved path.

        Scopes all lookups to one application. An unset runtime dir
        stays unset rather than becoming the bare relative *name*.
        """
        if not _is_scope_name(name):
            raise ValueError(
                f"Application name must be a relative path below each base, got {name!r}"
            )

        def scope(path: XdgPath) -> XdgPath:
            return XdgPath(path.join(name))

        return BaseDirs(
            data_home=scope(self.data_home),
            data_dirs=XdgPathList(scope(p) for p in self.data_dirs),
            config_home=scope(self.config_home),
            config_dirs=XdgPathList(scope(p) for p in self.config_dirs),
            cache_home=scope(self.cache_home),
            runtime_dir=scope(self.runtime_dir) if self.runtime_dir is not None else None,
        )

    def to_environ(self) -> dict[str, str]:
        """Return the XDG env vars that reproduce this resolution.

        Useful for propagating the same layout to a child process.
        ``XDG_RUNTIME_DIR`` is left out when unset.
        """
        env = {
            "XDG_DATA_HOME": str(self.data_home),
            "XDG_DATA_DIRS": _LIST_SEP.join(self.data_dirs),
            "XDG_CONFIG_HOME": str(self.config_home),
            "XDG_CONFIG_DIRS": _LIST_SEP.join(self.config_dirs),
            "XDG_CACHE_HOME": str(self.cache_home),
        }
        if self.runtime_dir is not None:
            env["XDG_RUNTIME_DIR"] = str(self.runtime_dir)
        return env


def _is_scope_name(name: str) -> bool:
    """Return True if *name* stays strictly below the path it is joined to."""
    if not name or os.path.isabs(name):
        return False
    norm = os.path.normpath(name)
    return norm != os.curdir and norm != os.pardir and not norm.startswith(os.pardir + os.sep)


def _account_home() -> str:
    """Return the current user's home from the password database."""
    return pwd.getpwuid(os.getuid()).pw_dir


def _user_home(environ: Mapping[str, str]) -> str:
    """Return $HOME from *environ* if it is absolute, else the account's home.

    The fallback never reads ``os.environ``, so an injected mapping fully
    determines the result.
    """
    home = environ.get("HOME", "")
    if is_valid(home):
        return home
    return os.path.abspath(_account_home())


def _split(value: str | None) -> list[str]:
    return value.split(_LIST_SEP) if value else []


def resolve(environ: Mapping[str, str] | None = None) -> BaseDirs:
    """Resolve the base directories from *environ* (default: ``os.environ``).

    Unset, empty or relative values fall back to the defaults without
    any diagnostic. For the ``*_DIRS`` lists each entry is checked on
    its own; the default list is used only when no entry survives.
    """
    if environ is None:
        environ = os.environ
    home = _user_home(environ)

    dirs = BaseDirs(
        data_home=path_with_default(
            environ.get("XDG_DATA_HOME"), XdgPath(os.path.join(home, ".local", "share"))
        ),
        data_dirs=paths_with_default(_split(environ.get("XDG_DATA_DIRS")), _DATA_DIRS_DEFAULT),
        config_home=path_with_default(
            environ.get("XDG_CONFIG_HOME"), XdgPath(os.path.join(home, ".config"))
        ),
        config_dirs=paths_with_default(
            _split(environ.get("XDG_CONFIG_DIRS")), _CONFIG_DIRS_DEFAULT
        ),
        cache_home=path_with_default(
            environ.get("XDG_CACHE_HOME"), XdgPath(os.path.join(home, ".cache"))
        ),
        runtime_dir=path_with_default(environ.get("XDG_RUNTIME_DIR"), None),
    )
    logger.debug(
        "Resolved data=%s config=%s cache=%s runtime=%s",
        dirs.data,
        dirs.config,
        dirs.cache_home,
        dirs.runtime_dir,
    )
    return dirs


@lru_cache(maxsize=1)
def get_base_dirs() -> BaseDirs:
    """Return the process-wide resolution of ``os.environ``.

    Computed on first call. ``get_base_dirs.cache_clear()`` forces the
    next call to re-read the environment.
    """
    return resolve()


def with_suffix(name: str) -> BaseDirs:
    """Return :func:`get_base_dirs` scoped to the application *name*."""
    return get_base_dirs().with_suffix(name)

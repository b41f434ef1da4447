"""Validated base-directory paths and ordered path lists.

A valid path is a non-empty, absolute path. It need not exist:
validity is purely syntactic and the filesystem is only touched by
``find`` (stat) and ``glob`` (directory listing).
"""
from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from pathlib import Path


class InvalidPathError(ValueError):
    """Raised when an explicit path is empty or relative."""


class GlobPatternError(ValueError):
    """Raised for a malformed glob pattern."""


def is_valid(path: object) -> bool:
    """Return True if *path* is a non-empty absolute path."""
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    return isinstance(path, str) and path != "" and os.path.isabs(path)


def _join(*parts: str) -> str:
    """Join *parts* with the path separator and normalise the result.

    Unlike ``os.path.join``, an absolute segment does not discard what
    precedes it, and empty segments are skipped.
    """
    parts = tuple(p for p in parts if p)
    if not parts:
        return ""
    return os.path.normpath(os.sep.join(parts))


def _check_pattern(pattern: str) -> None:
    """Raise GlobPatternError for patterns ``glob`` would silently misread."""
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                if pattern[j] == os.sep:
                    raise GlobPatternError(
                        f"Character class in '{pattern}' spans a path separator"
                    )
                j += 1
            if j >= n:
                raise GlobPatternError(f"Unterminated character class in '{pattern}'")
            i = j
        i += 1


# ---------------------------------------------------------------------------
# Single path
# ---------------------------------------------------------------------------

class XdgPath(str):
    """An absolute path string, checked once at construction.

    Note that ``join`` and ``find`` are path operations here and shadow
    ``str.join`` / ``str.find``: ``XdgPath("/a").find("b")`` returns
    ``"/a/b"`` or ``""``, never an index. Convert with ``str(p)`` before
    handing the value to code that expects plain string methods.
    """

    __slots__ = ()

    def __new__(cls, path: str | os.PathLike[str]) -> XdgPath:
        if not is_valid(path):
            raise InvalidPathError(f"Not an absolute path: {path!r}")
        return super().__new__(cls, os.fspath(path))

    def __repr__(self) -> str:
        return f"XdgPath({str(self)!r})"

    @property
    def is_valid(self) -> bool:
        return is_valid(str(self))

    @property
    def path(self) -> Path:
        """Return the value as a ``pathlib.Path``."""
        return Path(self)

    def join(self, *elem: str) -> str:
        """Return this path joined with *elem*. No filesystem access."""
        return _join(self, *elem)

    def find(self, *elem: str) -> str:
        """Return the joined path if it exists, else ``""``.

        A missing target (or a parent that is not a directory) is a soft
        miss; any other OSError, such as PermissionError, propagates.
        """
        target = self.join(*elem)
        try:
            os.stat(target)
        except (FileNotFoundError, NotADirectoryError):
            return ""
        return target

    def glob(self, pattern: str) -> list[str]:
        """Return sorted matches of the shell-style *pattern* under this path.

        ``*`` also matches names starting with a dot. A leading separator
        is rooted here, as in :meth:`join`. No matches yields an empty
        list; a malformed pattern raises GlobPatternError.
        """
        _check_pattern(pattern)
        pattern = pattern.lstrip(os.sep)
        if not pattern:
            target = self.find()
            return [target] if target else []
        matches = glob.glob(pattern, root_dir=self, include_hidden=True)
        return [self.join(m) for m in sorted(matches)]


def path_with_default(path: str | None, default: XdgPath | None) -> XdgPath | None:
    """Return ``XdgPath(path)`` if *path* is valid, otherwise *default* as-is."""
    if is_valid(path):
        return XdgPath(path)
    return default


# ---------------------------------------------------------------------------
# Ordered list of paths
# ---------------------------------------------------------------------------

class XdgPathList(tuple):
    """An ordered, immutable sequence of XdgPath in preference order.

    Duplicates are allowed. Lookups walk the list front to back.
    """

    __slots__ = ()

    def __new__(cls, paths: Iterable[str] = ()) -> XdgPathList:
        return super().__new__(
            cls, (p if isinstance(p, XdgPath) else XdgPath(p) for p in paths)
        )

    def __repr__(self) -> str:
        return f"XdgPathList({[str(p) for p in self]!r})"

    def join(self, *elem: str) -> list[str]:
        """Return each path joined with *elem*, in list order."""
        return [p.join(*elem) for p in self]

    def find(self, *elem: str) -> list[str]:
        """Return the existing ``join(*elem)`` targets, in list order."""
        found = []
        for p in self:
            target = p.find(*elem)
            if target:
                found.append(target)
        return found

    def first(self, *elem: str) -> str:
        """Return the highest-precedence existing target, or ``""``."""
        for p in self:
            target = p.find(*elem)
            if target:
                return target
        return ""

    def glob(self, pattern: str) -> list[str]:
        """Concatenate ``glob(pattern)`` over every path, in list order.

        The first error aborts the whole call.
        """
        matches: list[str] = []
        for p in self:
            matches.extend(p.glob(pattern))
        return matches


def paths_with_default(paths: Iterable[str], default: XdgPathList) -> XdgPathList:
    """Return the valid entries of *paths*, or *default* if none are valid.

    Invalid entries are dropped silently. *default* is returned unfiltered.
    """
    valid = XdgPathList(p for p in paths if is_valid(p))
    if not valid:
        return default
    return valid

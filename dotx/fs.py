"""File-system paths and the operations dotx performs on them."""

from __future__ import annotations

import os
import re
import shutil
from typing import Union

_ENV_VAR = re.compile(r"\$(?:\{([^}]*)\}|([A-Za-z_][A-Za-z0-9_]*))")

PathLike = Union[str, "os.PathLike[str]"]


class FsError(Exception):
    """Raised when a file-system operation's preconditions are not met."""


def _expand_env(path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1) if match.group(1) is not None else match.group(2)
        return os.environ.get(name, "")

    return _ENV_VAR.sub(replace, path)


def normalize_path(path: str) -> str:
    """Expand environment variables, clean the path and make it absolute."""
    expanded = _expand_env(path)
    return os.path.abspath(os.path.normpath(expanded))


class Path:
    """An absolute, normalised file-system path."""

    __slots__ = ("_abs_path",)

    def __init__(self, path: PathLike) -> None:
        self._abs_path = normalize_path(os.fspath(path))

    @property
    def abs_path(self) -> str:
        return self._abs_path

    def __fspath__(self) -> str:
        return self._abs_path

    def __str__(self) -> str:
        return self._abs_path

    def __repr__(self) -> str:
        return f"Path({self._abs_path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._abs_path == other._abs_path

    def __hash__(self) -> int:
        return hash(self._abs_path)

    def filename(self) -> str:
        """Return the last element of the path."""
        return os.path.basename(self._abs_path) or self._abs_path

    def dir(self) -> str:
        """Return the path itself if it is a directory, else its parent."""
        if self.is_dir():
            return self._abs_path
        return os.path.dirname(self._abs_path)

    def exists(self) -> bool:
        """Report whether the path exists; only a missing entry counts as absent."""
        try:
            os.stat(self._abs_path)
        except FileNotFoundError:
            return False
        except OSError:
            return True
        return True

    def is_dir(self) -> bool:
        return os.path.isdir(self._abs_path)

    def is_symlink(self) -> bool:
        return os.path.islink(self._abs_path)

    def symlink_path(self) -> str:
        """Return the resolved target of a symlink, or "" if unresolvable."""
        if not self.is_symlink():
            return ""
        try:
            return os.path.realpath(self._abs_path, strict=True)
        except OSError:
            return ""

    def has_subfiles(self) -> bool:
        if not self.is_dir():
            return False
        try:
            with os.scandir(self._abs_path) as entries:
                return any(True for _ in entries)
        except OSError:
            return False


def move(source: Path, dest: Path) -> None:
    """Rename ``source`` to ``dest``; ``dest`` must not exist yet."""
    if not source.exists():
        raise FsError(f"source path does not exist: {source.abs_path}")
    if dest.exists():
        raise FsError(f"destination path already exists: {dest.abs_path}")
    os.rename(source.abs_path, dest.abs_path)


def symlink(source: Path, dest: Path) -> None:
    """Create ``dest`` as a symbolic link pointing at ``source``."""
    if not source.exists():
        raise FsError(f"source path does not exist: {source.abs_path}")
    if dest.exists():
        raise FsError(f"destination path already exists: {dest.abs_path}")
    os.symlink(source.abs_path, dest.abs_path, target_is_directory=source.is_dir())


def mkdir(path: Path) -> None:
    """Create a directory and any missing parents."""
    os.makedirs(path.abs_path, mode=0o777, exist_ok=True)


def delete(path: Path) -> None:
    """Remove a file, link or whole directory tree."""
    if not path.exists():
        raise FsError(f"path does not exist: {path.abs_path}")
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path.abs_path)
    else:
        os.remove(path.abs_path)
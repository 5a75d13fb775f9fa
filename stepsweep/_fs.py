"""Shared helpers for normalizing paths and walking project trees."""

from __future__ import annotations

import fnmatch
import ntpath
import os
import typing as t
from pathlib import Path

from .errors import CorpusReadError

if t.TYPE_CHECKING:
    from concurrent.futures import Executor

_T = t.TypeVar("_T")

IS_WINDOWS = os.name == "nt"


def normalize_path_string(path: str) -> str:
    """Return a normalized string path using platform rules."""
    module = ntpath if IS_WINDOWS else os.path
    normalized = module.normpath(path)
    if IS_WINDOWS:
        normalized = module.normcase(normalized)
    return normalized


def normalize_path(path: os.PathLike[str] | str) -> Path:
    """Normalize *path* regardless of whether it is a string or Path."""
    return Path(normalize_path_string(os.fspath(path)))


def _raise_walk_error(exc: OSError) -> t.NoReturn:
    """Abort a tree walk on the first directory that cannot be listed."""
    raise CorpusReadError(Path(exc.filename), exc) from exc


def _is_regular_file(path: Path) -> bool:
    """Return ``True`` for regular files, like ``find -type f`` (no symlinks)."""
    return not path.is_symlink() and path.is_file()


def iter_files(root: Path, pattern: str | None = None) -> list[Path]:
    """
    Return every regular file below *root*, sorted by path.

    Symbolic links are skipped, whether or not their target exists.

    Parameters
    ----------
    root : Path
        Directory to walk recursively. A missing directory yields no files.
    pattern : str | None, optional
        Shell-style pattern matched against each file *name* (not the full
        path), the way ``find -name`` does. ``None`` keeps every file.

    Returns
    -------
    list[Path]
        Matching files in sorted order.

    Raises
    ------
    CorpusReadError
        If a directory below *root* cannot be listed.
    """
    if not root.is_dir():
        return []

    found: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        base = Path(dirpath)
        found.extend(
            base / name
            for name in filenames
            if (pattern is None or fnmatch.fnmatchcase(name, pattern))
            and _is_regular_file(base / name)
        )
    found.sort()
    return found


def read_text(path: Path) -> str:
    """Read *path* as UTF-8, wrapping I/O failures in :class:`CorpusReadError`.

    Line endings are returned untranslated.
    """
    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise CorpusReadError(path, exc) from exc


def read_lines(path: Path) -> list[str]:
    """Return the newline-separated lines of *path*.

    Only ``\\n`` separates lines; a carriage return stays part of its line.
    """
    lines = read_text(path).split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return lines


def map_paths(
    paths: t.Iterable[Path],
    func: t.Callable[[Path], _T],
    *,
    executor: Executor | None = None,
) -> list[_T]:
    """Apply *func* to every path, on *executor* when one is supplied.

    Results keep the order of *paths*. The first failure is re-raised.
    """
    if executor is None:
        return [func(path) for path in paths]
    return list(executor.map(func, paths))

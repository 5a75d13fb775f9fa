"""The specification corpus and the usage check run against it."""

from __future__ import annotations

import functools
import logging
import os
import re
import typing as t

from ._fs import iter_files, map_paths, read_lines
from .errors import CorpusReadError, CorpusWriteError

if t.TYPE_CHECKING:
    from concurrent.futures import Executor
    from pathlib import Path

_logger = logging.getLogger(__name__)


def ensure_trailing_newline(path: Path) -> bool:
    """Append ``\\n`` to *path* unless it already ends with one.

    Empty files count as missing their newline. Returns ``True`` when the file
    was changed. Calling it twice is a no-op the second time.
    """
    try:
        with path.open("rb") as handle:
            size = handle.seek(0, os.SEEK_END)
            if size:
                handle.seek(-1, os.SEEK_END)
                if handle.read(1) == b"\n":
                    return False
    except OSError as exc:
        raise CorpusReadError(path, exc) from exc

    try:
        with path.open("ab") as handle:
            handle.write(b"\n")
    except OSError as exc:
        raise CorpusWriteError(path, exc) from exc
    _logger.debug("Appended trailing newline to %s", path)
    return True


def normalize_specs(specs_dir: Path, *, executor: Executor | None = None) -> int:
    """Give every file under *specs_dir* a trailing newline.

    Returns the number of files changed. All writes have finished when this
    returns.
    """
    files = iter_files(specs_dir)
    changed = map_paths(files, ensure_trailing_newline, executor=executor)
    _logger.info("Normalized %d of %d spec file(s)", sum(changed), len(files))
    return sum(changed)


@functools.lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as exc:
        _logger.warning("Treating invalid pattern %r as unused: %s", pattern, exc)
        return None


class Corpus:
    """Every line of every file below a specification directory.

    Lines are kept without their ``\\n`` terminators and tested one at a time,
    so ``^`` and ``$`` in a pattern anchor to line boundaries.
    """

    def __init__(self, lines: t.Iterable[str], *, file_count: int = 0) -> None:
        self._lines: tuple[str, ...] = tuple(lines)
        self._file_count = file_count

    @classmethod
    def load(cls, root: Path, *, executor: Executor | None = None) -> Corpus:
        """Read every file under *root*.

        Raises
        ------
        CorpusReadError
            If any file cannot be read.
        """
        files = iter_files(root)
        per_file = map_paths(files, read_lines, executor=executor)
        corpus = cls(
            (line for lines in per_file for line in lines), file_count=len(files)
        )
        _logger.debug(
            "Loaded %d line(s) from %d file(s) under %s",
            len(corpus),
            len(files),
            root,
        )
        return corpus

    def __len__(self) -> int:
        """Return the number of lines in the corpus."""
        return len(self._lines)

    @property
    def file_count(self) -> int:
        """Return the number of files the corpus was read from."""
        return self._file_count

    def contains(self, pattern: str) -> bool:
        """Return ``True`` if any single line matches *pattern*.

        A pattern the regex engine rejects matches nothing.
        """
        compiled = _compile(pattern)
        if compiled is None:
            return False
        return any(compiled.search(line) for line in self._lines)


def is_used(pattern: str, corpus_dir: Path) -> bool:
    """Return ``True`` if *pattern* matches a line of any file in *corpus_dir*.

    This reads the whole corpus on each call; load a :class:`Corpus` once when
    checking many patterns.
    """
    return Corpus.load(corpus_dir).contains(pattern)


__all__ = ["Corpus", "ensure_trailing_newline", "is_used", "normalize_specs"]

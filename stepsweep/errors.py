"""Exception hierarchy for stepsweep."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from pathlib import Path


class StepSweepError(Exception):
    """Base class for stepsweep failures that abort a scan."""


class MissingProjectDirectoryError(StepSweepError):
    """Raised when no project directory was supplied."""

    def __init__(self) -> None:
        super().__init__("Specify project directory")


class ConfigError(StepSweepError, ValueError):
    """Raised when a :class:`~stepsweep.config.ScanConfig` value is invalid."""


class CorpusReadError(StepSweepError):
    """
    Raised when a source or specification file cannot be read.

    Parameters
    ----------
    path : Path
        The file that could not be read.
    cause : OSError
        The underlying I/O error.

    Attributes
    ----------
    path : Path
        The file that could not be read.
    cause : OSError
        The underlying I/O error.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        msg = f"Failed to read {path}: {cause}"
        super().__init__(msg)
        self.path = path
        self.cause = cause


class CorpusWriteError(StepSweepError):
    """Raised when a trailing newline cannot be appended to *path*."""

    def __init__(self, path: Path, cause: OSError) -> None:
        msg = f"Failed to normalize {path}: {cause}"
        super().__init__(msg)
        self.path = path
        self.cause = cause


__all__ = [
    "ConfigError",
    "CorpusReadError",
    "CorpusWriteError",
    "MissingProjectDirectoryError",
    "StepSweepError",
]

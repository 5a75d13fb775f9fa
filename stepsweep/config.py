"""Scan configuration threaded through every stepsweep operation."""

from __future__ import annotations

import dataclasses as dc
import os
import typing as t
from pathlib import Path

from ._fs import normalize_path
from .errors import ConfigError

# Overrides the default worker count when ``max_workers`` is not given.
MAX_WORKERS_ENV: t.Final[str] = "STEPSWEEP_MAX_WORKERS"

DEFAULT_SRC_SUBDIR: t.Final[str] = "src/test/kotlin"
DEFAULT_SPECS_SUBDIR: t.Final[str] = "specs"
DEFAULT_STEP_MARKER: t.Final[str] = "@Step"
DEFAULT_STEP_GLOB: t.Final[str] = "*kt"
DEFAULT_CONCEPT_GLOB: t.Final[str] = "*.cpt"
DEFAULT_MAX_WORKERS: t.Final[int] = 8


@dc.dataclass(frozen=True, slots=True)
class ScanConfig:
    """
    Locations and grammar settings for one scan.

    Attributes
    ----------
    project_dir : Path
        Root of the Gauge project being scanned.
    src_dir : Path
        Directory holding the step definition sources.
    specs_dir : Path
        Directory holding specifications and concepts (the corpus).
    step_marker : str
        Text that opens a step annotation block.
    step_glob : str
        File-name pattern selecting step definition sources.
    concept_glob : str
        File-name pattern selecting concept files inside ``specs_dir``.
    max_workers : int
        Thread count used for file reads and usage checks (must be >= 1).
    verbose : bool
        Whether the command line asked for debug logging.

    Raises
    ------
    ConfigError
        If ``max_workers`` < 1 or a marker or pattern is blank.
    """

    project_dir: Path
    src_dir: Path
    specs_dir: Path
    step_marker: str = DEFAULT_STEP_MARKER
    step_glob: str = DEFAULT_STEP_GLOB
    concept_glob: str = DEFAULT_CONCEPT_GLOB
    max_workers: int = DEFAULT_MAX_WORKERS
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_workers < 1:
            msg = "max_workers must be >= 1"
            raise ConfigError(msg)
        for field in ("step_marker", "step_glob", "concept_glob"):
            if not getattr(self, field).strip():
                msg = f"{field} must not be blank"
                raise ConfigError(msg)

    @classmethod
    def for_project(
        cls,
        project_dir: os.PathLike[str] | str,
        *,
        src_dir: os.PathLike[str] | str | None = None,
        specs_dir: os.PathLike[str] | str | None = None,
        max_workers: int | None = None,
        **overrides: t.Any,  # noqa: ANN401 - forwarded to the dataclass
    ) -> ScanConfig:
        """Build a configuration using the standard Gauge project layout.

        Relative ``src_dir`` and ``specs_dir`` overrides are resolved against
        *project_dir*. ``max_workers`` falls back to ``STEPSWEEP_MAX_WORKERS``
        and then to :data:`DEFAULT_MAX_WORKERS`.
        """
        root = normalize_path(project_dir)
        return cls(
            project_dir=root,
            src_dir=_resolve_subdir(root, src_dir, DEFAULT_SRC_SUBDIR),
            specs_dir=_resolve_subdir(root, specs_dir, DEFAULT_SPECS_SUBDIR),
            max_workers=(
                max_workers if max_workers is not None else _workers_from_env()
            ),
            **overrides,
        )


def _resolve_subdir(
    root: Path, override: os.PathLike[str] | str | None, default: str
) -> Path:
    # An absolute override replaces *root* entirely.
    return normalize_path(root / (default if override is None else override))


def _workers_from_env() -> int:
    """Return the worker count from the environment, or the default."""
    raw = os.getenv(MAX_WORKERS_ENV)
    if not raw:
        return DEFAULT_MAX_WORKERS
    try:
        return int(raw)
    except ValueError:
        msg = f"{MAX_WORKERS_ENV} must be an integer, got {raw!r}"
        raise ConfigError(msg) from None


__all__ = [
    "DEFAULT_CONCEPT_GLOB",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_SPECS_SUBDIR",
    "DEFAULT_SRC_SUBDIR",
    "DEFAULT_STEP_GLOB",
    "DEFAULT_STEP_MARKER",
    "MAX_WORKERS_ENV",
    "ScanConfig",
]

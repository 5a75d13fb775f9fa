"""Find Gauge step definitions and concepts that no specification uses.

Step names are pulled from ``@Step`` annotations in the test sources, concept
names from ``# Heading`` lines in ``.cpt`` files, and each one is looked up as
a ``* step line`` anywhere under the specs directory.
"""

from __future__ import annotations

from .config import MAX_WORKERS_ENV, ScanConfig
from .corpus import Corpus, ensure_trailing_newline, is_used, normalize_specs
from .errors import (
    ConfigError,
    CorpusReadError,
    CorpusWriteError,
    MissingProjectDirectoryError,
    StepSweepError,
)
from .extract import extract_concepts, extract_steps
from .patterns import Declaration, StepGroup, build_pattern
from .report import render, write_report
from .scan import ScanReport, scan

__all__ = [
    "MAX_WORKERS_ENV",
    "ConfigError",
    "Corpus",
    "CorpusReadError",
    "CorpusWriteError",
    "Declaration",
    "MissingProjectDirectoryError",
    "ScanConfig",
    "ScanReport",
    "StepGroup",
    "StepSweepError",
    "build_pattern",
    "ensure_trailing_newline",
    "extract_concepts",
    "extract_steps",
    "is_used",
    "normalize_specs",
    "render",
    "scan",
    "write_report",
]

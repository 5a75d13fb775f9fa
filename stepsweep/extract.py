"""Pull step and concept declarations out of a Gauge project.

Steps come from annotation blocks in the test sources::

    @Step("Login as <user>",
          "Sign in as <user>")
    fun login(user: String) { ... }

Concepts come from ``# Heading`` lines in concept files. Both extractors
work line by line on raw text; nothing is parsed into a syntax tree.
"""

from __future__ import annotations

import logging
import re
import typing as t

from ._fs import iter_files, read_lines
from .patterns import Declaration, StepGroup

if t.TYPE_CHECKING:
    from pathlib import Path

    from .config import ScanConfig

_logger = logging.getLogger(__name__)

BLOCK_END: t.Final[str] = ")"
CONTINUATION: t.Final[str] = ","

_QUOTED_RE: t.Final[re.Pattern[str]] = re.compile(r'"(.*?)"')
_CONCEPT_HEADER_RE: t.Final[re.Pattern[str]] = re.compile(r"^#\s+.*\s*$")


def select_annotation_lines(lines: t.Iterable[str], marker: str) -> t.Iterator[str]:
    """Yield the lines of every annotation block.

    A block opens on a line containing *marker* and closes on the first line
    containing ``)``; a single line may do both.
    """
    in_block = False
    for line in lines:
        if not in_block and marker not in line:
            continue
        yield line
        in_block = BLOCK_END not in line


def join_continuations(lines: t.Iterable[str]) -> t.Iterator[str]:
    """Join lines ending in ``,`` with the line that follows them."""
    pending = ""
    for line in lines:
        if line.endswith(CONTINUATION):
            pending += line
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def quoted_names(line: str) -> list[str]:
    """Return every double-quoted substring of *line*, without the quotes."""
    return _QUOTED_RE.findall(line)


def parse_step_groups(
    lines: t.Iterable[str], marker: str, *, source: Path | None = None
) -> list[StepGroup]:
    """Build one :class:`StepGroup` per logical annotation line.

    Logical lines without quoted names are skipped.
    """
    groups: list[StepGroup] = []
    for logical in join_continuations(select_annotation_lines(lines, marker)):
        names = quoted_names(logical)
        if not names:
            _logger.debug("No quoted step names in %r", logical)
            continue
        groups.append(
            StepGroup(
                declarations=tuple(Declaration.from_name(name) for name in names),
                source=source,
            )
        )
    return groups


def parse_concepts(lines: t.Iterable[str]) -> list[Declaration]:
    """Return a declaration for every ``# Heading`` line."""
    return [
        Declaration.from_name(line.replace("#", "").strip())
        for line in lines
        if _CONCEPT_HEADER_RE.match(line)
    ]


def extract_steps(config: ScanConfig) -> tuple[StepGroup, ...]:
    """Return the step groups declared under ``config.src_dir``."""
    files = iter_files(config.src_dir, config.step_glob)
    if not files:
        _logger.warning(
            "No files matching %s under %s", config.step_glob, config.src_dir
        )
        return ()

    groups: list[StepGroup] = []
    for path in files:
        found = parse_step_groups(read_lines(path), config.step_marker, source=path)
        _logger.debug("Found %d step annotation(s) in %s", len(found), path)
        groups.extend(found)
    return tuple(groups)


def extract_concepts(config: ScanConfig) -> tuple[Declaration, ...]:
    """Return the concepts declared in concept files under ``config.specs_dir``."""
    files = iter_files(config.specs_dir, config.concept_glob)
    if not files:
        _logger.debug(
            "No files matching %s under %s", config.concept_glob, config.specs_dir
        )
        return ()

    concepts: list[Declaration] = []
    for path in files:
        concepts.extend(parse_concepts(read_lines(path)))
    return tuple(concepts)


__all__ = [
    "extract_concepts",
    "extract_steps",
    "join_continuations",
    "parse_concepts",
    "parse_step_groups",
    "quoted_names",
    "select_annotation_lines",
]

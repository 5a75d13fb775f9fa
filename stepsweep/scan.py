"""Run a full scan: normalize, extract, check usage, collect results."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t
from concurrent.futures import ThreadPoolExecutor

from .corpus import Corpus, normalize_specs
from .extract import extract_concepts, extract_steps
from .patterns import Declaration, StepGroup

if t.TYPE_CHECKING:
    from concurrent.futures import Executor

    from .config import ScanConfig

_logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ScanReport:
    """Checked declarations from one scan.

    Attributes
    ----------
    config : ScanConfig
        The configuration the scan ran with.
    steps : tuple[StepGroup, ...]
        Every step group, each alias carrying its ``unused`` flag.
    concepts : tuple[Declaration, ...]
        Every concept, each carrying its ``unused`` flag.
    """

    config: ScanConfig
    steps: tuple[StepGroup, ...]
    concepts: tuple[Declaration, ...]

    @property
    def unused_steps(self) -> tuple[StepGroup, ...]:
        """Return the step groups with at least one unused alias."""
        return tuple(group for group in self.steps if group.unused)

    @property
    def step_name_count(self) -> int:
        """Return the number of step aliases across all groups."""
        return sum(len(group) for group in self.steps)

    @property
    def unused_step_name_count(self) -> int:
        """Return the number of unused step aliases."""
        return sum(len(group.unused_declarations) for group in self.steps)

    @property
    def unused_concepts(self) -> tuple[Declaration, ...]:
        """Return the concepts no spec line refers to."""
        return tuple(concept for concept in self.concepts if concept.unused)

    @property
    def is_clean(self) -> bool:
        """Return ``True`` when every step and concept is referenced."""
        return not self.unused_step_name_count and not self.unused_concepts


def check_declarations(
    declarations: t.Sequence[Declaration],
    corpus: Corpus,
    *,
    executor: Executor | None = None,
) -> tuple[Declaration, ...]:
    """Return copies of *declarations* marked used or unused against *corpus*."""

    def check(declaration: Declaration) -> Declaration:
        return declaration.checked(unused=not corpus.contains(declaration.pattern))

    if executor is None:
        return tuple(check(declaration) for declaration in declarations)
    return tuple(executor.map(check, declarations))


def check_steps(
    groups: t.Sequence[StepGroup],
    corpus: Corpus,
    *,
    executor: Executor | None = None,
) -> tuple[StepGroup, ...]:
    """Return *groups* with every alias checked against *corpus*."""
    flat = [declaration for group in groups for declaration in group]
    checked = iter(check_declarations(flat, corpus, executor=executor))
    return tuple(
        group.with_declarations(next(checked) for _ in range(len(group)))
        for group in groups
    )


def scan(config: ScanConfig) -> ScanReport:
    """Scan the project described by *config*.

    Spec files are normalized before anything is read, so a declaration or
    usage on a file's last line is never missed.

    Raises
    ------
    StepSweepError
        If a file cannot be read or normalized.
    """
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        normalize_specs(config.specs_dir, executor=executor)

        corpus = Corpus.load(config.specs_dir, executor=executor)

        groups = extract_steps(config)
        _logger.info(
            "Checking %d step name(s) in %d step group(s)",
            sum(len(group) for group in groups),
            len(groups),
        )
        steps = check_steps(groups, corpus, executor=executor)

        concepts = extract_concepts(config)
        if concepts:
            _logger.info("Checking %d concept(s)", len(concepts))
            concepts = check_declarations(concepts, corpus, executor=executor)

    for group in steps:
        if group.unused:
            _logger.debug(
                "Unused step name(s) %s declared in %s",
                ", ".join(repr(d.name) for d in group.unused_declarations),
                group.source,
            )
    return ScanReport(config=config, steps=steps, concepts=concepts)


__all__ = [
    "ScanReport",
    "check_declarations",
    "check_steps",
    "scan",
]

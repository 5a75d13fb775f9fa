"""Plain-text rendering of a :class:`~stepsweep.scan.ScanReport`."""

from __future__ import annotations

import sys
import typing as t

if t.TYPE_CHECKING:
    from .config import ScanConfig
    from .scan import ScanReport

RULE: t.Final[str] = "-" * 54
ALL_CLEAN: t.Final[str] = "ALL CLEAN!"


def format_target(config: ScanConfig) -> list[str]:
    """Return the header naming the scanned directories."""
    return [
        RULE,
        f"Target project directory: {config.project_dir}",
        f"Src directory: {config.src_dir}",
        f"Specs directory: {config.specs_dir}",
        RULE,
        "",
    ]


def format_unused_steps(report: ScanReport) -> list[str]:
    """List the unused aliases of every flagged step group."""
    lines = ["Unused step names:"]
    lines.extend(
        f"* {declaration.name}"
        for group in report.unused_steps
        for declaration in group.unused_declarations
    )
    lines.append("")
    return lines


def format_unused_concepts(report: ScanReport) -> list[str]:
    """List every unused concept."""
    lines = ["Unused concepts:"]
    lines.extend(f"# {concept.name}" for concept in report.unused_concepts)
    lines.append("")
    return lines


def format_summary(report: ScanReport) -> list[str]:
    """Return the unused/total counts, plus the all-clean banner if earned."""
    lines = [
        RULE,
        f"Unused steps: {len(report.unused_steps)} / {len(report.steps)}",
        (
            f"Unused step names: {report.unused_step_name_count}"
            f" / {report.step_name_count}"
        ),
        f"Unused concepts: {len(report.unused_concepts)} / {len(report.concepts)}",
    ]
    if report.is_clean:
        lines.append(ALL_CLEAN)
    lines.append(RULE)
    return lines


def render(report: ScanReport, *, include_target: bool = True) -> str:
    """Return the report text, optionally without the target header."""
    lines = [
        *(format_target(report.config) if include_target else []),
        *format_unused_steps(report),
        *format_unused_concepts(report),
        *format_summary(report),
    ]
    return "\n".join(lines) + "\n"


def write_report(
    report: ScanReport,
    stream: t.TextIO | None = None,
    *,
    include_target: bool = True,
) -> None:
    """Write the report to *stream* (standard output by default)."""
    text = render(report, include_target=include_target)
    print(text, end="", file=stream or sys.stdout)


__all__ = [
    "ALL_CLEAN",
    "RULE",
    "format_summary",
    "format_target",
    "format_unused_concepts",
    "format_unused_steps",
    "render",
    "write_report",
]

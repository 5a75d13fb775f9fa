"""Unit tests for the scan driver."""

from __future__ import annotations

import typing as t

import pytest

from stepsweep.corpus import Corpus
from stepsweep.errors import CorpusReadError
from stepsweep.patterns import Declaration, StepGroup
from stepsweep.scan import check_declarations, check_steps, scan
from tests.helpers.project import GaugeProject, kotlin_step

if t.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project(tmp_path: Path) -> GaugeProject:
    """Return an empty Gauge project rooted in a temporary directory."""
    return GaugeProject(tmp_path / "project")


def test_check_declarations_marks_each_declaration() -> None:
    """Every declaration comes back with its usage outcome."""
    corpus = Corpus(["* Login as admin"])
    declarations = [
        Declaration.from_name("Login as <user>"),
        Declaration.from_name("Logout"),
    ]

    checked = check_declarations(declarations, corpus)

    assert [(d.name, d.unused) for d in checked] == [
        ("Login as <user>", False),
        ("Logout", True),
    ]


def test_check_steps_keeps_group_shape() -> None:
    """Checked aliases stay in their original groups and order."""
    corpus = Corpus(["* Sign in", "* Logout"])
    groups = [
        StepGroup((Declaration.from_name("Log in"), Declaration.from_name("Sign in"))),
        StepGroup((Declaration.from_name("Logout"),)),
    ]

    checked = check_steps(groups, corpus)

    assert [group.names for group in checked] == [("Log in", "Sign in"), ("Logout",)]
    assert [[d.unused for d in group] for group in checked] == [
        [True, False],
        [False],
    ]


def test_scan_end_to_end(project: GaugeProject) -> None:
    """One referenced and one dead step are told apart."""
    project.add_spec("login.spec", "* Login as admin")
    project.add_steps(
        "LoginSteps.kt",
        kotlin_step("Login as admin", function="login"),
        kotlin_step("Logout", function="logout"),
    )

    report = scan(project.config(max_workers=2))

    assert [group.names for group in report.unused_steps] == [("Logout",)]
    assert len(report.steps) == 2
    assert report.step_name_count == 2
    assert report.unused_step_name_count == 1
    assert report.concepts == ()
    assert not report.is_clean


def test_scan_normalizes_before_reading(project: GaugeProject) -> None:
    """Spec files end with a newline once the scan has run."""
    spec = project.add_spec("login.spec", "* Login as admin")
    project.add_steps("LoginSteps.kt", kotlin_step("Login as admin"))

    report = scan(project.config())

    assert spec.read_text() == "* Login as admin\n"
    assert report.is_clean


def test_scan_flags_group_with_one_unused_alias(project: GaugeProject) -> None:
    """Only the unreferenced alias of a group is reported."""
    project.add_spec_lines("login.spec", "# Login", "* Sign in as admin")
    project.add_steps(
        "LoginSteps.kt", kotlin_step("Log in as <user>", "Sign in as <user>")
    )

    report = scan(project.config())

    (group,) = report.unused_steps
    assert [d.name for d in group.unused_declarations] == ["Log in as <user>"]
    assert report.unused_step_name_count == 1
    assert report.step_name_count == 2


def test_scan_checks_concepts(project: GaugeProject) -> None:
    """Concepts are used when any spec line invokes them."""
    project.add_spec_lines("checkout.cpt", "# Checkout Flow", "* Pay", "# Refund")
    project.add_spec_lines("checkout.spec", "# Checkout", "* Checkout Flow")

    report = scan(project.config())

    assert [c.name for c in report.concepts] == ["Checkout Flow", "Refund"]
    assert [c.name for c in report.unused_concepts] == ["Refund"]


def test_scan_of_empty_project_is_clean(project: GaugeProject) -> None:
    """No sources and no specs make a clean, empty report."""
    report = scan(project.config())

    assert report.steps == ()
    assert report.concepts == ()
    assert report.is_clean


def test_scan_aborts_on_read_failure(
    project: GaugeProject, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An unreadable spec aborts the scan rather than reading as unused."""
    project.add_spec_lines("login.spec", "* Login as admin")
    project.add_steps("LoginSteps.kt", kotlin_step("Login as admin"))

    def fail(path: Path) -> list[str]:
        raise CorpusReadError(path, PermissionError("denied"))

    monkeypatch.setattr("stepsweep.corpus.read_lines", fail)

    with pytest.raises(CorpusReadError, match="denied"):
        scan(project.config())

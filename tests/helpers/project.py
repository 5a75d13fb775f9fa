"""Builders for throwaway Gauge projects used by unit and behavioural tests."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from stepsweep.config import ScanConfig

if t.TYPE_CHECKING:
    from pathlib import Path


def kotlin_step(*names: str, function: str = "step") -> str:
    """Return a Kotlin step definition declaring *names* as aliases.

    Multiple aliases are wrapped one per line, the way IDE formatting leaves
    long annotations.
    """
    quoted = [f'"{name}"' for name in names]
    if len(quoted) <= 1:
        annotation = f"@Step({''.join(quoted)})"
    else:
        annotation = "@Step(" + ",\n      ".join(quoted) + ")"
    return f"{annotation}\nfun {function}() {{\n}}\n"


@dc.dataclass(slots=True)
class GaugeProject:
    """A Gauge project laid out under ``root``."""

    root: Path

    @property
    def src_dir(self) -> Path:
        """Return the step definition source directory."""
        return self.root / "src" / "test" / "kotlin"

    @property
    def specs_dir(self) -> Path:
        """Return the specification directory."""
        return self.root / "specs"

    def add_steps(self, relative: str, *definitions: str) -> Path:
        """Write a Kotlin source file holding *definitions*."""
        body = "\n".join(definitions)
        return self.write_file(
            self.src_dir / relative,
            f"package steps\n\nclass Steps {{\n{body}}}\n",
        )

    def add_spec(self, relative: str, text: str) -> Path:
        """Write a specification or concept file verbatim."""
        return self.write_file(self.specs_dir / relative, text)

    def add_spec_lines(self, relative: str, *lines: str) -> Path:
        """Write a specification file made of *lines*, newline-terminated."""
        return self.add_spec(relative, "".join(f"{line}\n" for line in lines))

    def config(self, **overrides: t.Any) -> ScanConfig:  # noqa: ANN401 - passthrough
        """Return a scan configuration for this project."""
        return ScanConfig.for_project(self.root, **overrides)

    @staticmethod
    def write_file(path: Path, text: str) -> Path:
        """Write *text* to *path*, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

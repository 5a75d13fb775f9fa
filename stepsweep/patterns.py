"""Declarations and the line patterns used to find their usages."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

if t.TYPE_CHECKING:
    from pathlib import Path

# Shortest ``<...>`` span; ``<a> and <b>`` holds two placeholders, not one.
_PLACEHOLDER_RE: t.Final[re.Pattern[str]] = re.compile(r"<.*?>")

WILDCARD: t.Final[str] = ".+"


def build_pattern(name: str) -> str:
    """Return the regex matching a spec line that invokes *name*.

    Each ``<placeholder>`` becomes :data:`WILDCARD` and the result is anchored
    as a bulleted line: ``* `` followed by the name and optional trailing
    whitespace. Other regex metacharacters in *name* are left unescaped so
    names keep matching the same spec lines they always have.

    Examples
    --------
    >>> build_pattern("Add <a> and <b>")
    '^\\\\*\\\\s+Add .+ and .+\\\\s*$'
    """
    body = _PLACEHOLDER_RE.sub(lambda _match: WILDCARD, name)
    return rf"^\*\s+{body}\s*$"


@dc.dataclass(frozen=True, slots=True)
class Declaration:
    """A step name or concept name together with its usage pattern."""

    name: str
    pattern: str
    unused: bool | None = None

    @classmethod
    def from_name(cls, name: str) -> Declaration:
        """Create an unchecked declaration for *name*."""
        return cls(name=name, pattern=build_pattern(name))

    def checked(self, *, unused: bool) -> Declaration:
        """Return a copy carrying the outcome of a usage check."""
        return dc.replace(self, unused=unused)


@dc.dataclass(frozen=True, slots=True)
class StepGroup:
    """Step names declared by one annotation.

    A single annotation may register several equivalent aliases; they share
    an implementation, so the group is flagged when any alias goes unused.
    """

    declarations: tuple[Declaration, ...]
    source: Path | None = None

    def __iter__(self) -> t.Iterator[Declaration]:
        """Iterate over the aliases in declaration order."""
        return iter(self.declarations)

    def __len__(self) -> int:
        """Return the number of aliases."""
        return len(self.declarations)

    @property
    def names(self) -> tuple[str, ...]:
        """Return the alias names in declaration order."""
        return tuple(declaration.name for declaration in self.declarations)

    @property
    def unused(self) -> bool:
        """Return ``True`` when at least one alias is unused."""
        return any(declaration.unused for declaration in self.declarations)

    @property
    def unused_declarations(self) -> tuple[Declaration, ...]:
        """Return only the aliases found to be unused."""
        return tuple(
            declaration for declaration in self.declarations if declaration.unused
        )

    def with_declarations(self, declarations: t.Iterable[Declaration]) -> StepGroup:
        """Return a copy of the group holding *declarations*."""
        return dc.replace(self, declarations=tuple(declarations))


__all__ = ["WILDCARD", "Declaration", "StepGroup", "build_pattern"]

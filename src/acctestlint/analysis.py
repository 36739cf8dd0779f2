"""Analyzer, Pass and Finding types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .goast.nodes import Position, SourceFile
from .goast.protocol import TypeResolver


@dataclass(frozen=True)
class Finding:
    """A single lint result: where, and what is wrong."""

    pos: Position
    message: str

    def __str__(self) -> str:
        return f"{self.pos}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {**self.pos.to_dict(), "message": self.message}


@dataclass
class Pass:
    """Input to one analyzer run over one compilation unit.

    Attributes:
        file: Root of the unit's syntax tree.
        types: Resolver for expressions in `file`.
        report_fn: Sink receiving each Finding.
    """

    file: SourceFile
    types: TypeResolver
    report_fn: Callable[[Finding], None]

    def report(self, pos: Position, message: str) -> None:
        self.report_fn(Finding(pos=pos, message=message))


@dataclass(frozen=True)
class Analyzer:
    """A named check.

    Attributes:
        name: Identifier used on the command line ("acctestcheckdestroy").
        doc: First line is a one-line summary; the rest is detail.
        run: Called once per compilation unit; reports through the Pass.
    """

    name: str
    doc: str
    run: Callable[[Pass], None]

    @property
    def summary(self) -> str:
        return self.doc.strip().splitlines()[0] if self.doc.strip() else ""


def run_analyzer(
    analyzer: Analyzer, file: SourceFile, types: TypeResolver
) -> list[Finding]:
    """Run `analyzer` on one unit and return its findings in report order."""
    findings: list[Finding] = []
    analyzer.run(Pass(file=file, types=types, report_fn=findings.append))
    return findings

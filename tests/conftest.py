"""Pytest fixtures for acctestlint tests."""

import tempfile
from pathlib import Path

import pytest

from acctestlint.goast.nodes import (
    CompositeLit,
    GenericNode,
    Ident,
    KeyValueExpr,
    NamedType,
    Node,
    Position,
    SelectorExpr,
    SourceFile,
    Type,
)

RESOURCE_PATH = "github.com/hashicorp/terraform/helper/resource"

GO_HEADER = '''package example

import (
\t"testing"

\t"github.com/hashicorp/terraform/helper/resource"
)
'''


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class FakeResolver:
    """TypeResolver answering from a fixed node -> type table."""

    def __init__(self, types: dict[Node, Type] | None = None):
        self.types = dict(types or {})
        self.calls: list[Node] = []

    def type_of(self, expr: Node) -> Type | None:
        self.calls.append(expr)
        return self.types.get(expr)


class TreeBuilder:
    """Builds synthetic trees with increasing positions."""

    def __init__(self, path: str = "example_test.go"):
        self.path = path
        self._line = 0

    def pos(self, column: int = 1) -> Position:
        self._line += 1
        return Position(path=self.path, line=self._line, column=column, offset=self._line * 100)

    def ident(self, name: str) -> Ident:
        return Ident(pos=self.pos(), name=name)

    def selector(self, pkg: str, name: str) -> SelectorExpr:
        start = self.pos(column=5)
        sel = Ident(
            pos=Position(self.path, start.line, start.column + len(pkg) + 1, start.offset + len(pkg) + 1),
            name=name,
        )
        return SelectorExpr(pos=start, x=Ident(pos=start, name=pkg), sel=sel)

    def field(self, name: str, value: Node | None = None) -> KeyValueExpr:
        key = self.ident(name)
        return KeyValueExpr(pos=key.pos, key=key, value=value or self.ident("f"))

    def literal(self, type_expr: Node | None, *elts: Node) -> CompositeLit:
        pos = type_expr.pos if type_expr is not None else self.pos()
        return CompositeLit(pos=pos, type=type_expr, elts=tuple(elts))

    def generic(self, kind: str, *items: Node) -> GenericNode:
        return GenericNode(pos=self.pos(), node_kind=kind, items=tuple(items))

    def file(self, *decls: Node) -> SourceFile:
        return SourceFile(
            pos=Position(self.path, 1, 1, 0), path=self.path, package="example", decls=tuple(decls)
        )


@pytest.fixture
def tree():
    """Synthetic tree builder."""
    return TreeBuilder()


@pytest.fixture
def resolver():
    """Empty fake resolver; tests register types on `resolver.types`."""
    return FakeResolver()


@pytest.fixture
def target_type():
    """The resource.TestCase named type."""
    return NamedType(name="TestCase", module_path=RESOURCE_PATH)


def go_source(body: str, header: str = GO_HEADER) -> str:
    """Wrap Go function bodies in a package/import header."""
    return header + "\n" + body


@pytest.fixture
def write_go(temp_dir):
    """Write a Go file under temp_dir and return its path."""

    def _write(rel_path: str, content: str) -> Path:
        path = temp_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write

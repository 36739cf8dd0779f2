"""Syntax tree and type model for Go source analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Position:
    """A location in a source file.

    Attributes:
        path: File path as given to the parser.
        line: 1-based line number.
        column: 1-based byte column.
        offset: 0-based byte offset from the start of the file.
    """

    path: str
    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "offset": self.offset,
        }


# Node kinds
IDENT = "ident"
SELECTOR_EXPR = "selector_expr"
KEY_VALUE_EXPR = "key_value_expr"
COMPOSITE_LIT = "composite_lit"
SOURCE_FILE = "source_file"


@dataclass(frozen=True, eq=False)
class Node:
    """Base class for syntax nodes.

    Nodes compare by identity: two literals with identical text at
    different places are different construction sites.
    """

    kind: ClassVar[str] = ""

    pos: Position

    def children(self) -> tuple[Node, ...]:
        return ()


@dataclass(frozen=True, eq=False)
class Ident(Node):
    """An identifier: `resource`, `TestCase`, `CheckDestroy`."""

    kind: ClassVar[str] = IDENT

    name: str = ""


@dataclass(frozen=True, eq=False)
class SelectorExpr(Node):
    """A qualified reference `x.sel`, e.g. `resource.TestCase`."""

    kind: ClassVar[str] = SELECTOR_EXPR

    x: Node | None = None
    sel: Ident | None = None

    def children(self) -> tuple[Node, ...]:
        return tuple(n for n in (self.x, self.sel) if n is not None)


@dataclass(frozen=True, eq=False)
class KeyValueExpr(Node):
    """A `key: value` entry inside a composite literal."""

    kind: ClassVar[str] = KEY_VALUE_EXPR

    key: Node | None = None
    value: Node | None = None

    def children(self) -> tuple[Node, ...]:
        return tuple(n for n in (self.key, self.value) if n is not None)


@dataclass(frozen=True, eq=False)
class CompositeLit(Node):
    """A composite literal `T{elts...}`.

    `type` is None for literals whose type is elided, such as the
    elements of `[]resource.TestStep{{...}, {...}}`.
    """

    kind: ClassVar[str] = COMPOSITE_LIT

    type: Node | None = None
    elts: tuple[Node, ...] = ()

    def children(self) -> tuple[Node, ...]:
        if self.type is None:
            return self.elts
        return (self.type,) + self.elts


@dataclass(frozen=True, eq=False)
class GenericNode(Node):
    """Any syntax the analyzers don't look inside by kind.

    `node_kind` carries the front end's own name for it (for example
    "call_expression") so it can still be filtered on.
    """

    node_kind: str = ""
    items: tuple[Node, ...] = ()

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.node_kind

    def children(self) -> tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class ImportSpec:
    """One entry of an import declaration."""

    path: str  # "github.com/hashicorp/terraform/helper/resource"
    name: str | None  # explicit local name, "." or "_"; None when implicit
    pos: Position


@dataclass(frozen=True, eq=False)
class SourceFile(Node):
    """Root of one compilation unit."""

    kind: ClassVar[str] = SOURCE_FILE

    path: str = ""
    package: str | None = None
    imports: tuple[ImportSpec, ...] = ()
    decls: tuple[Node, ...] = ()
    has_parse_error: bool = False

    def children(self) -> tuple[Node, ...]:
        return self.decls


@dataclass(frozen=True)
class NamedType:
    """A declared type.

    Attributes:
        name: Short type name ("TestCase").
        module_path: Import path of the declaring package, or None for
            predeclared names such as `error`.
    """

    name: str
    module_path: str | None = None


@dataclass(frozen=True)
class BasicType:
    """A predeclared basic type such as `int` or `string`."""

    name: str


Type = Union[NamedType, BasicType]

"""Go syntax tree construction using Tree-sitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import tree_sitter
import tree_sitter_go as tsgo

from .nodes import (
    CompositeLit,
    GenericNode,
    Ident,
    ImportSpec,
    KeyValueExpr,
    Node,
    Position,
    SelectorExpr,
    SourceFile,
)

_IDENTIFIER_TYPES = frozenset(
    {"identifier", "type_identifier", "field_identifier", "package_identifier"}
)


class GoParser:
    """Builds SourceFile trees from Go source code.

    Only the syntax the analyzers inspect is converted to dedicated node
    classes:
    - composite_literal -> CompositeLit (literal_value with no type too)
    - qualified_type / selector_expression -> SelectorExpr
    - keyed_element -> KeyValueExpr
    - identifiers -> Ident
    Everything else becomes a GenericNode carrying its Tree-sitter type.
    """

    def __init__(self) -> None:
        self._language = tree_sitter.Language(tsgo.language())
        self._parser = tree_sitter.Parser(self._language)

    def parse(self, source: str, path: str) -> SourceFile:
        """Parse Go source into a SourceFile."""
        source_bytes = source.encode()
        tree = self._parser.parse(source_bytes)
        root = tree.root_node

        package: str | None = None
        imports: list[ImportSpec] = []
        decls: list[Node] = []

        for child in root.named_children:
            if child.type == "package_clause":
                package = self._package_name(child)
            elif child.type == "import_declaration":
                imports.extend(self._extract_imports(child, path))
            decls.append(self._convert(child, path, in_error=root.type == "ERROR"))

        return SourceFile(
            pos=self._position(root, path),
            path=path,
            package=package,
            imports=tuple(imports),
            decls=tuple(decls),
            has_parse_error=root.has_error,
        )

    def _position(self, node: tree_sitter.Node, path: str) -> Position:
        row, column = node.start_point
        return Position(path=path, line=row + 1, column=column + 1, offset=node.start_byte)

    def _node_text(self, node: tree_sitter.Node) -> str:
        return node.text.decode() if node.text else ""

    def _package_name(self, node: tree_sitter.Node) -> str | None:
        for child in node.named_children:
            if child.type == "package_identifier":
                return self._node_text(child)
        return None

    def _extract_imports(
        self, node: tree_sitter.Node, path: str
    ) -> list[ImportSpec]:
        """Extract import specs from an import_declaration.

        Handles:
        - import "fmt"
        - import r "github.com/hashicorp/terraform/helper/resource"
        - import ( ... ) groups, including "." and "_" names
        """
        specs: list[ImportSpec] = []
        for child in node.named_children:
            if child.type == "import_spec":
                spec = self._parse_import_spec(child, path)
                if spec:
                    specs.append(spec)
            elif child.type == "import_spec_list":
                for inner in child.named_children:
                    if inner.type == "import_spec":
                        spec = self._parse_import_spec(inner, path)
                        if spec:
                            specs.append(spec)
        return specs

    def _parse_import_spec(
        self, node: tree_sitter.Node, path: str
    ) -> ImportSpec | None:
        path_node = node.child_by_field_name("path")
        if path_node is None:
            return None
        # Interpreted "..." or raw `...` string; import paths never escape
        import_path = self._node_text(path_node)[1:-1]
        if not import_path:
            return None

        name_node = node.child_by_field_name("name")
        name = self._node_text(name_node) if name_node is not None else None

        return ImportSpec(path=import_path, name=name, pos=self._position(node, path))

    def _convert(
        self, node: tree_sitter.Node, path: str, in_error: bool = False
    ) -> Node:
        """Convert a Tree-sitter node and its named descendants.

        Children are converted before their parent using an explicit
        stack, so nesting depth is bounded only by memory.
        """
        stack = [self._frame(node, path, in_error)]
        while True:
            frame = stack[-1]
            if frame.pending:
                child = frame.pending.pop()
                stack.append(self._frame(child, path, frame.in_error))
                continue

            converted = frame.build(frame.results)
            stack.pop()
            if not stack:
                return converted
            stack[-1].results.append(converted)

    def _frame(self, node: tree_sitter.Node, path: str, in_error: bool) -> _Frame:
        """Decide how `node` is converted: which children, and the builder.

        A composite_literal or literal_value that contains a syntax error,
        or sits inside an ERROR node, stays a GenericNode so no analyzer
        judges its fields.
        """
        in_error = in_error or node.type == "ERROR"
        broken = in_error or node.has_error
        pos = self._position(node, path)

        if node.type == "composite_literal" and not broken:
            return self._composite_literal_frame(node, pos, in_error)
        elif node.type == "literal_value" and not broken:
            # Elided type: inner {...} of []T{{...}}
            return _Frame(
                pending=self._elements(node),
                build=lambda results: CompositeLit(pos=pos, type=None, elts=tuple(results)),
                in_error=in_error,
            )
        elif node.type == "literal_element" and len(node.named_children) == 1:
            return _Frame(
                pending=list(node.named_children),
                build=lambda results: results[0],
                in_error=in_error,
            )
        elif node.type == "keyed_element":
            return self._keyed_element_frame(node, pos, in_error)
        elif node.type == "qualified_type":
            return self._selector_frame(
                node,
                node.child_by_field_name("package"),
                node.child_by_field_name("name"),
                pos,
                in_error,
            )
        elif node.type == "selector_expression":
            return self._selector_frame(
                node,
                node.child_by_field_name("operand"),
                node.child_by_field_name("field"),
                pos,
                in_error,
            )
        elif node.type in _IDENTIFIER_TYPES:
            ident = Ident(pos=pos, name=self._node_text(node))
            return _Frame(pending=[], build=lambda results: ident, in_error=in_error)

        return self._generic_frame(node, pos, in_error)

    def _generic_frame(
        self, node: tree_sitter.Node, pos: Position, in_error: bool
    ) -> _Frame:
        kind = node.type
        return _Frame(
            pending=list(node.named_children),
            build=lambda results: GenericNode(pos=pos, node_kind=kind, items=tuple(results)),
            in_error=in_error,
        )

    def _composite_literal_frame(
        self, node: tree_sitter.Node, pos: Position, in_error: bool
    ) -> _Frame:
        type_node = node.child_by_field_name("type")
        body = node.child_by_field_name("body")
        elements = self._elements(body) if body is not None else []

        if type_node is None:
            return _Frame(
                pending=elements,
                build=lambda results: CompositeLit(pos=pos, type=None, elts=tuple(results)),
                in_error=in_error,
            )
        return _Frame(
            pending=[type_node] + elements,
            build=lambda results: CompositeLit(
                pos=pos, type=results[0], elts=tuple(results[1:])
            ),
            in_error=in_error,
        )

    def _elements(self, body: tree_sitter.Node) -> list[tree_sitter.Node]:
        """Entries of a literal_value, skipping comments."""
        return [child for child in body.named_children if child.type != "comment"]

    def _keyed_element_frame(
        self, node: tree_sitter.Node, pos: Position, in_error: bool
    ) -> _Frame:
        """Convert `key: value`.

        Newer grammars expose `key`/`value` fields holding literal_element
        wrappers; older ones put a field_identifier or expression first.
        """
        parts = [c for c in node.named_children if c.type != "comment"]
        key = node.child_by_field_name("key")
        value = node.child_by_field_name("value")
        if key is None and parts:
            key = parts[0]
        if value is None and len(parts) > 1:
            value = parts[-1]

        def build(results: list[Node]) -> Node:
            remaining = list(results)
            converted_key = remaining.pop(0) if key is not None else None
            converted_value = remaining.pop(0) if value is not None else None
            return KeyValueExpr(pos=pos, key=converted_key, value=converted_value)

        return _Frame(
            pending=[n for n in (key, value) if n is not None],
            build=build,
            in_error=in_error,
        )

    def _selector_frame(
        self,
        node: tree_sitter.Node,
        operand: tree_sitter.Node | None,
        field_node: tree_sitter.Node | None,
        pos: Position,
        in_error: bool,
    ) -> _Frame:
        if field_node is None or field_node.type not in _IDENTIFIER_TYPES:
            # Malformed selector (parse error); keep it opaque
            return self._generic_frame(node, pos, in_error)

        def build(results: list[Node]) -> Node:
            sel = results[-1]
            x = results[0] if operand is not None else None
            return SelectorExpr(pos=pos, x=x, sel=sel if isinstance(sel, Ident) else None)

        return _Frame(
            pending=[n for n in (operand, field_node) if n is not None],
            build=build,
            in_error=in_error,
        )


@dataclass
class _Frame:
    """One node awaiting conversion on GoParser._convert's stack.

    `pending` holds unconverted children in reverse order (next child
    last); `build` receives their converted forms in source order.
    """

    pending: list[tree_sitter.Node]
    build: Callable[[list[Node]], Node]
    in_error: bool
    results: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.pending.reverse()

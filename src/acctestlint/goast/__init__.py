"""Go syntax trees and type resolution for acctestlint."""

from .inspector import preorder
from .nodes import (
    BasicType,
    CompositeLit,
    GenericNode,
    Ident,
    ImportSpec,
    KeyValueExpr,
    NamedType,
    Node,
    Position,
    SelectorExpr,
    SourceFile,
    Type,
)
from .parser import GoParser
from .protocol import TreeProvider, TypeResolver
from .resolver import ImportResolver, default_package_name

__all__ = [
    # Syntax nodes
    "Node",
    "Ident",
    "SelectorExpr",
    "KeyValueExpr",
    "CompositeLit",
    "GenericNode",
    "SourceFile",
    "ImportSpec",
    "Position",
    # Types
    "NamedType",
    "BasicType",
    "Type",
    # Front end
    "GoParser",
    "ImportResolver",
    "default_package_name",
    "TreeProvider",
    "TypeResolver",
    # Traversal
    "preorder",
]

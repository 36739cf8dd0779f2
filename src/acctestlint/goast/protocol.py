"""Protocol definitions for the Go front end."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .nodes import Node, SourceFile, Type


class TreeProvider(Protocol):
    """Builds the syntax tree of one compilation unit.

    Implementations turn source text into a read-only SourceFile. They
    must always return a tree; syntax errors are recorded on
    SourceFile.has_parse_error rather than raised.
    """

    def parse(self, source: str, path: str) -> SourceFile:
        """Parse a single file.

        Args:
            source: The complete source code content.
            path: File path (used in node positions).

        Returns:
            The root node of the file.
        """
        ...


class TypeResolver(Protocol):
    """Maps expressions to their static types."""

    def type_of(self, expr: Node) -> Type | None:
        """Return the static type of `expr`.

        Args:
            expr: Any expression node from the tree the resolver was
                built for.

        Returns:
            The resolved type, or None when it can't be determined.
        """
        ...

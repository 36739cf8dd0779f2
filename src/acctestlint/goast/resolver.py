"""Import-based type resolution for Go files."""

from __future__ import annotations

import re

from .nodes import Ident, NamedType, Node, SelectorExpr, SourceFile, Type

_MAJOR_VERSION = re.compile(r"^v[0-9]+$")
_GOPKG_VERSION = re.compile(r"^(?P<name>.+)\.v[0-9]+$")


def default_package_name(import_path: str) -> str:
    """Guess the package name an import binds when it has no explicit name.

    - "github.com/hashicorp/terraform/helper/resource" -> "resource"
    - "github.com/hashicorp/go-azure-sdk/v2" -> "go-azure-sdk"
    - "gopkg.in/yaml.v2" -> "yaml"
    """
    parts = [p for p in import_path.split("/") if p]
    if not parts:
        return ""
    name = parts[-1]
    if _MAJOR_VERSION.match(name) and len(parts) > 1:
        name = parts[-2]
    match = _GOPKG_VERSION.match(name)
    if match:
        name = match.group("name")
    return name


class ImportResolver:
    """Resolves qualified type references through a file's imports.

    Only `pkg.Name` selectors whose `pkg` is bound by an import resolve;
    everything else is reported as unknown. Blank ("_") and dot (".")
    imports bind no name.
    """

    def __init__(self, bindings: dict[str, str]) -> None:
        self._bindings = dict(bindings)

    @classmethod
    def for_file(cls, source_file: SourceFile) -> ImportResolver:
        """Build a resolver from the imports of `source_file`."""
        bindings: dict[str, str] = {}
        for spec in source_file.imports:
            if spec.name in ("_", "."):
                continue
            local = spec.name or default_package_name(spec.path)
            if local:
                bindings[local] = spec.path
        return cls(bindings)

    @property
    def bindings(self) -> dict[str, str]:
        """Local package name -> import path."""
        return dict(self._bindings)

    def type_of(self, expr: Node) -> Type | None:
        if not isinstance(expr, SelectorExpr):
            return None
        if not isinstance(expr.x, Ident) or expr.sel is None:
            return None
        module_path = self._bindings.get(expr.x.name)
        if module_path is None:
            return None
        return NamedType(name=expr.sel.name, module_path=module_path)

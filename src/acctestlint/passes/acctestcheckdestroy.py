"""Analyzer reporting resource.TestCase literals without CheckDestroy."""

from __future__ import annotations

from ..analysis import Analyzer, Pass
from ..errors import InvariantViolationError
from ..goast.inspector import preorder
from ..goast.nodes import (
    COMPOSITE_LIT,
    CompositeLit,
    Ident,
    KeyValueExpr,
    NamedType,
    Position,
    SelectorExpr,
)

DOC = """check for TestCase missing CheckDestroy

The acctestcheckdestroy analyzer reports likely incorrect uses of TestCase
which do not define a CheckDestroy function. CheckDestroy is used to verify
that test infrastructure has been removed at the end of an acceptance test.

More information can be found at:
https://www.terraform.io/docs/extend/testing/acceptance-tests/testcase.html#checkdestroy"""

TEST_CASE_TYPE_NAME = "TestCase"
RESOURCE_PACKAGE_PATH = "github.com/hashicorp/terraform/helper/resource"
CHECK_DESTROY_FIELD = "CheckDestroy"
MESSAGE = "missing CheckDestroy"


def has_path_suffix(module_path: str | None, suffix: str) -> bool:
    """Report whether `module_path` names the package `suffix`.

    Matches on suffix so the package is still recognized when it is
    reached through a vendor directory, e.g.
    "example.com/provider/vendor/github.com/hashicorp/terraform/helper/resource".
    """
    if not module_path:
        return False
    return module_path.endswith(suffix)


def is_resource_test_case(pass_: Pass, lit: CompositeLit) -> bool:
    """Report whether `lit` constructs resource.TestCase.

    Anything that can't be positively identified is a non-match.
    """
    type_expr = lit.type
    if not isinstance(type_expr, SelectorExpr):
        return False

    resolved = pass_.types.type_of(type_expr)
    if not isinstance(resolved, NamedType):
        return False
    if resolved.name != TEST_CASE_TYPE_NAME:
        return False
    return has_path_suffix(resolved.module_path, RESOURCE_PACKAGE_PATH)


def resource_test_cases(pass_: Pass) -> list[CompositeLit]:
    """Return all resource.TestCase literals in the file, in source order."""
    result: list[CompositeLit] = []
    for node in preorder(pass_.file, [COMPOSITE_LIT]):
        if isinstance(node, CompositeLit) and is_resource_test_case(pass_, node):
            result.append(node)
    return result


def has_check_destroy(lit: CompositeLit) -> bool:
    """Report whether the literal sets CheckDestroy (to anything)."""
    for elt in lit.elts:
        if not isinstance(elt, KeyValueExpr):
            continue
        if isinstance(elt.key, Ident) and elt.key.name == CHECK_DESTROY_FIELD:
            return True
    return False


def report_position(lit: CompositeLit) -> Position:
    """Position of the type name token: `TestCase` in `resource.TestCase{`."""
    type_expr = lit.type
    if not isinstance(type_expr, SelectorExpr) or type_expr.sel is None:
        raise InvariantViolationError(
            node_kind=type_expr.kind if type_expr is not None else "none",
            expected="qualified type reference",
        )
    return type_expr.sel.pos


def run(pass_: Pass) -> None:
    for lit in resource_test_cases(pass_):
        if not has_check_destroy(lit):
            pass_.report(report_position(lit), MESSAGE)


ANALYZER = Analyzer(name="acctestcheckdestroy", doc=DOC, run=run)

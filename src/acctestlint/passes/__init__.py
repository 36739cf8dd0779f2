"""Built-in analyzers."""

from . import acctestcheckdestroy

BUILTIN_ANALYZERS = [
    acctestcheckdestroy.ANALYZER,
]

__all__ = ["BUILTIN_ANALYZERS", "acctestcheckdestroy"]

"""Registry for analyzers."""

from __future__ import annotations

from .analysis import Analyzer
from .errors import AnalyzerNotFoundError
from .passes import BUILTIN_ANALYZERS

# Global registry state
_analyzers: dict[str, Analyzer] = {}


def register_analyzer(analyzer: Analyzer) -> None:
    """Register an analyzer under its name, replacing any previous one."""
    _analyzers[analyzer.name] = analyzer


def get_analyzer(name: str) -> Analyzer:
    """Get an analyzer by name.

    Raises:
        AnalyzerNotFoundError: If no analyzer has that name.
    """
    if name not in _analyzers:
        raise AnalyzerNotFoundError(name, supported_analyzers())
    return _analyzers[name]


def supported_analyzers() -> list[str]:
    """Get sorted list of registered analyzer names."""
    return sorted(_analyzers.keys())


def all_analyzers() -> list[Analyzer]:
    """Get registered analyzers, sorted by name."""
    return [_analyzers[name] for name in supported_analyzers()]


def clear_registry() -> None:
    """Clear the registry. Mainly for testing."""
    _analyzers.clear()


def register_builtins() -> None:
    """Register the analyzers shipped with acctestlint."""
    for analyzer in BUILTIN_ANALYZERS:
        register_analyzer(analyzer)


register_builtins()

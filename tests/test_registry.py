"""Tests for the analyzer registry."""

import pytest

from acctestlint.analysis import Analyzer
from acctestlint.errors import AnalyzerNotFoundError
from acctestlint.passes import acctestcheckdestroy
from acctestlint.registry import (
    all_analyzers,
    clear_registry,
    get_analyzer,
    register_analyzer,
    register_builtins,
    supported_analyzers,
)


@pytest.fixture
def clean_registry():
    clear_registry()
    yield
    clear_registry()
    register_builtins()


class TestRegistry:
    def test_builtin_registered(self):
        assert "acctestcheckdestroy" in supported_analyzers()
        assert get_analyzer("acctestcheckdestroy") is acctestcheckdestroy.ANALYZER

    def test_unknown_analyzer(self):
        with pytest.raises(AnalyzerNotFoundError) as exc_info:
            get_analyzer("nope")
        assert "acctestcheckdestroy" in str(exc_info.value)

    def test_register_and_list(self, clean_registry):
        register_analyzer(Analyzer(name="zeta", doc="z", run=lambda p: None))
        register_analyzer(Analyzer(name="alpha", doc="a", run=lambda p: None))

        assert supported_analyzers() == ["alpha", "zeta"]
        assert [a.name for a in all_analyzers()] == ["alpha", "zeta"]

    def test_summary_is_first_doc_line(self):
        assert acctestcheckdestroy.ANALYZER.summary == "check for TestCase missing CheckDestroy"

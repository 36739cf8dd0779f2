"""Tests for recognizing resource.TestCase literals."""

import pytest

from acctestlint.analysis import Pass
from acctestlint.goast.nodes import BasicType, NamedType
from acctestlint.passes.acctestcheckdestroy import (
    RESOURCE_PACKAGE_PATH,
    has_path_suffix,
    is_resource_test_case,
)

from .conftest import RESOURCE_PATH


def make_pass(tree, resolver):
    return Pass(file=tree.file(), types=resolver, report_fn=lambda finding: None)


class TestHasPathSuffix:
    def test_exact_path(self):
        assert has_path_suffix(RESOURCE_PATH, RESOURCE_PACKAGE_PATH)

    def test_vendored_path(self):
        vendored = "github.com/terraform-providers/terraform-provider-aws/vendor/" + RESOURCE_PATH
        assert has_path_suffix(vendored, RESOURCE_PACKAGE_PATH)

    def test_unrelated_path(self):
        assert not has_path_suffix("example.com/testing/resource", RESOURCE_PACKAGE_PATH)

    def test_plugin_sdk_path_is_not_terraform(self):
        path = "github.com/hashicorp/terraform-plugin-sdk/helper/resource"
        assert not has_path_suffix(path, RESOURCE_PACKAGE_PATH)

    @pytest.mark.parametrize("path", [None, ""])
    def test_missing_path(self, path):
        assert not has_path_suffix(path, RESOURCE_PACKAGE_PATH)


class TestIsResourceTestCase:
    def test_matches_target_type(self, tree, resolver, target_type):
        type_expr = tree.selector("resource", "TestCase")
        resolver.types[type_expr] = target_type

        assert is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_matches_vendored_type(self, tree, resolver):
        type_expr = tree.selector("resource", "TestCase")
        resolver.types[type_expr] = NamedType("TestCase", "example.com/p/vendor/" + RESOURCE_PATH)

        assert is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_wrong_package_path(self, tree, resolver):
        type_expr = tree.selector("other", "TestCase")
        resolver.types[type_expr] = NamedType("TestCase", "example.com/other")

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_wrong_type_name(self, tree, resolver):
        type_expr = tree.selector("resource", "TestStep")
        resolver.types[type_expr] = NamedType("TestStep", RESOURCE_PATH)

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_unqualified_type_is_not_matched(self, tree, resolver, target_type):
        # Even if the resolver claims it is the target, a bare identifier
        # is not a qualified reference.
        type_expr = tree.ident("TestCase")
        resolver.types[type_expr] = target_type

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))
        assert resolver.calls == []

    def test_elided_type_is_not_matched(self, tree, resolver):
        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(None))

    def test_unresolved_type(self, tree, resolver):
        type_expr = tree.selector("resource", "TestCase")

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_basic_type(self, tree, resolver):
        type_expr = tree.selector("resource", "TestCase")
        resolver.types[type_expr] = BasicType("int")

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_named_type_without_package(self, tree, resolver):
        type_expr = tree.selector("resource", "TestCase")
        resolver.types[type_expr] = NamedType("TestCase", None)

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

    def test_unknown_type_object(self, tree, resolver):
        type_expr = tree.selector("resource", "TestCase")
        resolver.types[type_expr] = ("TestCase", RESOURCE_PATH)

        assert not is_resource_test_case(make_pass(tree, resolver), tree.literal(type_expr))

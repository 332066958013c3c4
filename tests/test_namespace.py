"""Tests for namespaces: the add protocol, merging and body rendering."""

import logging

import pytest

from rbidsl import (
    ClassNamespace,
    Constant,
    Extend,
    Include,
    Method,
    ModuleNamespace,
    Namespace,
    Options,
    Parameter,
)


class TestAddProtocol:
    def test_distinct_nodes_are_appended(self) -> None:
        ns = Namespace()
        a = ns.create_include("A")
        b = ns.create_include("B")
        assert ns.children == [a, b]

    def test_equal_includes_are_both_kept(self, options: Options) -> None:
        ns = ModuleNamespace("M")
        first = ns.create_include("Foo")
        second = ns.create_include("Foo")
        assert len(ns.children) == 2
        assert ns.children[0] is first
        assert ns.children[1] is second
        assert ns.generate_lines(0, options) == [
            "module M",
            "  include Foo",
            "  include Foo",
            "end",
        ]

    def test_equal_mergeable_nodes_are_folded(self) -> None:
        ns = Namespace()
        ns.create_include("Before")
        first = ns.create_method("foo", [Parameter("x")], "String")
        ns.create_include("After")
        second = ns.create_method("foo", [Parameter("x")], "String")

        methods = [c for c in ns.children if isinstance(c, Method)]
        assert len(methods) == 1
        assert methods[0] is second
        assert not any(c is first for c in ns.children)
        # the new node takes the first duplicate's place
        assert ns.children[1] is second

    def test_unequal_same_name_nodes_are_kept(self) -> None:
        ns = Namespace()
        ns.create_constant("A", "1")
        ns.create_constant("A", "2")
        assert len(ns.constants) == 2

    def test_add_rejects_non_nodes(self) -> None:
        with pytest.raises(TypeError):
            Namespace().add("include Foo")  # type: ignore[arg-type]

    def test_add_logs_decisions(self, caplog: pytest.LogCaptureFixture) -> None:
        ns = Namespace()
        with caplog.at_level(logging.DEBUG, logger="rbidsl.rbi.namespace"):
            ns.create_include("Foo")
            ns.create_include("Foo")
        assert "keeping Include (Foo)" in caplog.text

    def test_remove_is_by_identity(self) -> None:
        ns = Namespace()
        ns.create_include("Foo")
        second = ns.create_include("Foo")
        ns.remove(second)
        assert len(ns.children) == 1
        assert ns.children[0] is not second


class TestBuilders:
    def test_configure_runs_before_add(self, options: Options) -> None:
        root = Namespace()
        mod = root.create_module("Foo", configure=lambda m: m.create_include("Bar"))
        assert mod.includes == [Include("Bar")]
        assert root.children == [mod]

    def test_path_creates_and_reuses_modules(self) -> None:
        root = Namespace()
        inner = root.path("A", "B")
        assert root.path("A", "B") is inner
        assert inner.name == "B"
        assert len(root.children) == 1

    def test_multiple_includes_and_extends(self) -> None:
        ns = Namespace()
        ns.create_includes(["A", "B"])
        ns.create_extends(["C"])
        assert [i.target for i in ns.includes] == ["A", "B"]
        assert [e.target for e in ns.extends] == ["C"]

    def test_attribute_builders(self, options: Options) -> None:
        ns = Namespace()
        ns.create_attr_reader("a", "String")
        ns.create_attr_writer("b", "String")
        ns.create_attr_accessor("c", "String")
        lines = ns.generate_lines(0, options)
        assert "attr_reader :a" in lines
        assert "attr_writer :b" in lines
        assert "attr_accessor :c" in lines


class TestMerging:
    def test_modules_with_same_name_are_mergeable(self) -> None:
        a = ModuleNamespace("Foo")
        assert a.is_mergeable_with([ModuleNamespace("Foo")])
        assert not a.is_mergeable_with([ModuleNamespace("Bar")])
        assert not a.is_mergeable_with([ModuleNamespace("Foo", interface=True)])
        assert not a.is_mergeable_with([ClassNamespace("Foo")])

    def test_merge_absorbs_children(self) -> None:
        a = ModuleNamespace("Foo")
        a.create_include("A")
        a.add_comment("first")
        b = ModuleNamespace("Foo")
        b.create_include("A")
        b.create_include("B")
        b.add_comment("second")

        a.merge([b])
        assert [i.target for i in a.includes] == ["A", "B"]
        assert a.comments == ["first", "second"]

    def test_merge_recurses_into_namespaces(self) -> None:
        a = ModuleNamespace("Outer")
        a.create_module("Inner").create_method("x")
        b = ModuleNamespace("Outer")
        b.create_module("Inner").create_method("y")

        a.merge([b])
        assert len(a.namespaces) == 1
        assert sorted(m.name for m in a.namespaces[0].children) == ["x", "y"]

    def test_classes_merge_superclass(self) -> None:
        a = ClassNamespace("Foo")
        b = ClassNamespace("Foo", superclass="Bar")
        assert a.is_mergeable_with([b])
        a.merge([b])
        assert a.superclass == "Bar"

    def test_conflicting_superclasses(self) -> None:
        a = ClassNamespace("Foo", superclass="A")
        assert not a.is_mergeable_with([ClassNamespace("Foo", superclass="B")])
        assert not a.is_mergeable_with([ClassNamespace("Foo", abstract=True)])


class TestRendering:
    def test_empty_namespaces(self, options: Options) -> None:
        assert ModuleNamespace("Foo").generate_lines(0, options) == ["module Foo; end"]
        assert ClassNamespace("Foo", superclass="Bar").generate_lines(0, options) == [
            "class Foo < Bar; end"
        ]

    def test_body_groups(self, options: Options) -> None:
        cls = ClassNamespace("Foo", superclass="Bar", abstract=True)
        cls.create_method("run", return_type="Integer", abstract=True)
        cls.create_constant("A", "1")
        cls.create_extend("T::Sig")
        cls.create_include("Comparable")
        cls.create_include("Enumerable")
        cls.create_class("Nested")

        assert cls.generate_lines(0, options) == [
            "class Foo < Bar",
            "  abstract!",
            "",
            "  include Comparable",
            "  include Enumerable",
            "",
            "  extend T::Sig",
            "",
            "  A = 1",
            "",
            "  sig { abstract.returns(Integer) }",
            "  def run; end",
            "",
            "  class Nested; end",
            "end",
        ]

    def test_interface_module(self, options: Options) -> None:
        mod = ModuleNamespace("I", interface=True, sealed=True)
        mod.create_method("call", abstract=True)
        assert mod.generate_lines(0, options) == [
            "module I",
            "  interface!",
            "  sealed!",
            "",
            "  sig { abstract.void }",
            "  def call; end",
            "end",
        ]

    def test_nested_indentation(self, options: Options) -> None:
        root = Namespace()
        root.path("A", "B").add(Include("C"))
        assert root.generate_lines(0, options) == [
            "module A",
            "  module B",
            "    include C",
            "  end",
            "end",
        ]

    def test_sort_namespaces(self) -> None:
        root = Namespace()
        root.create_module("Zed")
        root.create_method("first")
        root.create_module("Alpha")
        lines = root.generate_lines(0, Options(sort_namespaces=True))
        assert lines == [
            "module Alpha; end",
            "",
            "sig { void }",
            "def first; end",
            "",
            "module Zed; end",
        ]

    def test_comments_precede_header(self, options: Options) -> None:
        mod = ModuleNamespace("Foo").add_comment("Docs")
        assert mod.generate_lines(0, options) == ["# Docs", "module Foo; end"]

    def test_mutation_after_render_is_reflected(self, options: Options) -> None:
        mod = ModuleNamespace("Foo")
        assert mod.generate_lines(0, options) == ["module Foo; end"]
        mod.add(Extend("Bar"))
        assert mod.generate_lines(0, options) == ["module Foo", "  extend Bar", "end"]

    def test_describe(self) -> None:
        assert Namespace().describe() == "Namespace (<root>)"
        assert ModuleNamespace("M").describe() == "Module (M)"
        assert ClassNamespace("C", superclass="B").describe() == "Class (C < B)"

    def test_equality(self) -> None:
        a = ModuleNamespace("M")
        a.add(Constant("X", "1"))
        b = ModuleNamespace("M")
        b.add(Constant("X", "1"))
        assert a == b
        b.add(Include("Y"))
        assert a != b


class TestFoldedComments:
    def test_folded_constant_keeps_comments(self, options: Options) -> None:
        ns = Namespace()
        ns.add(Constant("A", "1").add_comment("first"))
        ns.add(Constant("A", "1"))
        assert ns.generate_lines(0, options) == ["# first", "A = 1"]

    def test_folded_method_keeps_comments_once(self) -> None:
        ns = Namespace()
        ns.add(Method("m").add_comment("shared"))
        folded = ns.add(Method("m").add_comment(["shared", "extra"]))
        assert ns.children == [folded]
        assert folded.comments == ["shared", "extra"]

    def test_raw_merge_skips_non_namespaces(self) -> None:
        mod = ModuleNamespace("Foo")
        mod.merge_into_self([Constant("Foo", "1").add_comment("note")])
        assert mod.children == []
        assert mod.comments == ["note"]

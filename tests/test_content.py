"""Tests for the generic rendering layer: lines, content nodes and containers."""

from rbidsl import (
    BlankLineNode,
    CommentNode,
    DelimitedNodeBlock,
    IndentedNode,
    Line,
    NodeBlock,
    NodeStack,
    Options,
    SimpleNodeStack,
    TextNode,
    WordlistNode,
    nullNode,
)


class TestLine:
    def test_blank_line_has_no_indentation(self, options: Options) -> None:
        assert Line(3, "").format(options) == ""

    def test_value_goes_through_options(self, options: Options) -> None:
        assert Line(1, "x").format(options) == "  x"


class TestContent:
    def test_text_node_lines(self, options: Options) -> None:
        assert TextNode("a", "b").generate_lines(1, options) == ["  a", "  b"]

    def test_wordlist_joins_words(self, options: Options) -> None:
        assert WordlistNode("include", "Foo").generate_lines(0, options) == ["include Foo"]
        assert WordlistNode("a", "b", sep=",").generate_lines(0, options) == ["a,b"]

    def test_wordlist_append_is_fluent(self, options: Options) -> None:
        node = WordlistNode("extend").append("Bar")
        assert node.generate_lines(0, options) == ["extend Bar"]

    def test_blank_lines(self, options: Options) -> None:
        assert BlankLineNode(2).generate_lines(4, options) == ["", ""]
        assert BlankLineNode(-1).count == 0

    def test_comment_node(self, options: Options) -> None:
        assert CommentNode("hi", "").generate_lines(0, options) == ["# hi", "#"]

    def test_null_node_is_singleton_and_empty(self, options: Options) -> None:
        assert type(nullNode)() is nullNode
        assert nullNode.generate_lines(0, options) == []


class TestContainers:
    def test_simple_stack_concatenates(self, options: Options) -> None:
        stack = SimpleNodeStack(TextNode("a"), TextNode("b"))
        assert stack.generate_lines(0, options) == ["a", "b"]

    def test_stack_margin_between_children(self, options: Options) -> None:
        stack = NodeStack(TextNode("a"), TextNode("b"), TextNode("c"), margin=BlankLineNode())
        assert stack.generate_lines(0, options) == ["a", "", "b", "", "c"]

    def test_stack_skips_empty_containers(self, options: Options) -> None:
        stack = NodeStack(TextNode("a"), SimpleNodeStack(), TextNode("b"), margin=BlankLineNode())
        assert stack.generate_lines(0, options) == ["a", "", "b"]
        assert NodeStack(SimpleNodeStack(), margin=BlankLineNode()).empty()

    def test_indented_node(self, options: Options) -> None:
        assert IndentedNode(TextNode("x"), 2).generate_lines(1, options) == ["      x"]

    def test_block_indents_children(self, options: Options) -> None:
        block = NodeBlock(TextNode("begin"), TextNode("a"), TextNode("b"))
        assert block.generate_lines(0, options) == ["begin", "  a", "  b"]

    def test_delimited_block(self, options: Options) -> None:
        block = DelimitedNodeBlock(
            TextNode("module Foo"),
            TextNode("end"),
            TextNode("a"),
            TextNode("b"),
            margin=BlankLineNode(),
        )
        assert block.generate_lines(1, options) == [
            "  module Foo",
            "    a",
            "",
            "    b",
            "  end",
        ]

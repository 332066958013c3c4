from typing import TYPE_CHECKING, Iterator

from rbidsl.node import IterableNode, Line, ListNode

if TYPE_CHECKING:
    from rbidsl.options import Options


class LinesNode(IterableNode[str]):
    """
    Base class for content nodes that render in terms of lines.
    Subclasses iterate raw strings without indentation.
    """

    def render(self, level: int, options: "Options") -> Iterator[Line]:
        for value in self:
            yield Line(level, value)

class WordsNode(IterableNode[str]):
    """
    Base class for nodes expressed as words.

    All words are joined into a single line using sep.
    """

    def __init__(self, sep: str = " ") -> None:
        super().__init__()
        self._sep = sep

    @property
    def sep(self) -> str:
        return self._sep

    def render(self, level: int, options: "Options") -> Iterator[Line]:
        yield Line(level, self.sep.join(self))

class BlankLineNode(LinesNode):
    """Vertical space: N empty lines."""

    def __init__(self, lines: int = 1) -> None:
        super().__init__()
        self._count = max(0, int(lines))

    @property
    def count(self) -> int:
        """Number of blank lines."""
        return self._count

    def __iter__(self) -> Iterator[str]:
        for _ in range(self.count):
            yield ""

class TextNode(ListNode[str], LinesNode):
    """
    Relative text node.
    Indentation level comes from render(level).
    """
    pass

class CommentNode(TextNode):
    """One '# text' line per comment, a bare '#' for empty ones."""

    def __init__(self, *comments: str) -> None:
        super().__init__(*(f"# {c}" if c else "#" for c in comments))

class WordlistNode(ListNode[str], WordsNode):
    """
    Basic concrete WordsNode backed by a list of words.

      WordlistNode("include", "Foo") -> "include Foo"
    """

    def __init__(self, *words: str, sep: str = " ") -> None:
        ListNode.__init__(self, *words)
        self._sep = sep

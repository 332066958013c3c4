from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from rbidsl.node import IterableNode, Line, ListNode, Node, nullNode

if TYPE_CHECKING:
    from rbidsl.options import Options

TChild = TypeVar("TChild", bound=Node)
TBegin = TypeVar("TBegin", bound=Node)
TEnd = TypeVar("TEnd", bound=Node)


class ContainerNode(IterableNode[TChild]):
    """
    Base class for containers of child nodes.
    Rendering is the concatenation of the children's lines, in order.
    """

    def empty(self) -> bool:
        return next(iter(self), None) is None

    def render(self, level: int, options: "Options") -> Iterator[Line]:
        for child in self:
            yield from child.render(level, options)

class SingleContainerNode(ContainerNode[TChild]):
    def __init__(self, child: TChild):
        ContainerNode.__init__(self)
        self._child = child

    @property
    def child(self) -> TChild:
        return self._child

    def __iter__(self) -> Iterator[TChild]:
        yield self.child

class IndentedNode(SingleContainerNode[TChild]):
    def __init__(self, child: TChild, level: int = 1):
        super().__init__(child)
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    def render(self, level: int, options: "Options") -> Iterator[Line]:
        yield from self.child.render(level + self.level, options)

class SimpleNodeStack(ListNode[TChild], ContainerNode[TChild]):
    pass

class NodeStack(SimpleNodeStack[TChild]):
    """
    Vertical container with an optional margin node between children.

      margin=nullNode -> c0, c1, c2
      margin=X        -> c0, X, c1, X, c2

    Empty children (containers that would render nothing) do not get a margin.
    """

    def __init__(
        self,
        *children: TChild,
        margin: Node = nullNode,
    ):
        super().__init__(*children)
        self._margin: Node = margin

    @property
    def margin(self) -> Node:
        return self._margin

    def inner(self) -> Iterator[Node]:
        for child in SimpleNodeStack.__iter__(self):
            if isinstance(child, ContainerNode) and child.empty():
                continue
            yield child

    def iter_with_margin(self, *nodes: Node) -> Iterator[Node]:
        it = iter(nodes)
        first = next(it, None)
        if first is None:
            return

        yield first
        for child in it:
            yield self._margin
            yield child

    def __iter__(self) -> Iterator[Node]:
        yield from self.iter_with_margin(*self.inner())

class NodeBlock(NodeStack[TChild], Generic[TChild, TBegin]):
    """
    begin
        <children, separated by margin>
    """

    def __init__(
        self,
        begin: TBegin,
        *children: TChild,
        margin: Node = nullNode,
        level: int = 1
    ):
        self._begin: TBegin = begin
        self._level = level
        super().__init__(*children, margin=margin)

    @property
    def begin(self) -> TBegin:
        return self._begin

    def body(self) -> Iterator[Node]:
        for node in self.iter_with_margin(*super().inner()):
            yield IndentedNode(node, self._level)

    def __iter__(self) -> Iterator[Node]:
        yield self.begin
        yield from self.body()


class DelimitedNodeBlock(NodeBlock[TChild, TBegin], Generic[TChild, TBegin, TEnd]):
    def __init__(
            self,
            begin: TBegin,
            end: TEnd,
            *children: TChild,
            margin: Node = nullNode,
            level: int = 1):

        super().__init__(begin, *children, margin=margin, level=level)
        self._end: TEnd = end

    @property
    def end(self) -> TEnd:
        return self._end

    def __iter__(self) -> Iterator[Node]:
        yield from super().__iter__()
        yield self.end

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, List, NamedTuple, Optional, Self, TypeVar

from rbidsl.options import DEFAULT_OPTIONS, Options


class Line(NamedTuple):
    level: int
    value: str

    def format(self, options: Options) -> str:
        # blank lines never carry indentation
        if not self.value:
            return self.value
        return options.render_line(self.level, self.value)


# ========= Core node =========

class Node(ABC):

    @abstractmethod
    def render(self, level: int, options: Options) -> Iterator[Line]:
        ...

    def generate_lines(self, indent_level: int, options: Options) -> List[str]:
        return [line.format(options) for line in self.render(indent_level, options)]

    def __str__(self) -> str:
        return "\n".join(self.generate_lines(0, DEFAULT_OPTIONS))


class NullNode(Node):
    """
    Singleton node that renders to nothing.
    Used instead of None wherever a Node is required but empty output is desired.
    """

    _instance: Optional["NullNode"] = None

    def __new__(cls) -> "NullNode":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def render(self, level: int, options: Options) -> Iterator[Line]:
        return
        yield

    def __repr__(self) -> str:
        return "NullNode()"


nullNode = NullNode()

TItem = TypeVar("TItem")

class IterableNode(Node, ABC, Generic[TItem]):

    @abstractmethod
    def __iter__(self) -> Iterator[TItem]:
        raise NotImplementedError

class ListNode(IterableNode[TItem]):
    """
    Generic Node backed by a list of items.
    Used for nodes holding strings (text, words) as well as child nodes.
    """

    def __init__(self, *items: TItem) -> None:
        super().__init__()
        self._items: List[TItem] = list(items)

    # ---- mutation ----

    def append(self, item: TItem) -> Self:
        self._items.append(item)
        return self

    def extend(self, items: Iterable[TItem]) -> Self:
        self._items.extend(items)
        return self

    # ---- sequence protocol ----

    def __getitem__(self, index: int) -> TItem:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TItem]:
        return iter(self._items)

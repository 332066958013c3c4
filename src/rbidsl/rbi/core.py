from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterator, List, Optional, Self, Sequence, Tuple, Union

from rbidsl.content import CommentNode
from rbidsl.errors import MergeContractError
from rbidsl.node import Line, Node

if TYPE_CHECKING:
    from rbidsl.options import Options


class RbiObject(Node, ABC):
    """
    A single declaration in an RBI tree.

    Every declaration kind provides:

      describe()            short diagnostic label
      equals(other) / ==    structural equality, same kind only
      is_mergeable_with()   may duplicates be folded into this node?
      merge_into_self()     fold duplicates into this node
      generate_lines()      comment lines followed by the declaration lines

    The kind is carried explicitly by KIND and compared before any attribute,
    so two kinds sharing attribute names are never equal.
    """

    KIND: ClassVar[str] = "RbiObject"

    def __init__(self, name: str = "") -> None:
        super().__init__()
        self._name = name
        self._comments: List[str] = []

    def _configure(self, configure: Optional[Callable[[Self], Any]]) -> None:
        # called once, last thing in each concrete constructor
        if configure is not None:
            configure(self)

    # ---- attributes ----

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def comments(self) -> List[str]:
        return self._comments

    def add_comment(self, comment: Union[str, Sequence[str]]) -> Self:
        if isinstance(comment, str):
            self._comments.append(comment)
        else:
            self._comments.extend(comment)
        return self

    # ---- equality ----

    @abstractmethod
    def key(self) -> Tuple[Any, ...]:
        """Identity-relevant attributes compared by equals()."""
        raise NotImplementedError

    def equals(self, other: object) -> bool:
        if not isinstance(other, RbiObject):
            return False
        if self.KIND != other.KIND or type(self) is not type(other):
            return False
        return self.key() == other.key()

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # ---- merging ----

    @abstractmethod
    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        raise NotImplementedError

    @abstractmethod
    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        """Absorb others into this node.

        You MUST ensure is_mergeable_with(others) is true first; merge()
        does the check for you.
        """
        raise NotImplementedError

    def absorb_comments(self, others: Sequence[RbiObject]) -> None:
        for other in others:
            for comment in other.comments:
                if comment not in self._comments:
                    self._comments.append(comment)

    def merge(self, others: Sequence[RbiObject]) -> None:
        if not self.is_mergeable_with(others):
            raise MergeContractError(self.describe(), [o.describe() for o in others])
        self.merge_into_self(others)

    # ---- rendering ----

    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        raise NotImplementedError

    def render(self, level: int, options: "Options") -> Iterator[Line]:
        yield from CommentNode(*self._comments).render(level, options)
        yield from self.render_declaration(level, options)

    def __repr__(self) -> str:
        return f"<{self.describe()}>"

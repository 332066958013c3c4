from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Self, Sequence, Tuple

from rbidsl.content import WordlistNode
from rbidsl.node import Line
from rbidsl.rbi.core import RbiObject

if TYPE_CHECKING:
    from rbidsl.options import Options


class Constant(RbiObject):
    """
    A constant assignment:

      Constant("VERSION", "T.let(T.unsafe(nil), String)")
        -> "VERSION = T.let(T.unsafe(nil), String)"
    """

    KIND = "Constant"

    def __init__(
        self,
        name: str = "",
        value: str = "",
        *,
        configure: Optional[Callable[["Constant"], Any]] = None,
    ) -> None:
        super().__init__(name)
        self._value = value
        self._configure(configure)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = value

    def set_value(self, value: str) -> Self:
        self._value = value
        return self

    def rhs(self) -> str:
        return self._value

    def key(self) -> Tuple[Any, ...]:
        return (self.name, self._value)

    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        return all(self == other for other in others)

    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        # only identical constants are mergeable, comments are all they add
        self.absorb_comments(others)

    def describe(self) -> str:
        return f"{self.KIND} ({self.name} = {self.rhs()})"

    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        yield from WordlistNode(self.name, "=", self.rhs()).render(level, options)


class TypeAlias(Constant):
    """
    A type alias:

      TypeAlias("Key", "T.any(String, Symbol)")
        -> "Key = T.type_alias { T.any(String, Symbol) }"
    """

    KIND = "TypeAlias"

    def __init__(
        self,
        name: str = "",
        type: str = "",
        *,
        configure: Optional[Callable[["TypeAlias"], Any]] = None,
    ) -> None:
        super().__init__(name, type, configure=configure)

    @property
    def type(self) -> str:
        return self.value

    @type.setter
    def type(self, value: str) -> None:
        self.value = value

    def rhs(self) -> str:
        return f"T.type_alias {{ {self.value} }}"

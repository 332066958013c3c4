from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, Iterator, Optional, Self, Sequence, Tuple

from rbidsl.content import WordlistNode
from rbidsl.node import Line
from rbidsl.rbi.core import RbiObject

if TYPE_CHECKING:
    from rbidsl.options import Options


class ModuleReference(RbiObject):
    """
    A one-line reference to another module: "<keyword> <target>".

    The keyword is bound by subscription, and the specialisation is cached
    so that ModuleReference["include"] is always the same class:

      class Include(ModuleReference["include"]): ...
    """

    _keyword: ClassVar[str] = ""
    _specializations: ClassVar[Dict[str, type]] = {}

    def __class_getitem__(cls, keyword: str) -> type:
        if not isinstance(keyword, str) or not keyword:
            raise TypeError(f"{cls.__name__}[...] expects a keyword string, got {keyword!r}")

        # per base class cache
        if "_specializations" not in cls.__dict__:
            cls._specializations = {}

        if keyword not in cls._specializations:
            cls._specializations[keyword] = type(
                f"{cls.__name__}[{keyword}]",
                (cls,),
                {"_keyword": keyword, "KIND": keyword.capitalize()},
            )
        return cls._specializations[keyword]

    def __init__(self, target: str = "") -> None:
        if not self._keyword:
            raise TypeError(f"{type(self).__name__} has no keyword bound")
        super().__init__("")
        self._target = target

    @classmethod
    def keyword(cls) -> str:
        return cls._keyword

    @property
    def target(self) -> str:
        """The name of the module being referenced."""
        return self._target

    @target.setter
    def target(self, value: str) -> None:
        self._target = value

    # the attribute is called "object" in Ruby-facing APIs
    object = target

    def set_target(self, value: str) -> Self:
        self._target = value
        return self

    def key(self) -> Tuple[Any, ...]:
        return (self._target,)

    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        # identical references are folded by equality upstream; there is
        # no extra state that could be merged
        return False

    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        pass

    def describe(self) -> str:
        return f"{self.KIND} ({self._target})"

    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        yield from WordlistNode(self.keyword(), self._target).render(level, options)


class Include(ModuleReference["include"]):
    """
    An "include" call.

      Include("Comparable") -> "include Comparable"
    """

    KIND = "Include"

    def __init__(
        self,
        target: str = "",
        *,
        configure: Optional[Callable[["Include"], Any]] = None,
    ) -> None:
        super().__init__(target)
        self._configure(configure)


class Extend(ModuleReference["extend"]):
    """
    An "extend" call.

      Extend("T::Sig") -> "extend T::Sig"
    """

    KIND = "Extend"

    def __init__(
        self,
        target: str = "",
        *,
        configure: Optional[Callable[["Extend"], Any]] = None,
    ) -> None:
        super().__init__(target)
        self._configure(configure)

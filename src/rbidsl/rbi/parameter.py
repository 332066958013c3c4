from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from rbidsl.errors import InvalidArgument


class ParameterKind(Enum):
    """
    Kind of a method parameter, selected by the name's decoration:

      x     NORMAL
      x:    KEYWORD
      *x    REST
      **x   KEYWORD_REST
      &x    BLOCK
    """

    NORMAL = "normal"
    KEYWORD = "keyword"
    REST = "rest"
    KEYWORD_REST = "keyword_rest"
    BLOCK = "block"

    @classmethod
    def of(cls, name: str) -> "ParameterKind":
        if name.startswith("**"):
            return cls.KEYWORD_REST
        if name.startswith("*"):
            return cls.REST
        if name.startswith("&"):
            return cls.BLOCK
        if name.endswith(":"):
            return cls.KEYWORD
        return cls.NORMAL


UNTYPED = "T.untyped"


@dataclass
class Parameter:
    """
    A method parameter.

      Parameter("x", type="Integer", default="1")
        def form: "x = 1"     sig form: "x: Integer"
      Parameter("opts:", type="T::Hash[Symbol, String]")
        def form: "opts:"     sig form: "opts: T::Hash[Symbol, String]"
    """

    name: str
    type: Optional[str] = None
    default: Optional[str] = None
    kind: ParameterKind = field(init=False)

    def __post_init__(self) -> None:
        if not self.name or any(c.isspace() for c in self.name):
            raise InvalidArgument(f"invalid parameter name {self.name!r}")

        self.kind = ParameterKind.of(self.name)

        if not self.name_without_kind:
            raise InvalidArgument(f"parameter {self.name!r} has no name after its prefix")
        if self.default is not None:
            if self.kind in (ParameterKind.REST, ParameterKind.KEYWORD_REST, ParameterKind.BLOCK):
                raise InvalidArgument(f"{self.kind.value} parameter {self.name!r} cannot have a default")
            if self.kind is ParameterKind.KEYWORD and self.default.lstrip().startswith("="):
                raise InvalidArgument(
                    f"keyword parameter {self.name!r} takes its default as {self.name} value, not '='"
                )

    @property
    def name_without_kind(self) -> str:
        return self.name.lstrip("*&").rstrip(":")

    @property
    def sig_type(self) -> str:
        return self.type or UNTYPED

    def to_def_param(self) -> str:
        if self.default is None:
            return self.name
        if self.kind is ParameterKind.KEYWORD:
            return f"{self.name} {self.default}"
        return f"{self.name} = {self.default}"

    def to_sig_param(self) -> str:
        return f"{self.name_without_kind}: {self.sig_type}"

    def describe(self) -> str:
        return self.to_def_param()

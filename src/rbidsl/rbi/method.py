from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, List, Optional, Self, Sequence, Tuple, Union

from rbidsl.errors import InvalidArgument
from rbidsl.node import Line
from rbidsl.rbi.core import RbiObject
from rbidsl.rbi.parameter import UNTYPED, Parameter

if TYPE_CHECKING:
    from rbidsl.options import Options


class Method(RbiObject):
    """
    A method definition with its signature:

      sig { params(a: Integer).returns(String) }
      def foo(a); end

    Signatures with at least options.break_params parameters are broken
    over several lines:

      sig do
        params(
          a: Integer,
          b: String
        ).returns(String)
      end
      def foo(a, b); end
    """

    KIND = "Method"

    def __init__(
        self,
        name: str = "",
        parameters: Iterable[Parameter] = (),
        return_type: Optional[str] = None,
        *,
        abstract: bool = False,
        implementation: bool = False,
        override: bool = False,
        overridable: bool = False,
        class_method: bool = False,
        final: bool = False,
        type_parameters: Iterable[str] = (),
        configure: Optional[Callable[["Method"], Any]] = None,
    ) -> None:
        super().__init__(name)
        self._parameters: List[Parameter] = list(parameters)
        self.return_type: Optional[str] = return_type
        self.abstract = abstract
        self.implementation = implementation
        self.override = override
        self.overridable = overridable
        self.class_method = class_method
        self.final = final
        self.type_parameters: List[str] = list(type_parameters)
        self._configure(configure)

    @property
    def parameters(self) -> List[Parameter]:
        return self._parameters

    def add_parameter(self, parameter: Union[Parameter, str], type: Optional[str] = None,
                      default: Optional[str] = None) -> Self:
        if isinstance(parameter, str):
            parameter = Parameter(parameter, type=type, default=default)
        self._parameters.append(parameter)
        return self

    def returns(self, return_type: Optional[str]) -> Self:
        self.return_type = return_type
        return self

    # ---- contract ----

    def key(self) -> Tuple[Any, ...]:
        return (
            self.name,
            tuple(self._parameters),
            self.return_type,
            self.abstract,
            self.implementation,
            self.override,
            self.overridable,
            self.class_method,
            self.final,
            tuple(self.type_parameters),
        )

    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        return all(self == other for other in others)

    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        # only identical methods are mergeable, comments are all they add
        self.absorb_comments(others)

    def describe(self) -> str:
        params = ", ".join(p.describe() for p in self._parameters)
        returns = f" -> {self.return_type}" if self.return_type else ""
        prefix = "self." if self.class_method else ""
        return f"{self.KIND} ({prefix}{self.name}({params}){returns})"

    # ---- rendering ----

    def qualifiers(self) -> List[str]:
        result: List[str] = []
        if self.abstract:
            result.append("abstract")
        if self.implementation:
            result.append("implementation")
        if self.override:
            result.append("override")
        if self.overridable:
            result.append("overridable")
        if self.type_parameters:
            symbols = ", ".join(f":{t}" for t in self.type_parameters)
            result.append(f"type_parameters({symbols})")
        return result

    def return_call(self) -> str:
        return f"returns({self.return_type})" if self.return_type else "void"

    def sig_keyword(self) -> str:
        return "sig(:final)" if self.final else "sig"

    def sig_params(self) -> List[str]:
        return [p.to_sig_param() for p in self._parameters]

    def render_signature(self, level: int, options: "Options") -> Iterator[Line]:
        sig_params = self.sig_params()
        qualifiers = self.qualifiers()

        if sig_params and len(sig_params) >= options.break_params:
            yield Line(level, f"{self.sig_keyword()} do")
            yield Line(level + 1, ".".join([*qualifiers, "params("]))
            for i, param in enumerate(sig_params):
                yield Line(level + 2, param if i == len(sig_params) - 1 else f"{param},")
            yield Line(level + 1, f").{self.return_call()}")
            yield Line(level, "end")
            return

        chain = list(qualifiers)
        if sig_params:
            chain.append(f"params({', '.join(sig_params)})")
        chain.append(self.return_call())
        yield Line(level, f"{self.sig_keyword()} {{ {'.'.join(chain)} }}")

    def render_definition(self, level: int, options: "Options") -> Iterator[Line]:
        prefix = "self." if self.class_method else ""
        params = ", ".join(p.to_def_param() for p in self._parameters)
        params = f"({params})" if params else ""
        yield Line(level, f"def {prefix}{self.name}{params}; end")

    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        yield from self.render_signature(level, options)
        yield from self.render_definition(level, options)


class AttributeKind(Enum):
    READER = "reader"
    WRITER = "writer"
    ACCESSOR = "accessor"


class Attribute(Method):
    """
    An attr_reader, attr_writer or attr_accessor with its signature:

      sig { returns(String) }
      attr_reader :name

    Class attributes are wrapped in "class << self ... end".
    """

    KIND = "Attribute"

    def __init__(
        self,
        name: str = "",
        kind: Union[AttributeKind, str] = AttributeKind.READER,
        type: str = "T.untyped",
        *,
        class_attribute: bool = False,
        configure: Optional[Callable[["Attribute"], Any]] = None,
    ) -> None:
        try:
            self.kind = AttributeKind(kind)
        except ValueError:
            raise InvalidArgument(f"unknown attribute kind {kind!r}") from None
        self.class_attribute = class_attribute
        super().__init__(name, return_type=type, configure=configure)

    @property
    def type(self) -> str:
        return self.return_type or UNTYPED

    @type.setter
    def type(self, value: str) -> None:
        self.return_type = value

    def add_parameter(self, parameter: Union[Parameter, str], type: Optional[str] = None,
                      default: Optional[str] = None) -> Self:
        raise TypeError(f"{self.describe()} takes no parameters; its signature follows its kind")

    def sig_params(self) -> List[str]:
        if self.kind is AttributeKind.WRITER:
            return [f"{self.name}: {self.type}"]
        return []

    def return_call(self) -> str:
        return f"returns({self.type})"

    def key(self) -> Tuple[Any, ...]:
        return (self.name, self.kind, self.type, self.class_attribute)

    def describe(self) -> str:
        prefix = "self." if self.class_attribute else ""
        return f"{self.KIND} ({self.kind.value} {prefix}{self.name}: {self.type})"

    def render_definition(self, level: int, options: "Options") -> Iterator[Line]:
        yield Line(level, f"attr_{self.kind.value} :{self.name}")

    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        if not self.class_attribute:
            yield from super().render_declaration(level, options)
            return

        yield Line(level, "class << self")
        yield from super().render_declaration(level + 1, options)
        yield Line(level, "end")

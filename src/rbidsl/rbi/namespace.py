from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from rbidsl.container import DelimitedNodeBlock, NodeStack, SimpleNodeStack
from rbidsl.content import BlankLineNode, TextNode
from rbidsl.node import Line, Node
from rbidsl.rbi.constant import Constant, TypeAlias
from rbidsl.rbi.core import RbiObject
from rbidsl.rbi.method import Attribute, AttributeKind, Method
from rbidsl.rbi.parameter import Parameter
from rbidsl.rbi.reference import Extend, Include

if TYPE_CHECKING:
    from rbidsl.options import Options

logger = logging.getLogger(__name__)

TNode = TypeVar("TNode", bound=RbiObject)


class Namespace(RbiObject):
    """
    An ordered collection of declarations.

    The base class is the root of a tree and renders its body only;
    ModuleNamespace and ClassNamespace wrap the body in a header and "end".

    Children are added through add(), which folds structurally equal
    duplicates into the new node when the new node says they are mergeable
    and otherwise keeps both.
    """

    KIND = "Namespace"
    MARGIN: Node = BlankLineNode()

    def __init__(
        self,
        name: str = "",
        *,
        final: bool = False,
        sealed: bool = False,
        configure: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        super().__init__(name)
        self.final = final
        self.sealed = sealed
        self._children: List[RbiObject] = []
        self._configure(configure)

    # ---- children ----

    @property
    def children(self) -> List[RbiObject]:
        return list(self._children)

    @property
    def includes(self) -> List[Include]:
        return [c for c in self._children if isinstance(c, Include)]

    @property
    def extends(self) -> List[Extend]:
        return [c for c in self._children if isinstance(c, Extend)]

    @property
    def constants(self) -> List[Constant]:
        return [c for c in self._children if isinstance(c, Constant)]

    @property
    def namespaces(self) -> List["Namespace"]:
        return [c for c in self._children if isinstance(c, Namespace)]

    def add(self, node: TNode) -> TNode:
        if not isinstance(node, RbiObject):
            raise TypeError(f"can only add RbiObject nodes, got {type(node).__name__}")

        duplicates = [child for child in self._children if child == node]
        if not duplicates:
            self._children.append(node)
            return node

        if not node.is_mergeable_with(duplicates):
            logger.debug(
                "%s: keeping %s next to %d equal node(s)",
                self.describe(), node.describe(), len(duplicates),
            )
            self._children.append(node)
            return node

        logger.debug(
            "%s: merging %d equal node(s) into %s",
            self.describe(), len(duplicates), node.describe(),
        )
        node.merge(duplicates)
        self._replace(duplicates, node)
        return node

    def remove(self, node: RbiObject) -> None:
        # identity, not equality: equal nodes may coexist
        for i, child in enumerate(self._children):
            if child is node:
                del self._children[i]
                return
        raise ValueError(f"{node.describe()} is not a child of {self.describe()}")

    def _replace(self, old: Sequence[RbiObject], new: RbiObject) -> None:
        old_ids = {id(o) for o in old}
        position = next(i for i, c in enumerate(self._children) if id(c) in old_ids)
        self._children = [c for c in self._children if id(c) not in old_ids]
        self._children.insert(position, new)

    # ---- builders ----

    def create_module(
        self,
        name: str,
        *,
        interface: bool = False,
        final: bool = False,
        sealed: bool = False,
        configure: Optional[Callable[["ModuleNamespace"], Any]] = None,
    ) -> "ModuleNamespace":
        return self.add(ModuleNamespace(
            name, interface=interface, final=final, sealed=sealed, configure=configure,
        ))

    def create_class(
        self,
        name: str,
        *,
        superclass: Optional[str] = None,
        abstract: bool = False,
        final: bool = False,
        sealed: bool = False,
        configure: Optional[Callable[["ClassNamespace"], Any]] = None,
    ) -> "ClassNamespace":
        return self.add(ClassNamespace(
            name, superclass=superclass, abstract=abstract, final=final, sealed=sealed,
            configure=configure,
        ))

    def path(self, *names: str) -> "Namespace":
        """Walk nested modules by name, creating the missing ones.

          root.path("A", "B")  ->  module A; module B
        """
        current: Namespace = self
        for name in names:
            found = next(
                (c for c in current.namespaces if c.name == name),
                None,
            )
            # created directly, an empty module would be folded into an
            # existing equal one and change identity
            if found is None:
                found = ModuleNamespace(name)
                current._children.append(found)
            current = found
        return current

    def create_method(
        self,
        name: str,
        parameters: Iterable[Parameter] = (),
        return_type: Optional[str] = None,
        **kwargs: Any,
    ) -> Method:
        return self.add(Method(name, parameters, return_type, **kwargs))

    def create_attribute(
        self,
        name: str,
        kind: Union[AttributeKind, str],
        type: str,
        *,
        class_attribute: bool = False,
        configure: Optional[Callable[[Attribute], Any]] = None,
    ) -> Attribute:
        return self.add(Attribute(
            name, kind, type, class_attribute=class_attribute, configure=configure,
        ))

    def create_attr_reader(self, name: str, type: str, **kwargs: Any) -> Attribute:
        return self.create_attribute(name, AttributeKind.READER, type, **kwargs)

    def create_attr_writer(self, name: str, type: str, **kwargs: Any) -> Attribute:
        return self.create_attribute(name, AttributeKind.WRITER, type, **kwargs)

    def create_attr_accessor(self, name: str, type: str, **kwargs: Any) -> Attribute:
        return self.create_attribute(name, AttributeKind.ACCESSOR, type, **kwargs)

    def create_include(
        self,
        target: str,
        *,
        configure: Optional[Callable[[Include], Any]] = None,
    ) -> Include:
        return self.add(Include(target, configure=configure))

    def create_includes(self, targets: Iterable[str]) -> List[Include]:
        return [self.create_include(t) for t in targets]

    def create_extend(
        self,
        target: str,
        *,
        configure: Optional[Callable[[Extend], Any]] = None,
    ) -> Extend:
        return self.add(Extend(target, configure=configure))

    def create_extends(self, targets: Iterable[str]) -> List[Extend]:
        return [self.create_extend(t) for t in targets]

    def create_constant(
        self,
        name: str,
        value: str,
        *,
        configure: Optional[Callable[[Constant], Any]] = None,
    ) -> Constant:
        return self.add(Constant(name, value, configure=configure))

    def create_type_alias(
        self,
        name: str,
        type: str,
        *,
        configure: Optional[Callable[[TypeAlias], Any]] = None,
    ) -> TypeAlias:
        return self.add(TypeAlias(name, type, configure=configure))

    # ---- contract ----

    def key(self) -> Tuple[Any, ...]:
        return (self.name, self.flags(), tuple(self._children))

    def flags(self) -> Tuple[bool, ...]:
        return (self.final, self.sealed)

    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        return all(
            type(other) is type(self)
            and other.name == self.name
            and other.flags() == self.flags()
            for other in others
        )

    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        self.absorb_comments(others)
        for other in others:
            if not isinstance(other, Namespace):
                continue
            for child in other.children:
                self._absorb(child)

    def _absorb(self, child: RbiObject) -> None:
        # an equal child carries no extra state
        if any(existing == child for existing in self._children):
            return

        if isinstance(child, Namespace):
            target = next(
                (c for c in self.namespaces
                 if c.name == child.name and c.is_mergeable_with([child])),
                None,
            )
            if target is not None:
                target.merge([child])
                return

        self.add(child)

    def describe(self) -> str:
        return f"{self.KIND} ({self.name or '<root>'})"

    # ---- rendering ----

    def header(self) -> Optional[str]:
        return None

    def flag_lines(self) -> List[str]:
        lines: List[str] = []
        if self.final:
            lines.append("final!")
        if self.sealed:
            lines.append("sealed!")
        return lines

    def ordered_children(self, options: "Options") -> List[RbiObject]:
        rest = [
            c for c in self._children
            if not isinstance(c, (Include, Extend, Constant))
        ]
        if not options.sort_namespaces:
            return rest

        # namespaces are sorted among their own slots, other children stay put
        ordered = iter(sorted(
            (c for c in rest if isinstance(c, Namespace)),
            key=lambda n: n.name,
        ))
        return [next(ordered) if isinstance(c, Namespace) else c for c in rest]

    def body(self, options: "Options") -> NodeStack[Node]:
        body = NodeStack[Node](margin=self.MARGIN)

        flags = self.flag_lines()
        if flags:
            body.append(TextNode(*flags))

        body.append(SimpleNodeStack[Node](*self.includes))
        body.append(SimpleNodeStack[Node](*self.extends))
        body.append(SimpleNodeStack[Node](*self.constants))
        body.extend(self.ordered_children(options))
        return body

    def render_declaration(self, level: int, options: "Options") -> Iterator[Line]:
        body = self.body(options)
        header = self.header()

        if header is None:
            yield from body.render(level, options)
            return

        if body.empty():
            yield Line(level, f"{header}; end")
            return

        yield from DelimitedNodeBlock[Node, TextNode, TextNode](
            TextNode(header),
            TextNode("end"),
            body,
        ).render(level, options)


class ModuleNamespace(Namespace):
    """
    module Name
      [interface!]
      ...
    end
    """

    KIND = "Module"

    def __init__(
        self,
        name: str = "",
        *,
        interface: bool = False,
        final: bool = False,
        sealed: bool = False,
        configure: Optional[Callable[["ModuleNamespace"], Any]] = None,
    ) -> None:
        self.interface = interface
        super().__init__(name, final=final, sealed=sealed, configure=configure)

    def flags(self) -> Tuple[bool, ...]:
        return (*super().flags(), self.interface)

    def flag_lines(self) -> List[str]:
        lines = super().flag_lines()
        if self.interface:
            lines.insert(0, "interface!")
        return lines

    def header(self) -> Optional[str]:
        return f"module {self.name}"


class ClassNamespace(Namespace):
    """
    class Name [< Superclass]
      [abstract!]
      ...
    end
    """

    KIND = "Class"

    def __init__(
        self,
        name: str = "",
        *,
        superclass: Optional[str] = None,
        abstract: bool = False,
        final: bool = False,
        sealed: bool = False,
        configure: Optional[Callable[["ClassNamespace"], Any]] = None,
    ) -> None:
        self.superclass = superclass
        self.abstract = abstract
        super().__init__(name, final=final, sealed=sealed, configure=configure)

    def key(self) -> Tuple[Any, ...]:
        return (*super().key(), self.superclass)

    def flags(self) -> Tuple[bool, ...]:
        return (*super().flags(), self.abstract)

    def is_mergeable_with(self, others: Sequence[RbiObject]) -> bool:
        if not super().is_mergeable_with(others):
            return False

        superclasses = {
            c.superclass for c in (self, *others)
            if isinstance(c, ClassNamespace) and c.superclass is not None
        }
        return len(superclasses) <= 1

    def merge_into_self(self, others: Sequence[RbiObject]) -> None:
        super().merge_into_self(others)
        if self.superclass is None:
            self.superclass = next(
                (o.superclass for o in others
                 if isinstance(o, ClassNamespace) and o.superclass is not None),
                None,
            )

    def flag_lines(self) -> List[str]:
        lines = super().flag_lines()
        if self.abstract:
            lines.insert(0, "abstract!")
        return lines

    def header(self) -> Optional[str]:
        if self.superclass:
            return f"class {self.name} < {self.superclass}"
        return f"class {self.name}"

    def describe(self) -> str:
        superclass = f" < {self.superclass}" if self.superclass else ""
        return f"{self.KIND} ({self.name}{superclass})"

from .core import (
    RbiObject,
)

from .reference import (
    ModuleReference,
    Include,
    Extend,
)

from .constant import (
    Constant,
    TypeAlias,
)

from .parameter import (
    Parameter,
    ParameterKind,
)

from .method import (
    Method,
    Attribute,
    AttributeKind,
)

from .namespace import (
    Namespace,
    ModuleNamespace,
    ClassNamespace,
)

from .generator import (
    RbiGenerator,
)

__all__ = [
    # contract
    "RbiObject",

    # references
    "ModuleReference",
    "Include",
    "Extend",

    # constants
    "Constant",
    "TypeAlias",

    # methods
    "Parameter",
    "ParameterKind",
    "Method",
    "Attribute",
    "AttributeKind",

    # namespaces
    "Namespace",
    "ModuleNamespace",
    "ClassNamespace",

    # tree
    "RbiGenerator",
]

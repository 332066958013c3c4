# rbidsl/__init__.py

__version__ = "0.1.0"

from .errors import (
    RbiError,
    InvalidArgument,
    MergeContractError,
)

from .options import (
    Options,
)

from .node import (
    Node,
    Line,
    NullNode,
    nullNode,
)

from .content import (
    LinesNode,
    TextNode,
    CommentNode,
    BlankLineNode,
    WordsNode,
    WordlistNode,
)

from .container import (
    ContainerNode,
    SimpleNodeStack,
    NodeStack,
    IndentedNode,
    NodeBlock,
    DelimitedNodeBlock,
)

from . import rbi
from .rbi import (
    RbiObject,
    Include,
    Extend,
    Constant,
    TypeAlias,
    Parameter,
    Method,
    Attribute,
    Namespace,
    ModuleNamespace,
    ClassNamespace,
    RbiGenerator,
)

__all__ = [
    # errors
    "RbiError",
    "InvalidArgument",
    "MergeContractError",

    # formatting
    "Options",

    # node and content
    "Node",
    "Line",
    "NullNode",
    "nullNode",
    "LinesNode",
    "TextNode",
    "CommentNode",
    "BlankLineNode",
    "WordsNode",
    "WordlistNode",

    # containers
    "ContainerNode",
    "SimpleNodeStack",
    "NodeStack",
    "IndentedNode",
    "NodeBlock",
    "DelimitedNodeBlock",

    # declarations
    "rbi",
    "RbiObject",
    "Include",
    "Extend",
    "Constant",
    "TypeAlias",
    "Parameter",
    "Method",
    "Attribute",
    "Namespace",
    "ModuleNamespace",
    "ClassNamespace",
    "RbiGenerator",
]

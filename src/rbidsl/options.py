from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from rbidsl.errors import InvalidArgument


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable formatting policy shared by a whole render pass.

    Attributes:
        indent: Indentation unit. An int is a number of spaces, a string
            is used verbatim ("\\t" for tabs).
        break_params: Signatures with at least this many parameters are
            rendered over several lines.
        sort_namespaces: Sort module and class children by name.
    """

    indent: Union[str, int] = 2
    break_params: int = 4
    sort_namespaces: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, (str, int)):
            raise InvalidArgument(f"indent must be a str or int, got {self.indent!r}")
        if isinstance(self.indent, int):
            if self.indent < 0:
                raise InvalidArgument(f"indent width must be >= 0, got {self.indent}")
            object.__setattr__(self, "indent", " " * self.indent)

    @property
    def indent_unit(self) -> str:
        return str(self.indent)

    def render_line(self, depth: int, text: str) -> str:
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise InvalidArgument(f"indentation depth must be a non-negative int, got {depth!r}")
        return self.indent_unit * depth + text

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "Options":
        """Create Options from a mapping, ignoring unknown keys.

        Example:
            >>> Options.from_dict({"indent": 4, "unknown": True}).render_line(1, "x")
            '    x'
        """
        valid = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in valid})


DEFAULT_OPTIONS = Options()

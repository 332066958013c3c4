"""Exception classes for rbidsl."""

from __future__ import annotations


class RbiError(Exception):
    """Base exception for all rbidsl errors."""

    pass


class InvalidArgument(RbiError, ValueError):
    """A value passed to a node or to Options is outside its domain.

    Raised for negative indentation depths or widths, malformed parameter
    names and unknown attribute kinds.
    """

    pass


class MergeContractError(RbiError, AssertionError):
    """merge() was called with nodes that are not mergeable.

    This is a programming error: callers must check is_mergeable_with()
    against the exact same set of nodes first.
    """

    def __init__(self, node_description: str, others: list[str]) -> None:
        self.node_description = node_description
        self.others = others
        super().__init__(
            f"{node_description} is not mergeable with: {', '.join(others) or '(nothing)'}"
        )

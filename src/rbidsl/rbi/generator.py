from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from rbidsl.errors import InvalidArgument
from rbidsl.options import Options
from rbidsl.rbi.core import RbiObject
from rbidsl.rbi.namespace import Namespace

logger = logging.getLogger(__name__)

Resolver = Callable[[str, List[RbiObject]], Optional[RbiObject]]


class RbiGenerator:
    """
    Owns the root namespace of an RBI tree and renders it.

      gen = RbiGenerator(break_params=2)
      gen.root.create_module("Foo", configure=lambda m: m.create_include("Bar"))
      print(gen.rbi())

    Keyword arguments other than options are Options fields.
    """

    def __init__(self, options: Optional[Options] = None, **option_fields: Any) -> None:
        if options is not None and option_fields:
            raise TypeError("pass either an Options instance or Options fields, not both")
        self._options = options if options is not None else Options(**option_fields)
        self._root = Namespace()

    @property
    def options(self) -> Options:
        return self._options

    @property
    def root(self) -> Namespace:
        return self._root

    def rbi(self, strictness: str = "strong") -> str:
        lines = [f"# typed: {strictness}"]
        lines.extend(self._root.generate_lines(0, self._options))
        return "\n".join(lines) + "\n"

    # ---- conflict resolution ----

    def resolve_conflicts(self, resolver: Optional[Resolver] = None) -> None:
        """
        Fold children sharing a name, namespace by namespace, depth first.

        A group is merged into its first member when that member is mergeable
        with the rest. Otherwise resolver(description, candidates) picks the
        node to keep (None drops them all); without a resolver every candidate
        is kept and a warning is logged.
        """
        self._resolve(self._root, resolver)

    def _resolve(self, namespace: Namespace, resolver: Optional[Resolver]) -> None:
        groups: Dict[str, List[RbiObject]] = {}
        for child in namespace.children:
            # includes and extends have no name and never conflict
            if child.name:
                groups.setdefault(child.name, []).append(child)

        for name, candidates in groups.items():
            if len(candidates) < 2:
                continue

            first, rest = candidates[0], candidates[1:]
            if first.is_mergeable_with(rest):
                logger.debug("merging %d definitions of %s", len(candidates), name)
                first.merge(rest)
                for node in rest:
                    namespace.remove(node)
                continue

            description = f"conflicting definitions for '{name}' in {namespace.describe()}"
            if resolver is None:
                logger.warning(
                    "%s: %s; keeping all",
                    description, ", ".join(c.describe() for c in candidates),
                )
                continue

            keep = resolver(description, candidates)
            if keep is not None and not any(keep is c for c in candidates):
                raise InvalidArgument(f"resolver returned {keep!r}, which is not one of the candidates")
            logger.debug("resolved %s: keeping %r", description, keep)
            for node in candidates:
                if node is not keep:
                    namespace.remove(node)

        for child in namespace.namespaces:
            self._resolve(child, resolver)

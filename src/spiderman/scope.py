"""Lexical scopes of a wrapped AST and the names declared in them.

Only programs and functions introduce scopes. A name belongs to the
scope its declaring node's parent resolves to, so a function's own name
registers in the enclosing scope while everything declared in its body
registers in the function's scope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .ast_compat import get, is_type

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)

SCOPE_KINDS: frozenset[str] = frozenset(
    {
        "Program",
        "FunctionDeclaration",
        "FunctionExpression",
    }
)


class Scope:
    """Scope introduced by a Program or function node."""

    def __init__(self, node: Node):
        self.node: Node = node
        self._identifiers: tuple[str, ...] | None = None

    def __repr__(self) -> str:
        return "<Scope " + self.node.type + ">"

    def identifiers(self) -> tuple[str, ...]:
        """Names declared directly in this scope, in source order, duplicates kept."""
        if self._identifiers is None:
            self._identifiers = _collect_identifiers(self)
            logger.debug("%r: %d identifiers", self, len(self._identifiers))
        return self._identifiers

    def parent(self) -> Scope | None:
        """Enclosing scope, or None for the outermost one."""
        if self.node.parent is None:
            return None
        return self.node.parent_scope()

    def scopes(self) -> list[Scope]:
        """Scopes nested directly inside this one, in pre-order."""
        result: list[Scope] = []
        for desc in self.node.descendants():
            if desc.type in SCOPE_KINDS and desc.parent_scope() is self:
                result.append(desc.scope())
        return result


def _collect_identifiers(scope: Scope) -> tuple[str, ...]:
    names: list[str] = []
    for desc in scope.node.descendants():
        if desc.parent_scope() is not scope:
            continue
        ident = get(desc.node, "id")
        if is_type(ident, ("Identifier",)):
            names.append(str(get(ident, "name")))
    return tuple(names)


def function_name(scope: Scope) -> str | None:
    """Declared name of the function introducing scope, if any."""
    ident = get(scope.node.node, "id")
    if is_type(ident, ("Identifier",)):
        return str(get(ident, "name"))
    return None

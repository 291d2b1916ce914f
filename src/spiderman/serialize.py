"""Serialization of wrapped nodes and scopes to JSON-compatible values."""

from __future__ import annotations

import json

from .ast_compat import ASTNode
from .node import Node
from .scope import Scope, function_name


def to_json(obj: object) -> str:
    """Serialize object to pretty-printed JSON."""
    return json.dumps(obj, indent=2)


def raw_to_json(node: ASTNode | Node) -> str:
    """Pass-through JSON of a raw node, or of the raw node behind a wrapper."""
    if isinstance(node, Node):
        return node.to_json(indent=2)
    return to_json(node)


def kinds(nodes: tuple[Node, ...] | list[Node]) -> list[str]:
    """Kinds of a node sequence, in order."""
    return [n.type for n in nodes]


def scope_to_dict(scope: Scope) -> dict[str, object]:
    """Convert a Scope to {"kind", "name", "identifiers"}; name is null when anonymous."""
    return {
        "kind": scope.node.type,
        "name": function_name(scope),
        "identifiers": list(scope.identifiers()),
    }


def scopes_to_dict(root: Node) -> dict[str, object]:
    """All scopes under root in pre-order, starting with root's own."""
    scopes: list[object] = []
    pending: list[Scope] = [root.scope()]
    while pending:
        scope = pending.pop()
        scopes.append(scope_to_dict(scope))
        pending.extend(reversed(scope.scopes()))
    return {"scopes": scopes}

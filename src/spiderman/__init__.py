"""Spiderman — navigable wrapper for SpiderMonkey Parser API ASTs — public API."""

from __future__ import annotations

from .ast_compat import ASTNode, format_node
from .errors import (
    MissingChild as MissingChild,
    NoEnclosingScope as NoEnclosingScope,
    SpidermanError as SpidermanError,
    UnsupportedNodeKind as UnsupportedNodeKind,
)
from .grammar import child_nodes, validate
from .node import Node, wrap
from .scope import Scope
from .serialize import raw_to_json as to_json

VERSION: str = "0.1.0"

__all__ = [
    "ASTNode",
    "MissingChild",
    "NoEnclosingScope",
    "Node",
    "Scope",
    "SpidermanError",
    "UnsupportedNodeKind",
    "VERSION",
    "child_nodes",
    "format_node",
    "identifiers",
    "to_json",
    "validate",
    "wrap",
]


def identifiers(ast: ASTNode) -> list[str]:
    """Wrap ast and return the names declared in its top-level scope."""
    return list(wrap(ast).scope().identifiers())

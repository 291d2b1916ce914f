"""Parent-linked, lazily expanded view of a raw SpiderMonkey AST."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from .ast_compat import ASTNode, format_node, is_node, node_type
from .errors import MissingChild, NoEnclosingScope
from .grammar import child_nodes

if TYPE_CHECKING:
    from .scope import Scope

logger = logging.getLogger(__name__)


class Node:
    """Wraps one raw AST node.

    Children, descendants and scope are derived on first use and cached.
    A child is wrapped exactly once, the first time its parent's children
    are requested, so node identity is stable for the life of the tree.
    """

    def __init__(self, node: ASTNode, parent: Node | None = None):
        self.node: ASTNode = node
        self.type: str = node_type(node)
        self.parent: Node | None = parent
        self._children: tuple[Node, ...] | None = None
        self._descendants: tuple[Node, ...] | None = None
        self._scope: Scope | None = None

    def __repr__(self) -> str:
        return "<Node " + self.type + ">"

    def children(self) -> tuple[Node, ...]:
        """Direct children, wrapped with self as parent."""
        if self._children is None:
            self._children = _wrap_children(self)
        return self._children

    def descendants(self) -> tuple[Node, ...]:
        """All nodes below this one in pre-order, self excluded.

        For `var foo = {a: 1};` the program yields VariableDeclaration,
        VariableDeclarator, ObjectExpression, Property, Identifier, Literal.
        """
        if self._descendants is None:
            self._descendants = _collect_descendants(self)
        return self._descendants

    def scope(self) -> Scope:
        """Scope this node belongs to; functions and programs are their own."""
        if self._scope is None:
            self._scope = _resolve_scope(self)
        return self._scope

    def parent_scope(self) -> Scope:
        """Scope of the parent, where a declaration on this node registers."""
        if self.parent is None:
            raise NoEnclosingScope(format_node(self.node))
        return self.parent.scope()

    def to_json(self, **kwargs: object) -> str:
        """JSON text of the underlying raw node."""
        return json.dumps(self.node, **kwargs)


def _wrap_children(parent: Node) -> tuple[Node, ...]:
    raw_children = child_nodes(parent.node)
    result: list[Node] = []
    for child in raw_children:
        if not is_node(child):
            raise MissingChild(format_node(parent.node))
        result.append(Node(child, parent))
    logger.debug("expanded %s: %d children", parent.type, len(result))
    return tuple(result)


def _collect_descendants(node: Node) -> tuple[Node, ...]:
    # Explicit stack: left-deep expression chains run thousands of levels deep.
    result: list[Node] = []
    stack: list[Node] = list(reversed(node.children()))
    while stack:
        current = stack.pop()
        result.append(current)
        stack.extend(reversed(current.children()))
    return tuple(result)


def _resolve_scope(node: Node) -> Scope:
    from .scope import SCOPE_KINDS, Scope

    pending: list[Node] = []
    current = node
    while True:
        if current._scope is not None:
            scope = current._scope
            break
        if current.type in SCOPE_KINDS:
            logger.debug("new scope at %s", current.type)
            scope = Scope(current)
            current._scope = scope
            break
        if current.parent is None:
            raise NoEnclosingScope(format_node(current.node))
        pending.append(current)
        current = current.parent
    for waiting in pending:
        waiting._scope = scope
    return scope


def wrap(ast: ASTNode) -> Node:
    """Wrap the root of a raw AST, normally a Program."""
    return Node(ast)

"""Child extraction for the SpiderMonkey Parser API node kinds.

Every supported kind maps to the ordered fields that hold its children.
Each field has a shape:

    ONE   a single required node
    OPT   a single node, left out when absent or null
    MANY  a list of nodes, spliced in order

The table was built by going through every node kind in the SpiderMonkey
Parser API docs, skipping the SpiderMonkey-only extensions (comprehensions,
generators, E4X, let expressions). Kinds not listed are rejected.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from .ast_compat import ASTNode, format_node, get, is_node, node_type
from .errors import MissingChild, UnsupportedNodeKind

logger = logging.getLogger(__name__)

ONE = "one"
OPT = "opt"
MANY = "many"

Field = tuple[str, str]

_LEAF: tuple[Field, ...] = ()

_GRAMMAR: dict[str, tuple[Field, ...]] = {
    # Programs and functions
    "Program": (("body", MANY),),
    "FunctionDeclaration": (("body", ONE),),
    "FunctionExpression": (("body", ONE),),
    "ArrowExpression": (("body", ONE),),
    # Statements
    "EmptyStatement": _LEAF,
    "BlockStatement": (("body", MANY),),
    "ExpressionStatement": (("expression", ONE),),
    "IfStatement": (("test", ONE), ("consequent", ONE), ("alternate", OPT)),
    "LabeledStatement": (("body", ONE),),
    "BreakStatement": _LEAF,
    "ContinueStatement": _LEAF,
    "WithStatement": (("object", ONE), ("body", ONE)),
    "SwitchStatement": (("discriminant", ONE), ("cases", MANY)),
    "ReturnStatement": (("argument", OPT),),
    "ThrowStatement": (("argument", ONE),),
    "TryStatement": (("block", ONE), ("handler", OPT), ("finalizer", OPT)),
    "WhileStatement": (("test", ONE), ("body", ONE)),
    "DoWhileStatement": (("body", ONE), ("test", ONE)),
    "ForStatement": (("init", OPT), ("test", OPT), ("update", OPT), ("body", ONE)),
    "ForInStatement": (("left", ONE), ("right", ONE), ("body", ONE)),
    "ForOfStatement": (("left", ONE), ("right", ONE), ("body", ONE)),
    "LetStatement": (("head", MANY), ("body", ONE)),
    "DebuggerStatement": _LEAF,
    # Declarations
    "VariableDeclaration": (("declarations", MANY),),
    "VariableDeclarator": (("init", ONE),),
    # Expressions
    "ThisExpression": _LEAF,
    "ArrayExpression": (("elements", MANY),),
    "ObjectExpression": (("properties", MANY),),
    "Property": (("key", ONE), ("value", ONE)),
    "SequenceExpression": (("expressions", MANY),),
    "UnaryExpression": (("argument", ONE),),
    "BinaryExpression": (("left", ONE), ("right", ONE)),
    "AssignmentExpression": (("left", ONE), ("right", ONE)),
    "UpdateExpression": (("argument", ONE),),
    "LogicalExpression": (("left", ONE), ("right", ONE)),
    "ConditionalExpression": (("test", ONE), ("consequent", ONE), ("alternate", ONE)),
    "NewExpression": (("callee", ONE), ("arguments", MANY)),
    "CallExpression": (("callee", ONE), ("arguments", MANY)),
    "MemberExpression": (("object", ONE), ("property", ONE)),
    # Only the argument form of yield carries a child; bare `yield` has none.
    "YieldExpression": (("argument", OPT),),
    # Clauses
    "SwitchCase": (("test", OPT), ("consequent", MANY)),
    "CatchClause": (("param", ONE), ("body", ONE)),
    # Miscellaneous
    "Identifier": _LEAF,
    "Literal": _LEAF,
}

GRAMMAR = MappingProxyType(_GRAMMAR)


def is_supported(kind: str) -> bool:
    """Check if kind is in the grammar table."""
    return kind in _GRAMMAR


def child_nodes(node: ASTNode) -> list[ASTNode | None]:
    """Return the ordered raw children of node.

    Absent optional fields are left out. A required field that is absent,
    or a null hole inside a list field, comes back as None so the caller
    can report it against the parent.
    """
    kind = node_type(node)
    fields = _GRAMMAR.get(kind)
    if fields is None:
        raise UnsupportedNodeKind(kind, format_node(node))
    result: list[ASTNode | None] = []
    for name, shape in fields:
        value = get(node, name)
        if shape == MANY:
            if isinstance(value, list):
                result.extend(value)
            else:
                result.append(None)
        elif shape == OPT:
            if value is not None:
                result.append(value)
        else:
            result.append(value)
    return result


def validate(node: ASTNode) -> None:
    """Expand the whole raw tree up front, raising on the first bad node in pre-order."""
    count = 0
    stack: list[ASTNode] = [node]
    while stack:
        current = stack.pop()
        count += 1
        children = child_nodes(current)
        for child in children:
            if not is_node(child):
                raise MissingChild(format_node(current))
        stack.extend(reversed(children))
    logger.debug("validated %d nodes under %s", count, node_type(node))

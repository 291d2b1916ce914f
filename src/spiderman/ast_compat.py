"""Compatibility layer for dict-based SpiderMonkey ASTs."""

ASTNode = dict[str, object]


def is_node(value: object) -> bool:
    """Check if value is a raw AST node (a mapping carrying a "type")."""
    return isinstance(value, dict) and "type" in value


def node_type(node: ASTNode) -> str:
    """Get node kind string."""
    kind = node.get("type", "")
    if isinstance(kind, str):
        return kind
    return ""


def is_type(node: object, type_names: list[str] | tuple[str, ...] | frozenset[str]) -> bool:
    """Check if node is one of the given AST kinds."""
    if not is_node(node):
        return False
    return node.get("type") in type_names


def get(node: ASTNode, attr: str, default: object = None) -> object:
    """Get attribute from AST node dict."""
    return node.get(attr, default)


def _json_type(value: object) -> str:
    """Name the JSON type of a primitive field value."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def format_node(node: ASTNode) -> str:
    """One-line digest of a raw node: `Kind (field:kind, list:[], flag:boolean, absent)`."""
    parts: list[str] = []
    for key, value in node.items():
        if is_node(value):
            parts.append(key + ":" + node_type(value))
        elif isinstance(value, list):
            parts.append(key + ":[]")
        elif value:
            parts.append(key + ":" + _json_type(value))
        else:
            parts.append(key)
    return node_type(node) + " (" + ", ".join(parts) + ")"

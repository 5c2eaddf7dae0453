"""Construction of JsonValue graphs from a Generic Node Tree."""

import logging
from typing import TYPE_CHECKING

from ._constants import (
    MAX_NESTING_DEPTH,
    NODE_ARRAY,
    NODE_BOOLEAN,
    NODE_NULL,
    NODE_NUMBER,
    NODE_OBJECT,
    NODE_STRING,
)
from ._exceptions import LimitError, MalformedLiteralError, UnknownNodeTypeError
from ._nodes import resolve_name
from ._types import JsonType
from ._value import JsonValue

if TYPE_CHECKING:
    from ._nodes import Node

__all__ = ["build"]

logger = logging.getLogger(__name__)

_BOOLEANS: dict[str, bool] = {"true": True, "false": False}


def build(node: "Node", *, max_depth: int = MAX_NESTING_DEPTH) -> JsonValue:
    """Build an immutable JsonValue graph from a Generic Node Tree.

    The root value is named after the root node (its ``item`` annotation if
    present, otherwise its tag). Number text is stored unparsed.

    Args:
        node: Root of the Generic Node Tree.
        max_depth: Maximum nesting depth; the root is depth 1.

    Returns:
        The root JsonValue.

    Raises:
        UnknownNodeTypeError: If a node has an unrecognized type.
        MalformedLiteralError: If a boolean node's text is not true/false.
        LimitError: If the tree nests deeper than ``max_depth``.
    """
    try:
        value = _build_node(node, resolve_name(node), 1, max_depth)
    except RecursionError:
        msg = f"nesting depth exceeds maximum {max_depth}"
        raise LimitError(msg) from None
    logger.debug("built %s value %r", value.type.name, value.name)
    return value


def _build_node(node: "Node", name: str, depth: int, max_depth: int) -> JsonValue:
    if depth > max_depth:
        msg = f"nesting depth {depth} exceeds maximum {max_depth} at {name!r}"
        raise LimitError(msg)

    node_type = node.type
    if node_type == NODE_NUMBER:
        return JsonValue(name, JsonType.NUMBER, node.text or "")
    if node_type == NODE_STRING:
        return JsonValue(name, JsonType.STRING, node.text or "")
    if node_type == NODE_BOOLEAN:
        text = node.text
        if text not in _BOOLEANS:
            raise MalformedLiteralError(name, text)
        return JsonValue(name, JsonType.BOOL, _BOOLEANS[text])
    if node_type == NODE_NULL:
        return JsonValue(name, JsonType.NULL)
    if node_type == NODE_ARRAY:
        elements = [
            _build_node(child, str(index), depth + 1, max_depth)
            for index, child in enumerate(node.children)
        ]
        return JsonValue(name, JsonType.ARRAY, elements)
    if node_type == NODE_OBJECT:
        members = _build_members(node, name, depth, max_depth)
        return JsonValue(name, JsonType.OBJECT, members)
    raise UnknownNodeTypeError(name, node_type)


def _build_members(
    node: "Node", name: str, depth: int, max_depth: int
) -> dict[str, JsonValue]:
    members: dict[str, JsonValue] = {}
    for child in node.children:
        key = resolve_name(child)
        if key in members:
            logger.debug("duplicate key %r in %r; keeping the last value", key, name)
        members[key] = _build_node(child, key, depth + 1, max_depth)
    return members

"""JSON text front end.

Tokenizing is delegated to the standard library ``json`` decoder. Its hooks
are used to keep number text verbatim and to keep object members as ordered
pairs, so the resulting Generic Node Tree carries duplicate keys through to
the builder unchanged.
"""

import json
import logging
from typing import TYPE_CHECKING, NoReturn

from ._builder import build
from ._constants import (
    ITEM_TAG,
    MAX_NESTING_DEPTH,
    NODE_ARRAY,
    NODE_BOOLEAN,
    NODE_NULL,
    NODE_NUMBER,
    NODE_OBJECT,
    NODE_STRING,
    ROOT_TAG,
    UTF8_BOM,
)
from ._exceptions import LimitError, ParseError
from ._nodes import GenericNode

if TYPE_CHECKING:
    from ._value import JsonValue

__all__ = ["parse", "parse_bytes", "parse_node_tree"]

logger = logging.getLogger(__name__)


class _NumberText(str):
    """Number literal text as it appeared in the source."""

    __slots__ = ()


class _MemberPairs(list[tuple[str, object]]):
    """Object members in source order, duplicates included."""

    __slots__ = ()


def _reject_constant(name: str) -> NoReturn:
    msg = f"invalid JSON constant: {name}"
    raise ParseError(msg)


def _to_node(value: object, tag: str, depth: int, max_depth: int) -> GenericNode:
    if depth > max_depth:
        msg = f"nesting depth {depth} exceeds maximum {max_depth}"
        raise LimitError(msg)
    if isinstance(value, _NumberText):
        return GenericNode(NODE_NUMBER, tag, text=str(value))
    if isinstance(value, str):
        return GenericNode(NODE_STRING, tag, text=value)
    if isinstance(value, bool):
        return GenericNode(NODE_BOOLEAN, tag, text="true" if value else "false")
    if value is None:
        return GenericNode(NODE_NULL, tag)
    if isinstance(value, _MemberPairs):
        members = tuple(
            _to_node(member, key, depth + 1, max_depth) for key, member in value
        )
        return GenericNode(NODE_OBJECT, tag, children=members)
    if isinstance(value, list):
        elements = tuple(
            _to_node(element, ITEM_TAG, depth + 1, max_depth) for element in value
        )
        return GenericNode(NODE_ARRAY, tag, children=elements)
    msg = f"unexpected decoded value of type {type(value).__name__}"
    raise ParseError(msg)


def parse_node_tree(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> GenericNode:
    """Tokenize JSON text into a Generic Node Tree.

    The root node is tagged ``root``; array elements are tagged ``item`` and
    object members are tagged with their key.

    Args:
        text: JSON document text.
        max_depth: Maximum nesting depth.

    Returns:
        The root node.

    Raises:
        ParseError: If the text is not valid JSON or uses NaN/Infinity.
        LimitError: If nesting exceeds ``max_depth``.
    """
    try:
        decoded = json.loads(
            text,
            parse_int=_NumberText,
            parse_float=_NumberText,
            parse_constant=_reject_constant,
            object_pairs_hook=_MemberPairs,
            strict=False,
        )
    except json.JSONDecodeError as err:
        logger.debug("rejected JSON input: %s", err)
        msg = f"invalid JSON: {err}"
        raise ParseError(msg) from err
    except RecursionError:
        msg = f"nesting depth exceeds maximum {max_depth}"
        raise LimitError(msg) from None
    try:
        return _to_node(decoded, ROOT_TAG, 1, max_depth)
    except RecursionError:
        msg = f"nesting depth exceeds maximum {max_depth}"
        raise LimitError(msg) from None


def parse(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> "JsonValue":
    """Parse JSON text into an immutable JsonValue named ``root``.

    Raises:
        ParseError: If the text is not valid JSON.
        LimitError: If nesting exceeds ``max_depth``.
    """
    return build(parse_node_tree(text, max_depth=max_depth), max_depth=max_depth)


def parse_bytes(
    data: bytes,
    encoding: str = "utf-8",
    *,
    max_depth: int = MAX_NESTING_DEPTH,
) -> "JsonValue":
    """Decode and parse a JSON document.

    A leading UTF-8 byte order mark is ignored.

    Args:
        data: Encoded JSON document.
        encoding: Codec name used to decode ``data``.
        max_depth: Maximum nesting depth.

    Raises:
        ParseError: If the bytes cannot be decoded or are not valid JSON.
        LimitError: If nesting exceeds ``max_depth``.
    """
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM) :]
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as err:
        msg = f"invalid {encoding} encoding: {err}"
        raise ParseError(msg) from err
    return parse(text, max_depth=max_depth)

"""Canonical JSON serialization of JsonValue graphs.

Output never contains insignificant whitespace. Numbers are emitted as their
stored text, members in storage order.
"""

from typing import TYPE_CHECKING

from ._constants import ESCAPE_SEQUENCE
from ._types import JsonType

if TYPE_CHECKING:
    from ._value import JsonValue

__all__ = ["escape_string", "serialize"]


def escape_string(text: str) -> str:
    """Escape a string for embedding between JSON double quotes.

    Backslash, double quote, newline, carriage return, tab, form feed,
    backspace and forward slash are escaped, in that order. The slash escape
    keeps ``</script>`` out of JSON embedded in markup.

    Args:
        text: The unescaped string.

    Returns:
        The escaped string, without surrounding quotes.
    """
    for raw, escaped in ESCAPE_SEQUENCE:
        text = text.replace(raw, escaped)
    return text


def _quote(text: str) -> str:
    return f'"{escape_string(text)}"'


def serialize(value: "JsonValue") -> str:
    """Serialize a value to canonical JSON text.

    Args:
        value: The root of the graph to serialize.

    Returns:
        Minimal JSON text for the value.
    """
    match value.type:
        case JsonType.NUMBER:
            return value.raw_number()
        case JsonType.STRING:
            return _quote(value.as_string())
        case JsonType.BOOL:
            return "true" if value.as_bool() else "false"
        case JsonType.NULL:
            return "null"
        case JsonType.ARRAY:
            return "[" + ",".join(serialize(element) for element in value) + "]"
        case JsonType.OBJECT:
            members = (
                f"{_quote(key)}:{serialize(member)}" for key, member in value.items()
            )
            return "{" + ",".join(members) + "}"
        case _:
            msg = f"cannot serialize element {value.name!r} of type {value.type!r}"
            raise ValueError(msg)

"""Type definitions for jsonelement.

This module contains the JsonType flag enum. It has no dependencies on
other jsonelement modules so that _exceptions.py, _value.py and _builder.py
can all import from it.
"""

from enum import Flag


class JsonType(Flag):
    """Variant tag of a JsonValue.

    Tags are bit flags so that a set of acceptable variants can be tested
    with a single intersection, e.g. ``JsonType.ARRAY | JsonType.OBJECT``.
    """

    UNDEFINED = 0
    NUMBER = 1
    STRING = 1 << 1
    ARRAY = 1 << 2
    OBJECT = 1 << 3
    BOOL = 1 << 4
    NULL = 1 << 5

    SCALAR = NUMBER | STRING | BOOL | NULL
    CONTAINER = ARRAY | OBJECT
    ANY = SCALAR | CONTAINER

    def describe(self) -> str:
        """Return a readable list of the variants in this set.

        >>> (JsonType.ARRAY | JsonType.OBJECT).describe()
        '<ARRAY> or <OBJECT>'
        """
        names = [f"<{member.name}>" for member in _VARIANTS if member & self]
        if not names:
            return "<UNDEFINED>"
        return " or ".join(names)


_VARIANTS: tuple[JsonType, ...] = (
    JsonType.NUMBER,
    JsonType.STRING,
    JsonType.ARRAY,
    JsonType.OBJECT,
    JsonType.BOOL,
    JsonType.NULL,
)

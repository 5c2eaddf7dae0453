"""Exception hierarchy for jsonelement.

Every exception derives from JsonElementError and from the builtin exception
a caller would expect for the same failure, so ``except KeyError`` and
``except TypeError`` keep working against a JsonValue.

Construction errors (ConstructionError and subclasses, ParseError) abort the
whole build. Access errors are local to the call that raised them.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import JsonType

__all__ = [
    "ConstructionError",
    "IndexOutOfRangeError",
    "JsonElementError",
    "KeyNotFoundError",
    "LimitError",
    "MalformedLiteralError",
    "NumericParseError",
    "ParseError",
    "RangeOverflowError",
    "TypeMismatchError",
    "UnknownNodeTypeError",
]


class JsonElementError(Exception):
    """Base class for all jsonelement errors."""


class ConstructionError(JsonElementError, ValueError):
    """A Generic Node Tree could not be turned into a JsonValue."""


class UnknownNodeTypeError(ConstructionError):
    """A node declared a type discriminant outside the recognized set."""

    def __init__(self, name: str, node_type: "str | None") -> None:
        self.name: str = name
        self.node_type: str | None = node_type
        msg = f"node {name!r} has unknown type {node_type!r}"
        super().__init__(msg)


class MalformedLiteralError(ConstructionError):
    """A boolean node's text is not exactly ``true`` or ``false``."""

    def __init__(self, name: str, text: "str | None") -> None:
        self.name: str = name
        self.text: str | None = text
        msg = f"node {name!r} has malformed boolean literal {text!r}"
        super().__init__(msg)


class LimitError(ConstructionError):
    """Input nesting exceeds the configured maximum depth."""


class ParseError(JsonElementError, ValueError):
    """Raw JSON text could not be tokenized into a node tree."""


class NumericParseError(JsonElementError, ValueError):
    """A number's text cannot be read as the requested numeric form."""

    def __init__(
        self, name: str, text: str, form: str, reason: str = "is not a valid"
    ) -> None:
        self.name: str = name
        self.text: str = text
        self.form: str = form
        msg = f"element {name!r} value {text!r} {reason} {form}"
        super().__init__(msg)


class RangeOverflowError(NumericParseError, OverflowError):
    """A parsed integer does not fit the requested width."""

    def __init__(self, name: str, text: str, form: str) -> None:
        super().__init__(name, text, form, reason="is out of range for")


class TypeMismatchError(JsonElementError, TypeError):
    """An accessor was called on a value of the wrong variant."""

    def __init__(self, name: str, actual: "JsonType", expected: "JsonType") -> None:
        self.name: str = name
        self.actual: JsonType = actual
        self.expected: JsonType = expected
        msg = (
            f"element {name!r} is {actual.describe()}, "
            f"expected {expected.describe()}"
        )
        super().__init__(msg)


class KeyNotFoundError(JsonElementError, KeyError):
    """An object has no member with the requested key."""

    def __init__(self, key: str, name: str) -> None:
        self.key: str = key
        self.name: str = name
        super().__init__(key)

    def __str__(self) -> str:
        return f"key {self.key!r} does not exist in [{self.name}]"


class IndexOutOfRangeError(JsonElementError, IndexError):
    """An array index is outside ``[0, length)``."""

    def __init__(self, index: int, length: int, name: str) -> None:
        self.index: int = index
        self.length: int = length
        self.name: str = name
        msg = f"index {index} is out of range for [{name}] of length {length}"
        super().__init__(msg)

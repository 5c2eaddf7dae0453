"""Immutable, type-tagged JSON value.

JsonValue is a closed tagged union over the six JSON variants. The tag is a
JsonType flag and the payload is fixed at construction:

- NUMBER: the raw number text, parsed only when a numeric accessor runs
- STRING: the unescaped string
- BOOL: a bool
- NULL: None
- ARRAY: a tuple of JsonValue in source order
- OBJECT: a read-only mapping of key to JsonValue in insertion order

Every accessor checks the tag first and raises TypeMismatchError naming the
value and the accepted variants when it does not match.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, NoReturn, TypeAlias, cast, overload

from ._exceptions import IndexOutOfRangeError, KeyNotFoundError, TypeMismatchError
from ._numbers import numeric_key, parse_double, parse_integer, parse_integer_lenient
from ._serialize import serialize
from ._types import JsonType

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["JsonValue"]

Container: TypeAlias = "tuple[JsonValue, ...] | Mapping[str, JsonValue]"
Payload: TypeAlias = "str | bool | None | Container"


class JsonValue:
    """A node of an immutable JSON value graph.

    Instances are created by ``build`` (or the ``parse`` front ends) and are
    never modified afterwards, so a graph can be shared between threads
    without locking.

    Attributes:
        name: How this value was reached from its parent: the member key for
            object members, the decimal index for array elements, or the
            root node's own name.
        type: The variant tag.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_name", "_payload", "_type")

    _name: str
    _type: JsonType
    _payload: Payload

    def __init__(self, name: str, json_type: JsonType, payload: Payload = None) -> None:
        if json_type is JsonType.ARRAY:
            payload = tuple(cast("Iterable[JsonValue]", payload))
        elif json_type is JsonType.OBJECT:
            payload = MappingProxyType(dict(cast("Mapping[str, JsonValue]", payload)))
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_type", json_type)
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, attr: str, value: object) -> NoReturn:
        msg = f"{type(self).__name__} is immutable; cannot set {attr!r}"
        raise AttributeError(msg)

    def __delattr__(self, attr: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable; cannot delete {attr!r}"
        raise AttributeError(msg)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> JsonType:
        return self._type

    def is_type(self, types: JsonType) -> bool:
        """Return True if this value's tag is in ``types``.

        Args:
            types: One variant or a union of variants, e.g.
                ``JsonType.ARRAY | JsonType.OBJECT``.
        """
        return bool(self._type & types)

    def is_null(self) -> bool:
        return self._type is JsonType.NULL

    def _require(self, types: JsonType) -> None:
        if not self._type & types:
            raise TypeMismatchError(self._name, self._type, types)

    # Scalars

    def raw_number(self) -> str:
        """Return the number text exactly as it appeared in the source.

        Raises:
            TypeMismatchError: If this value is not a NUMBER.
        """
        self._require(JsonType.NUMBER)
        return cast("str", self._payload)

    def as_int(self) -> int:
        """Read the number as a 32-bit integer.

        Raises:
            TypeMismatchError: If this value is not a NUMBER.
            NumericParseError: If the text is not an integer literal.
            RangeOverflowError: If the integer does not fit in 32 bits.
        """
        return parse_integer(self.raw_number(), self._name, "int")

    def as_long(self) -> int:
        """Read the number as a 64-bit integer.

        Raises:
            TypeMismatchError: If this value is not a NUMBER.
            NumericParseError: If the text is not an integer literal.
            RangeOverflowError: If the integer does not fit in 64 bits.
        """
        return parse_integer(self.raw_number(), self._name, "long")

    def as_int_lenient(self) -> int:
        """Read the number as a 32-bit integer, truncating fractions.

        Text that is not an integer literal is read as a float and truncated
        toward zero.

        Raises:
            TypeMismatchError: If this value is not a NUMBER.
            NumericParseError: If the text is neither integer nor float.
            RangeOverflowError: If the result does not fit in 32 bits.
        """
        return parse_integer_lenient(self.raw_number(), self._name, "int")

    def as_long_lenient(self) -> int:
        """Read the number as a 64-bit integer, truncating fractions."""
        return parse_integer_lenient(self.raw_number(), self._name, "long")

    def as_double(self) -> float:
        """Read the number as a float.

        Raises:
            TypeMismatchError: If this value is not a NUMBER.
            NumericParseError: If the text is not a float literal.
        """
        return parse_double(self.raw_number(), self._name)

    def as_string(self) -> str:
        self._require(JsonType.STRING)
        return cast("str", self._payload)

    def as_bool(self) -> bool:
        self._require(JsonType.BOOL)
        return cast("bool", self._payload)

    # Containers

    def _members(self) -> "Mapping[str, JsonValue]":
        self._require(JsonType.OBJECT)
        return cast("Mapping[str, JsonValue]", self._payload)

    def _elements(self) -> "tuple[JsonValue, ...]":
        self._require(JsonType.ARRAY)
        return cast("tuple[JsonValue, ...]", self._payload)

    def get_member(self, key: str) -> "JsonValue":
        """Return the object member stored under ``key``.

        Raises:
            TypeMismatchError: If this value is not an OBJECT.
            KeyNotFoundError: If there is no such member.
        """
        members = self._members()
        try:
            return members[key]
        except KeyError:
            raise KeyNotFoundError(key, self._name) from None

    def contains_key(self, key: str) -> bool:
        """Return True if the object has a member named ``key``.

        Raises:
            TypeMismatchError: If this value is not an OBJECT.
        """
        return key in self._members()

    def keys(self) -> list[str]:
        """Return member keys in storage order."""
        return list(self._members())

    def items(self) -> "list[tuple[str, JsonValue]]":
        """Return (key, member) pairs in storage order."""
        return list(self._members().items())

    def get_element(self, index: int) -> "JsonValue":
        """Return the array element at ``index``.

        Only ``0 <= index < length`` is accepted; negative indices do not
        count from the end.

        Raises:
            TypeMismatchError: If this value is not an ARRAY.
            IndexOutOfRangeError: If the index is out of range.
        """
        elements = self._elements()
        if not 0 <= index < len(elements):
            raise IndexOutOfRangeError(index, len(elements), self._name)
        return elements[index]

    def length(self) -> int:
        """Return the element or member count.

        Raises:
            TypeMismatchError: If this value is not an ARRAY or OBJECT.
        """
        self._require(JsonType.CONTAINER)
        return len(cast("Container", self._payload))

    # Python protocols

    @overload
    def __getitem__(self, key: str) -> "JsonValue": ...  # pragma: no cover

    @overload
    def __getitem__(self, key: int) -> "JsonValue": ...  # pragma: no cover

    def __getitem__(self, key: "str | int") -> "JsonValue":
        """Look up a member by key or an element by index.

        Raises:
            TypeError: If ``key`` is neither a string nor an integer.
        """
        if isinstance(key, str):
            return self.get_member(key)
        if isinstance(key, int) and not isinstance(key, bool):
            return self.get_element(key)
        msg = f"key must be str or int, got {type(key).__name__}"
        raise TypeError(msg)

    def __contains__(self, key: object) -> bool:
        members = self._members()
        if isinstance(key, str):
            return key in members
        return False

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        # Defining __len__ would otherwise make empty containers falsy and
        # scalars raise.
        return True

    def __iter__(self) -> "Iterator[JsonValue]":
        """Iterate over array elements or object member values.

        Scalars iterate as empty; iteration never raises.
        """
        if self._type is JsonType.ARRAY:
            return iter(cast("tuple[JsonValue, ...]", self._payload))
        if self._type is JsonType.OBJECT:
            return iter(cast("Mapping[str, JsonValue]", self._payload).values())
        return iter(())

    def __eq__(self, other: object) -> bool:
        """Compare variant and payload; names are not compared.

        Numbers compare by numeric value, so ``1.0`` equals ``1.00``.
        """
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is JsonType.NUMBER:
            return numeric_key(cast("str", self._payload)) == numeric_key(
                cast("str", other._payload)
            )
        if self._type is JsonType.OBJECT:
            return dict(self._members()) == dict(other._members())
        return self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return serialize(self)

    def __repr__(self) -> str:
        return (
            f"JsonValue(name={self._name!r}, type={self._type.name}, {serialize(self)})"
        )

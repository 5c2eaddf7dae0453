"""A read-only, strongly typed JSON document model."""

from importlib.metadata import version

from ._builder import build
from ._exceptions import (
    ConstructionError,
    IndexOutOfRangeError,
    JsonElementError,
    KeyNotFoundError,
    LimitError,
    MalformedLiteralError,
    NumericParseError,
    ParseError,
    RangeOverflowError,
    TypeMismatchError,
    UnknownNodeTypeError,
)
from ._nodes import GenericNode, Node
from ._parser import parse, parse_bytes, parse_node_tree
from ._serialize import escape_string, serialize
from ._types import JsonType
from ._value import JsonValue
from ._xml import XmlNode

__version__ = version("jsonelement")

__all__ = [
    "ConstructionError",
    "GenericNode",
    "IndexOutOfRangeError",
    "JsonElementError",
    "JsonType",
    "JsonValue",
    "KeyNotFoundError",
    "LimitError",
    "MalformedLiteralError",
    "Node",
    "NumericParseError",
    "ParseError",
    "RangeOverflowError",
    "TypeMismatchError",
    "UnknownNodeTypeError",
    "XmlNode",
    "__version__",
    "build",
    "escape_string",
    "parse",
    "parse_bytes",
    "parse_node_tree",
    "serialize",
]

"""Constants shared across jsonelement modules."""

from typing import Final

# Checked integer widths
MIN_INT: Final[int] = -(2**31)
MAX_INT: Final[int] = 2**31 - 1
MIN_LONG: Final[int] = -(2**63)
MAX_LONG: Final[int] = 2**63 - 1

# Generic Node Tree type discriminants
NODE_NUMBER: Final[str] = "number"
NODE_STRING: Final[str] = "string"
NODE_BOOLEAN: Final[str] = "boolean"
NODE_NULL: Final[str] = "null"
NODE_ARRAY: Final[str] = "array"
NODE_OBJECT: Final[str] = "object"

# Attribute carrying an explicit member name in XML-shaped trees
ITEM_ATTRIBUTE: Final[str] = "item"
TYPE_ATTRIBUTE: Final[str] = "type"

# Tag used for array children and for the document root
ITEM_TAG: Final[str] = "item"
ROOT_TAG: Final[str] = "root"

# Deep enough for real documents, shallow enough to stay clear of the
# interpreter recursion limit while building.
MAX_NESTING_DEPTH: Final[int] = 256

# Applied in this order; backslash first so later escapes are not doubled.
ESCAPE_SEQUENCE: Final[tuple[tuple[str, str], ...]] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("\f", "\\f"),
    ("\b", "\\b"),
    ("/", "\\/"),
)

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"

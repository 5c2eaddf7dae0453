"""Generic Node Tree: the input shape consumed by the builder.

A Generic Node Tree is produced by a JSON front end (see _parser.py and
_xml.py). Each node declares its JSON type as a string discriminant, carries
scalar text or an ordered list of children, and is labeled by a structural
tag plus an optional explicit name.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["GenericNode", "Node", "resolve_name"]


@runtime_checkable
class Node(Protocol):
    """Structural interface of a Generic Node Tree node.

    Attributes:
        type: One of ``number``, ``string``, ``boolean``, ``null``,
            ``array`` or ``object``. Anything else is rejected by the builder.
        text: Scalar payload; ignored for arrays and objects.
        children: Ordered child nodes; empty for scalars.
        tag: Structural label of the node. For object members this is the
            member key unless ``item`` overrides it.
        item: Explicit member name, or None. Trees that represent every
            child with the same tag carry the real key here.
    """

    @property
    def type(self) -> "str | None": ...

    @property
    def text(self) -> "str | None": ...

    @property
    def children(self) -> "Sequence[Node]": ...

    @property
    def tag(self) -> str: ...

    @property
    def item(self) -> "str | None": ...


@dataclass(frozen=True, slots=True)
class GenericNode:
    """Plain in-memory Node implementation."""

    type: "str | None"
    tag: str
    text: "str | None" = None
    children: "tuple[GenericNode, ...]" = field(default_factory=tuple)
    item: "str | None" = None


def resolve_name(node: Node) -> str:
    """Return the name a node is known by.

    The explicit ``item`` annotation wins; otherwise the structural tag is
    used.
    """
    item = node.item
    if item is not None:
        return item
    return node.tag

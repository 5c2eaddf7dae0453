"""Generic Node Tree adapter for the JSON-to-XML mapping.

In this mapping every element carries a ``type`` attribute, array items are
all tagged ``item``, and object members are tagged with their key. Keys that
are not valid XML names are written as ``<a:item item="the key">``, so the
real key must be recovered from the ``item`` attribute rather than the tag.
"""

from typing import TYPE_CHECKING

from ._constants import ITEM_ATTRIBUTE, NODE_STRING, TYPE_ATTRIBUTE

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

__all__ = ["XmlNode"]


class XmlNode:
    """Read-only Node view over an ElementTree element."""

    __slots__ = ("_element",)

    def __init__(self, element: "Element") -> None:
        self._element = element

    @property
    def type(self) -> "str | None":
        # Elements without a type attribute are strings in this mapping.
        return self._element.get(TYPE_ATTRIBUTE, NODE_STRING)

    @property
    def text(self) -> "str | None":
        return "".join(self._element.itertext())

    @property
    def children(self) -> "list[XmlNode]":
        return [XmlNode(child) for child in self._element]

    @property
    def tag(self) -> str:
        """Local name of the element, without any namespace."""
        tag = self._element.tag
        if tag.startswith("{"):
            return tag.rpartition("}")[2]
        return tag.rpartition(":")[2]

    @property
    def item(self) -> "str | None":
        return self._element.get(ITEM_ATTRIBUTE)

    def __repr__(self) -> str:
        return f"XmlNode(tag={self.tag!r}, type={self.type!r})"

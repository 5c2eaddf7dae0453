"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from jsonelement import GenericNode, JsonValue, build, parse

if TYPE_CHECKING:
    from collections.abc import Callable

SCENARIO_TEXT = '{"a":1,"b":[true,null,"x"]}'


@pytest.fixture
def scenario() -> JsonValue:
    """Provide the value built from ``{"a":1,"b":[true,null,"x"]}``.

    Returns:
        The root JsonValue, named ``root``.
    """
    return parse(SCENARIO_TEXT)


@pytest.fixture
def make_number() -> "Callable[[str], JsonValue]":
    """Factory fixture for NUMBER values with arbitrary text.

    The JSON front end only produces valid number literals, so tests that
    need malformed or locale-formatted text build through a GenericNode.

    Example:
        def test_comma(make_number) -> None:
            value = make_number("1,5")
            with pytest.raises(NumericParseError):
                value.as_double()
    """

    def create_number(text: str) -> JsonValue:
        return build(GenericNode("number", "n", text=text))

    return create_number

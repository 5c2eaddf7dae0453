import pytest

from jsonelement import JsonType


class TestJsonType:
    def test_variants_are_distinct_bits(self) -> None:
        variants = [
            JsonType.NUMBER,
            JsonType.STRING,
            JsonType.ARRAY,
            JsonType.OBJECT,
            JsonType.BOOL,
            JsonType.NULL,
        ]
        for index, variant in enumerate(variants):
            for other in variants[index + 1 :]:
                assert not variant & other

    def test_undefined_is_empty(self) -> None:
        assert JsonType.UNDEFINED.value == 0

    def test_composites(self) -> None:
        assert JsonType.CONTAINER == JsonType.ARRAY | JsonType.OBJECT
        assert JsonType.NUMBER in JsonType.SCALAR
        assert JsonType.ARRAY not in JsonType.SCALAR
        assert JsonType.ANY == JsonType.SCALAR | JsonType.CONTAINER


class TestDescribe:
    @pytest.mark.parametrize(
        ("types", "expected"),
        [
            (JsonType.NUMBER, "<NUMBER>"),
            (JsonType.ARRAY | JsonType.OBJECT, "<ARRAY> or <OBJECT>"),
            (JsonType.NULL | JsonType.NUMBER, "<NUMBER> or <NULL>"),
            (JsonType.UNDEFINED, "<UNDEFINED>"),
        ],
        ids=["single", "container", "ordered", "undefined"],
    )
    def test_describe(self, types: JsonType, expected: str) -> None:
        assert types.describe() == expected

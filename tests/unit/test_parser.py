import logging

import pytest

from jsonelement import (
    GenericNode,
    JsonType,
    LimitError,
    ParseError,
    parse,
    parse_bytes,
    parse_node_tree,
)


class TestParseNodeTree:
    def test_root_is_tagged_root(self) -> None:
        node = parse_node_tree("[]")
        assert node.tag == "root"
        assert node.type == "array"

    def test_array_items_are_tagged_item(self) -> None:
        node = parse_node_tree('[1,"a"]')
        assert [child.tag for child in node.children] == ["item", "item"]
        assert [child.type for child in node.children] == ["number", "string"]

    def test_object_members_are_tagged_with_key(self) -> None:
        node = parse_node_tree('{"a":true,"b":null}')
        assert node.children == (
            GenericNode("boolean", "a", text="true"),
            GenericNode("null", "b"),
        )

    def test_numbers_keep_source_text(self) -> None:
        node = parse_node_tree("[1.0,1E+2,-0,12345678901234567890]")
        assert [child.text for child in node.children] == [
            "1.0",
            "1E+2",
            "-0",
            "12345678901234567890",
        ]

    def test_duplicate_keys_are_kept(self) -> None:
        node = parse_node_tree('{"a":1,"a":2}')
        assert [(child.tag, child.text) for child in node.children] == [
            ("a", "1"),
            ("a", "2"),
        ]


class TestParse:
    def test_scalar_documents(self) -> None:
        assert parse("42").raw_number() == "42"
        assert parse('"s"').as_string() == "s"
        assert parse("true").as_bool() is True
        assert parse("null").type is JsonType.NULL

    def test_root_is_named_root(self) -> None:
        assert parse("{}").name == "root"

    def test_duplicate_keys_last_write_wins(self) -> None:
        assert parse('{"id":1,"id":2}')["id"].as_int() == 2

    def test_raw_control_characters_are_accepted(self) -> None:
        assert parse('"a\tb"').as_string() == "a\tb"

    @pytest.mark.parametrize(
        "text",
        ['{"a":1', "[1,]", "", "tru", "{'a':1}", "01"],
        ids=["unclosed", "trailing_comma", "empty", "bad_literal", "single_quotes", "leading_zero"],
    )
    def test_rejects_invalid_json(self, text: str) -> None:
        with pytest.raises(ParseError, match="invalid JSON"):
            _ = parse(text)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite_constants(self, constant: str) -> None:
        with pytest.raises(ParseError, match=f"invalid JSON constant: {constant}"):
            _ = parse(f"[{constant}]")

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            caplog.at_level(logging.DEBUG, logger="jsonelement._parser"),
            pytest.raises(ParseError),
        ):
            _ = parse("{")
        assert "rejected JSON input" in caplog.text

    def test_parse_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            _ = parse("[")


class TestNestingDepth:
    def test_custom_max_depth(self) -> None:
        text = '{"a":{"b":{"c":1}}}'  # depth 4
        assert str(parse(text, max_depth=4)) == text
        with pytest.raises(LimitError, match="nesting depth 4 exceeds maximum 3"):
            _ = parse(text, max_depth=3)

    def test_extremely_deep_nesting_raises_limit_error(self) -> None:
        text = "[" * 2000 + "1" + "]" * 2000
        with pytest.raises(LimitError, match="nesting depth"):
            _ = parse(text)

    @pytest.mark.parametrize("depth", [600, 2000], ids=["moderate", "extreme"])
    def test_raised_limit_still_reports_stack_exhaustion(self, depth: int) -> None:
        text = "[" * depth + "1" + "]" * depth
        with pytest.raises(LimitError, match="nesting depth exceeds maximum 1000000"):
            _ = parse(text, max_depth=10**6)


class TestParseBytes:
    def test_utf8(self) -> None:
        assert parse_bytes('{"name":"café"}'.encode())["name"].as_string() == "café"

    def test_strips_utf8_bom(self) -> None:
        assert parse_bytes(b'\xef\xbb\xbf{"id":1}')["id"].as_int() == 1

    def test_other_encoding(self) -> None:
        data = '["é"]'.encode("utf-16")
        assert parse_bytes(data, "utf-16")[0].as_string() == "é"

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ParseError, match="invalid utf-8 encoding"):
            _ = parse_bytes(b'"\xff"')

    def test_invalid_json_after_decoding(self) -> None:
        with pytest.raises(ParseError, match="invalid JSON"):
            _ = parse_bytes(b"{")

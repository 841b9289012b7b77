"""Tests for format selection and fallbacks."""

from dataclasses import dataclass
from typing import Any

import pytest

from boxlog.core.exceptions import InvalidFormatError
from boxlog.formatting import classify, format_message
from boxlog.formatting.payload import OpaquePayload, StructuredPayload, TextPayload, describe
from boxlog.models.record import RenderFormat


@dataclass
class User:
    id: int
    name: str


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no description")


class TestClassify:
    """Tests for payload classification."""

    def test_text(self) -> None:
        """Test strings are text payloads."""
        assert classify("hi") == TextPayload("hi")

    def test_scalars_are_opaque(self) -> None:
        """Test numbers and None are opaque."""
        assert classify(42) == OpaquePayload("42")
        assert classify(None) == OpaquePayload("None")

    def test_containers_are_structured(self) -> None:
        """Test containers and objects are structured."""
        assert isinstance(classify([1]), StructuredPayload)
        assert isinstance(classify(User(1, "a")), StructuredPayload)

    def test_describe_never_raises(self) -> None:
        """Test a failing __str__ still produces text."""
        assert describe(Unprintable()) == "<Unprintable instance>"


class TestFormatMessage:
    """Tests for format_message."""

    def test_plain_text(self) -> None:
        """Test plain format leaves text untouched."""
        assert format_message('{"status":"success"}', "plain") == '{"status":"success"}'

    def test_plain_structured(self) -> None:
        """Test plain format uses the generic string form."""
        assert format_message({"a": 1}, RenderFormat.PLAIN) == "{'a': 1}"

    def test_model_text_reindented(self) -> None:
        """Test model format re-indents descriptions in text."""
        assert format_message("User(id: 1, name: Alex)", "model") == (
            "User(\n  id: 1,\n  name: Alex\n)"
        )

    def test_model_structured(self) -> None:
        """Test model format renders objects."""
        assert format_message(User(1, "Alex"), "model") == 'User(\n  id: 1,\n  name: "Alex"\n)'

    def test_codable_alias(self) -> None:
        """Test the codable name selects model format."""
        assert format_message(User(1, "Alex"), "codable") == format_message(User(1, "Alex"), "model")

    def test_model_fallback_on_cycle(self) -> None:
        """Test unencodable payloads fall back to the re-indented string form."""
        cyclic: list[Any] = []
        cyclic.append(cyclic)
        assert format_message(cyclic, "model") == "[\n  [\n    ...\n  ]\n]"

    def test_json_text(self) -> None:
        """Test JSON format expands embedded JSON."""
        assert format_message('{"status":"success"}', "json") == '{\n  "status": "success"\n}'

    def test_json_malformed_falls_back(self) -> None:
        """Test malformed JSON never raises."""
        assert format_message("{not json", "json") == "{not json"

    def test_json_scalar_falls_back(self) -> None:
        """Test scalars fall back to their string form."""
        assert format_message(42, "json") == "42"
        assert format_message(42, "model") == "42"

    def test_json_fallback_reindents(self) -> None:
        """Test the fallback re-indents bracketed descriptions."""
        assert format_message("Items(a, b) {oops", "json") == "Items(\n  a,\n  b\n) {oops"

    def test_json_structured(self) -> None:
        """Test JSON format encodes objects."""
        assert format_message([User(1, "Alex")], "json") == (
            '[\n  {\n    "id": 1,\n    "name": "Alex"\n  }\n]'
        )

    def test_unprintable_payload(self) -> None:
        """Test every tier survives a payload whose __str__ fails."""
        for fmt in RenderFormat:
            assert isinstance(format_message(Unprintable(), fmt), str)

    def test_deeply_nested_json_text_falls_back(self) -> None:
        """Test JSON text nested past the recursion limit is re-indented."""
        output = format_message("[" * 2000 + "]" * 2000, "json")
        assert output.startswith("[\n  [\n    [")
        assert output.endswith("  ]\n]")

    @pytest.mark.parametrize("fmt", list(RenderFormat))
    def test_deeply_nested_value(self, fmt: RenderFormat) -> None:
        """Test every format survives a deeply nested structure."""
        nested: list[Any] = []
        for _ in range(2000):
            nested = [nested]
        assert isinstance(format_message(nested, fmt), str)

    def test_unknown_format_rejected(self) -> None:
        """Test unknown format names are rejected at the boundary."""
        with pytest.raises(InvalidFormatError):
            format_message("x", "yaml")

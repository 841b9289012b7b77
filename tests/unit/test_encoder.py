"""Tests for the structural encoder."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

import pytest
from pydantic import BaseModel

from boxlog.core.exceptions import PayloadEncodingError
from boxlog.formatting.encoder import Describable, derive_type_name, encode_tree


@dataclass
class User:
    id: int
    name: str


class Role(Enum):
    ADMIN = "admin"


class Account(BaseModel):
    owner: str
    balance: float


class Button:
    def __init__(self, title: str):
        self.title = title
        self.enabled = True
        self._private = "hidden"


class Toggle:
    def __log_fields__(self) -> dict[str, Any]:
        return {"isOn": False}


class Broken:
    def __log_fields__(self) -> dict[str, Any]:
        raise RuntimeError("not ready")


class Outer:
    class Inner:
        pass


class TestEncodeTree:
    """Tests for encode_tree."""

    def test_scalars(self) -> None:
        """Test scalars encode to themselves."""
        assert encode_tree(1) == 1
        assert encode_tree("x") == "x"
        assert encode_tree(None) is None
        assert encode_tree(True) is True
        assert encode_tree(1.5) == 1.5

    def test_mapping_keys_stringified(self) -> None:
        """Test non-string keys become strings."""
        assert encode_tree({1: "a", "b": [1, 2]}) == {"1": "a", "b": [1, 2]}

    def test_tuple_becomes_list(self) -> None:
        """Test tuples encode as lists."""
        assert encode_tree((1, (2, 3))) == [1, [2, 3]]

    def test_set_sorted(self) -> None:
        """Test sets encode in a stable order."""
        assert encode_tree({"b", "a", "c"}) == ["a", "b", "c"]

    def test_dataclass(self) -> None:
        """Test dataclass fields become keys."""
        assert encode_tree(User(1, "Alex")) == {"id": 1, "name": "Alex"}

    def test_pydantic_model(self) -> None:
        """Test pydantic model fields become keys."""
        assert encode_tree(Account(owner="Jamie", balance=2.5)) == {
            "owner": "Jamie",
            "balance": 2.5,
        }

    def test_describable(self) -> None:
        """Test objects describing themselves are used as-is."""
        assert isinstance(Toggle(), Describable)
        assert encode_tree(Toggle()) == {"isOn": False}

    def test_plain_object_public_attributes(self) -> None:
        """Test plain objects expose public attributes only."""
        assert encode_tree(Button("OK")) == {"title": "OK", "enabled": True}

    def test_enum_value(self) -> None:
        """Test enums encode as their value."""
        assert encode_tree([Role.ADMIN]) == ["admin"]

    def test_special_scalars_as_strings(self) -> None:
        """Test dates and UUIDs use their string form."""
        uid = UUID("12345678-1234-5678-1234-567812345678")
        stamp = datetime(2025, 1, 2, 3, 4, 5)
        assert encode_tree({"id": uid, "at": stamp}) == {
            "id": "12345678-1234-5678-1234-567812345678",
            "at": "2025-01-02T03:04:05",
        }

    def test_unencodable_field_falls_back_to_string(self) -> None:
        """Test values without fields encode as their string form."""
        assert encode_tree({"fn": len}) == {"fn": str(len)}

    def test_cycle_raises(self) -> None:
        """Test reference cycles are reported."""
        cyclic: list[Any] = []
        cyclic.append(cyclic)
        with pytest.raises(PayloadEncodingError) as exc_info:
            encode_tree(cyclic)
        assert exc_info.value.code == "PAYLOAD_NOT_ENCODABLE"

    def test_shared_reference_is_not_a_cycle(self) -> None:
        """Test the same object twice in siblings is fine."""
        shared = {"a": 1}
        assert encode_tree([shared, shared]) == [{"a": 1}, {"a": 1}]

    def test_non_finite_float_raises(self) -> None:
        """Test NaN cannot be encoded."""
        with pytest.raises(PayloadEncodingError):
            encode_tree({"x": math.nan})

    def test_failing_describable_raises(self) -> None:
        """Test errors from __log_fields__ become encoding errors."""
        with pytest.raises(PayloadEncodingError):
            encode_tree({"widget": Broken()})

    def test_too_deep_raises(self) -> None:
        """Test runaway nesting is reported."""
        deep: Any = 0
        for _ in range(100):
            deep = [deep]
        with pytest.raises(PayloadEncodingError):
            encode_tree(deep)


class TestDeriveTypeName:
    """Tests for derive_type_name."""

    def test_object(self) -> None:
        """Test the payload's own type is used."""
        assert derive_type_name(User(1, "a")) == "User"

    def test_sequence_uses_first_element(self) -> None:
        """Test a list is named after its first element."""
        assert derive_type_name([User(1, "a"), User(2, "b")]) == "User"

    def test_empty_sequence(self) -> None:
        """Test an empty list has no record name."""
        assert derive_type_name([]) is None

    def test_builtin_mapping(self) -> None:
        """Test dicts render without a record name."""
        assert derive_type_name({"a": 1}) is None

    def test_nested_class_qualifier_stripped(self) -> None:
        """Test enclosing class names are removed."""
        assert derive_type_name(Outer.Inner()) == "Inner"

    def test_generic_suffix_stripped(self) -> None:
        """Test generic parameters are removed."""

        class Box:
            pass

        Box.__qualname__ = "Box<Int>"
        assert derive_type_name(Box()) == "Box"

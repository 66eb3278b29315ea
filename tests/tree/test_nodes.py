"""Tests for TreeNode dataclass, ValueType StrEnum and the UNDEFINED sentinel.

Verifies:
- ValueType has exactly 11 members with lowercase string values (StrEnum property)
- TreeNode constructs correctly and is immutable
- is_leaf follows the children field, not the value
- walk() yields nodes in pre-order
- UNDEFINED is a falsy singleton
"""

import copy
import dataclasses
import pickle

import pytest

from object_inspector.tree.nodes import UNDEFINED, TreeNode, ValueType


class TestValueType:
    """Tests for the ValueType StrEnum."""

    def test_has_exactly_eleven_members(self) -> None:
        assert len(ValueType) == 11

    def test_values_are_lowercased(self) -> None:
        assert [member.value for member in ValueType] == [
            "null",
            "array",
            "color",
            "string",
            "number",
            "bigint",
            "boolean",
            "symbol",
            "function",
            "undefined",
            "object",
        ]

    def test_members_are_str_instances(self) -> None:
        for member in ValueType:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_lookup_by_value(self) -> None:
        assert ValueType("color") is ValueType.COLOR


class TestTreeNode:
    """Tests for the TreeNode dataclass."""

    def test_construction_with_required_fields(self) -> None:
        node = TreeNode(id="$ROOT", label=None, value=1, type=ValueType.NUMBER)
        assert node.id == "$ROOT"
        assert node.label is None
        assert node.value == 1
        assert node.children is None
        assert node.path == ()

    def test_is_frozen(self) -> None:
        node = TreeNode(id="$ROOT", label=None, value=1, type=ValueType.NUMBER)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.id = "other"  # type: ignore[misc]

    def test_value_held_by_reference(self) -> None:
        data = {"a": 1}
        node = TreeNode(id="$ROOT", label=None, value=data, type=ValueType.OBJECT)
        assert node.value is data

    def test_is_leaf_without_children(self) -> None:
        node = TreeNode(id="$ROOT", label=None, value=[], type=ValueType.ARRAY)
        assert node.is_leaf

    def test_is_not_leaf_with_children(self) -> None:
        child = TreeNode(id="$ROOT.0", label="0", value=1, type=ValueType.NUMBER)
        node = TreeNode(
            id="$ROOT", label=None, value=[1], type=ValueType.ARRAY, children=(child,)
        )
        assert not node.is_leaf


class TestWalk:
    """walk() yields the subtree in pre-order."""

    def test_pre_order(self) -> None:
        leaf_a = TreeNode(id="r.a.b", label="b", value=1, type=ValueType.NUMBER)
        a = TreeNode(
            id="r.a",
            label="a",
            value={"b": 1},
            type=ValueType.OBJECT,
            children=(leaf_a,),
        )
        c = TreeNode(id="r.c", label="c", value=2, type=ValueType.NUMBER)
        root = TreeNode(
            id="r", label=None, value=None, type=ValueType.OBJECT, children=(a, c)
        )
        assert [node.id for node in root.walk()] == ["r", "r.a", "r.a.b", "r.c"]

    def test_single_leaf(self) -> None:
        leaf = TreeNode(id="r", label=None, value=1, type=ValueType.NUMBER)
        assert list(leaf.walk()) == [leaf]


class TestUndefined:
    """UNDEFINED is a process-wide falsy singleton."""

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "undefined"
        assert str(UNDEFINED) == "undefined"

    def test_falsy(self) -> None:
        assert not UNDEFINED

    def test_not_none(self) -> None:
        assert UNDEFINED is not None

    def test_singleton_survives_copy_and_pickle(self) -> None:
        assert type(UNDEFINED)() is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

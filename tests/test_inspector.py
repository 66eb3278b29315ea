"""Tests for ObjectInspector and the TreeRenderer protocol seam."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from object_inspector.config import InspectorConfig
from object_inspector.inspector import ObjectInspector
from object_inspector.protocols import TreeRenderer
from object_inspector.tree.formatter import entry_text
from object_inspector.tree.nodes import TreeNode, ValueType
from object_inspector.view import Dimensions

# ---------------------------------------------------------------------------
# Fake renderer
# ---------------------------------------------------------------------------


class _RecordingRenderer:
    """Renders visible rows to text and records the arguments it received."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def render(
        self,
        tree: list[TreeNode],
        *,
        initial_open_state: dict[str, bool],
        width: float | None,
        height: float | None,
        indent: int,
    ) -> list[str]:
        self.calls.append(
            {
                "tree": tree,
                "initial_open_state": initial_open_state,
                "width": width,
                "height": height,
                "indent": indent,
            }
        )
        lines = []
        for node in tree[0].walk():
            is_open = initial_open_state.get(node.id, False)
            lines.append(entry_text(node, is_open))
        return lines


class _NotARenderer:
    def draw(self) -> None:
        return None


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestProtocol:
    def test_structural_conformance(self) -> None:
        assert isinstance(_RecordingRenderer(), TreeRenderer)

    def test_non_conformant(self) -> None:
        assert not isinstance(_NotARenderer(), TreeRenderer)


class TestDefaults:
    def test_default_data_is_empty_object(self) -> None:
        [root] = ObjectInspector().tree
        assert root.type is ValueType.OBJECT
        assert root.value == {}
        assert root.children is None

    def test_none_is_a_real_value(self) -> None:
        [root] = ObjectInspector(None).tree
        assert root.type is ValueType.NULL

    def test_no_expand_paths(self) -> None:
        assert ObjectInspector({"a": 1}).open_state == {}

    def test_unmeasured(self) -> None:
        assert ObjectInspector().dimensions == Dimensions()


class TestTree:
    def test_label_applied_to_root(self) -> None:
        [root] = ObjectInspector({"a": 1}, label="props").tree
        assert root.label == "props"
        assert root.id == "$ROOT"

    def test_tree_memoized_per_value(self) -> None:
        inspector = ObjectInspector({"a": 1})
        assert inspector.tree is inspector.tree

    def test_update_rebuilds(self) -> None:
        inspector = ObjectInspector({"a": 1})
        before = inspector.tree
        inspector.update({"b": 2})
        after = inspector.tree
        assert after is not before
        assert after[0].children is not None
        assert after[0].children[0].id == "$ROOT.b"

    def test_label_change_rebuilds(self) -> None:
        inspector = ObjectInspector({"a": 1})
        before = inspector.tree
        inspector.label = "renamed"
        assert inspector.tree is not before
        assert inspector.tree[0].label == "renamed"

    def test_config_root_id(self) -> None:
        inspector = ObjectInspector([1], config=InspectorConfig(root_id="list"))
        assert [node.id for node in inspector.tree[0].walk()] == ["list", "list.0"]


class TestOpenState:
    def test_expand_paths(self) -> None:
        inspector = ObjectInspector(
            {"a": {"b": 1}}, expand_paths=["$ROOT", "$ROOT.a"]
        )
        assert inspector.open_state == {"$ROOT": True, "$ROOT.a": True}

    def test_expand_paths_generator_consumed_once(self) -> None:
        inspector = ObjectInspector({}, expand_paths=(p for p in ["$ROOT"]))
        assert inspector.open_state == {"$ROOT": True}
        assert inspector.open_state == {"$ROOT": True}

    def test_visible_rows_use_initial_state(self) -> None:
        inspector = ObjectInspector({"a": {"b": 1}}, expand_paths=["$ROOT"])
        rows = [
            (depth, node.id, is_open)
            for depth, node, is_open in inspector.visible_rows()
        ]
        assert rows == [(0, "$ROOT", True), (1, "$ROOT.a", False)]

    def test_visible_rows_with_explicit_state(self) -> None:
        inspector = ObjectInspector({"a": {"b": 1}}, expand_paths=["$ROOT"])
        state = {"$ROOT": True, "$ROOT.a": True}
        ids = [node.id for _, node, _ in inspector.visible_rows(state)]
        assert ids == ["$ROOT", "$ROOT.a", "$ROOT.a.b"]


class TestResize:
    def test_resize_records_dimensions(self) -> None:
        inspector = ObjectInspector()
        dims = inspector.resize(640, 480)
        assert dims == Dimensions(width=640, height=480)
        assert inspector.dimensions is dims

    def test_resize_to_unmeasured(self) -> None:
        inspector = ObjectInspector()
        inspector.resize(640, 480)
        inspector.resize(None, None)
        assert not inspector.dimensions.measured

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match=r"width"):
            ObjectInspector().resize(-1, 10)

    def test_resize_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="object_inspector.inspector"):
            ObjectInspector().resize(10, 20)
        assert "Inspector resized to 10x20" in caplog.text


class TestRender:
    def test_render_passes_everything(self) -> None:
        renderer = _RecordingRenderer()
        inspector = ObjectInspector(
            {"x": 1, "y": {"z": "#ff0000"}},
            expand_paths=["$ROOT", "$ROOT.y"],
            config=InspectorConfig(indent=4),
        )
        inspector.resize(300, 150)

        lines = inspector.render(renderer)

        [call] = renderer.calls
        assert call["tree"] is inspector.tree
        assert call["initial_open_state"] == {"$ROOT": True, "$ROOT.y": True}
        assert call["width"] == 300
        assert call["height"] == 150
        assert call["indent"] == 4
        assert lines == ["Object (2 keys)", "x: 1", "y: Object (1 key)", "z: #ff0000"]

    def test_render_before_measurement(self) -> None:
        renderer = _RecordingRenderer()
        ObjectInspector().render(renderer)
        assert renderer.calls[0]["width"] is None
        assert renderer.calls[0]["height"] is None
        assert renderer.calls[0]["indent"] == 8

    def test_render_rejects_non_renderer(self) -> None:
        with pytest.raises(
            TypeError, match=r"_NotARenderer does not implement TreeRenderer"
        ):
            ObjectInspector().render(_NotARenderer())  # type: ignore[arg-type]

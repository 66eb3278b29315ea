"""Public API functions for object-inspector.

This module provides the user-facing functions: build_tree, classify,
format_value and initial_open_state. ``build_tree`` creates a fresh
TreeBuilder per call to guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import Any

from object_inspector.config import InspectorConfig
from object_inspector.tree.builder import TreeBuilder
from object_inspector.tree.classifier import classify
from object_inspector.tree.formatter import FormattedValue, format_value
from object_inspector.tree.nodes import TreeNode
from object_inspector.view import initial_open_state

__all__ = [
    "FormattedValue",
    "build_tree",
    "classify",
    "format_value",
    "initial_open_state",
]


def build_tree(
    value: Any,
    *,
    root_id: str | None = None,
    label: str | None = None,
    config: InspectorConfig | None = None,
) -> list[TreeNode]:
    """Build the addressable tree for ``value``.

    Args:
        value:   Any Python value (dict, list, str, int, objects, ...).
        root_id: Id of the root node. Defaults to ``config.root_id``
                 (``"$ROOT"``).
        label:   Optional label for the root node.
        config:  Build settings. Defaults to ``InspectorConfig()`` when None.

    Returns:
        A single-element list holding the root TreeNode.

    Example::

        [root] = build_tree({"a": []})
        root.children[0].id        # "$ROOT.a"
        root.children[0].children  # None, the list is empty
    """
    builder = TreeBuilder(config=config if config is not None else InspectorConfig())
    return builder.build(value, root_id=root_id, label=label)

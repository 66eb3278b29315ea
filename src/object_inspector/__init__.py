"""Object inspector - addressable display trees for arbitrary Python values."""

from __future__ import annotations

from object_inspector.api import (
    build_tree,
    classify,
    format_value,
    initial_open_state,
)
from object_inspector.cache import TreeCache
from object_inspector.config import InspectorConfig
from object_inspector.inspector import ObjectInspector
from object_inspector.protocols import TreeRenderer
from object_inspector.tree import (
    UNDEFINED,
    FormattedValue,
    TreeBuilder,
    TreeNode,
    ValueType,
    entry_text,
    get_label,
    get_token_type,
)
from object_inspector.view import Dimensions, iter_visible

__version__: str = "0.1.0"
__all__: list[str] = [
    "UNDEFINED",
    "Dimensions",
    "FormattedValue",
    "InspectorConfig",
    "ObjectInspector",
    "TreeBuilder",
    "TreeCache",
    "TreeNode",
    "TreeRenderer",
    "ValueType",
    "build_tree",
    "classify",
    "entry_text",
    "format_value",
    "get_label",
    "get_token_type",
    "initial_open_state",
    "iter_visible",
]

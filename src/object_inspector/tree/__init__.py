"""Tree subpackage for value-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: frozen dataclass representing one addressable node
- ValueType: StrEnum of the eleven semantic value types
- UNDEFINED: sentinel for an absent value
- classify: assigns a ValueType to any Python value
- TreeBuilder: converts any Python value into a TreeNode tree
- FormattedValue / format_value / get_label / get_token_type: node display text
"""

from object_inspector.tree.builder import TreeBuilder
from object_inspector.tree.classifier import classify, entry_count, is_composite, iter_entries
from object_inspector.tree.formatter import (
    FormattedValue,
    entry_text,
    format_value,
    get_label,
    get_token_type,
)
from object_inspector.tree.nodes import UNDEFINED, TreeNode, ValueType

__all__ = [
    "UNDEFINED",
    "FormattedValue",
    "TreeBuilder",
    "TreeNode",
    "ValueType",
    "classify",
    "entry_count",
    "entry_text",
    "format_value",
    "get_label",
    "get_token_type",
    "is_composite",
    "iter_entries",
]

"""TreeBuilder: converts any Python value into an addressable TreeNode tree.

Classifies each value with ``classify`` and recurses into composite values
(ARRAY and OBJECT) that have at least one entry. The whole tree is built up
front; nodes are immutable once constructed.

Node ids are built during traversal:
- Root is the configured root id (``"$ROOT"`` by default)
- Each level appends ``"{separator}{key}"`` (``"."`` by default)

Ids are only guaranteed unique when keys never contain the separator. Each
node also carries ``path``, the tuple of raw keys, which has no such
restriction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from object_inspector.config import InspectorConfig
from object_inspector.tree.classifier import classify, iter_entries
from object_inspector.tree.nodes import TreeNode, ValueType

LOGGER = logging.getLogger(__name__)

_COMPOSITE_TYPES = (ValueType.ARRAY, ValueType.OBJECT)


@dataclass
class TreeBuilder:
    """Converts any Python value into a tree of TreeNode objects.

    Traversal order is index order for sequences and insertion order for
    keyed values; it is preserved in ``children`` and never sorted.

    Cyclic values are not guarded unless ``config.detect_cycles`` is set:
    by default a value that contains one of its ancestors recurses until
    Python raises ``RecursionError``.

    Example::
        builder = TreeBuilder()
        [root] = builder.build({"x": 1, "y": {"z": "#ff0000"}})
        # root:  id="$ROOT"     type=OBJECT
        #        id="$ROOT.x"   type=NUMBER
        #        id="$ROOT.y"   type=OBJECT
        #        id="$ROOT.y.z" type=COLOR
    """

    config: InspectorConfig = field(default_factory=InspectorConfig)

    def build(
        self,
        value: Any,
        root_id: str | None = None,
        label: str | None = None,
    ) -> list[TreeNode]:
        """Build the tree for ``value``.

        Args:
            value:   Any Python value. Held by reference, never copied.
            root_id: Id of the root node. Defaults to ``config.root_id``.
            label:   Optional label for the root node.

        Returns:
            A single-element list holding the root node.

        Raises:
            ValueError: If ``config.strict_keys`` is set and a key contains
                the separator.
            RecursionError: If ``value`` is cyclic and
                ``config.detect_cycles`` is not set.
        """
        node_id = self.config.root_id if root_id is None else root_id
        root = self._build_node(value, node_id, label, (), 0, set())
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "Built tree %r: type=%s nodes=%d",
                node_id,
                root.type,
                sum(1 for _ in root.walk()),
            )
        return [root]

    def _build_node(
        self,
        value: Any,
        node_id: str,
        label: str | None,
        path: tuple[Any, ...],
        depth: int,
        ancestors: set[int],
    ) -> TreeNode:
        value_type = classify(value)
        children = None
        if value_type in _COMPOSITE_TYPES and self._should_expand(
            value, node_id, depth, ancestors
        ):
            children = self._build_children(value, node_id, path, depth, ancestors)
        return TreeNode(
            id=node_id,
            label=label,
            value=value,
            type=value_type,
            children=children,
            path=path,
        )

    def _should_expand(
        self, value: Any, node_id: str, depth: int, ancestors: set[int]
    ) -> bool:
        max_depth = self.config.max_depth
        if max_depth is not None and depth >= max_depth:
            LOGGER.debug("Depth limit %d reached at %r", max_depth, node_id)
            return False
        if self.config.detect_cycles and id(value) in ancestors:
            LOGGER.debug("Cycle detected at %r, not expanding", node_id)
            return False
        return True

    def _build_children(
        self,
        value: Any,
        parent_id: str,
        parent_path: tuple[Any, ...],
        depth: int,
        ancestors: set[int],
    ) -> tuple[TreeNode, ...] | None:
        """Build one child per entry; None when there are no entries."""
        separator = self.config.separator
        marker = id(value)
        ancestors.add(marker)
        try:
            children: list[TreeNode] = []
            for key, item in iter_entries(value):
                key_text = str(key)
                if self.config.strict_keys and separator in key_text:
                    msg = (
                        f"Key {key_text!r} under {parent_id!r} contains the "
                        f"separator {separator!r}"
                    )
                    raise ValueError(msg)
                children.append(
                    self._build_node(
                        item,
                        f"{parent_id}{separator}{key_text}",
                        key_text,
                        (*parent_path, key),
                        depth + 1,
                        ancestors,
                    )
                )
        finally:
            ancestors.discard(marker)
        return tuple(children) if children else None

"""TreeCache: LRU-backed memo of built trees.

Rebuilding a tree is cheap but not free, and a renderer asks for the tree on
every redraw. ``TreeCache`` keeps the most recently built trees keyed by the
identity of the inspected value together with the root id and label, so the
tree is rebuilt only when the value reference (or label) changes.

Each ``TreeCache`` instance maintains its own ``LRUCache`` — there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from object_inspector.cache import TreeCache
    from object_inspector.tree import TreeBuilder

    cache = TreeCache(max_size=8)
    data = {"a": [1, 2]}

    tree = cache.get_or_build(data, TreeBuilder())        # builds
    assert cache.get_or_build(data, TreeBuilder()) is tree  # served from memory
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from object_inspector.tree.builder import TreeBuilder
    from object_inspector.tree.nodes import TreeNode

LOGGER = logging.getLogger(__name__)

_Key = tuple[int, str | None, str | None]


class TreeCache:
    """LRU-backed memo of trees keyed by value identity, root id and label.

    An entry also holds a reference to the value it was built from, so an
    ``id()`` reused by a different object after garbage collection never
    returns a stale tree.

    Args:
        max_size: Maximum number of trees to hold. Defaults to 32. When
            exceeded, the least-recently-used tree is silently evicted.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: LRUCache[_Key, tuple[Any, list[TreeNode]]] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of trees stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_or_build(
        self,
        value: Any,
        builder: TreeBuilder,
        root_id: str | None = None,
        label: str | None = None,
    ) -> list[TreeNode]:
        """Return the cached tree for ``value`` or build and store it.

        Args:
            value:   The inspected value.
            builder: Builder used on a cache miss.
            root_id: Root id passed to ``builder.build``.
            label:   Root label passed to ``builder.build``.

        Returns:
            The single-element root list produced by ``builder.build``.
        """
        key: _Key = (id(value), root_id, label)
        entry = self._cache.get(key)
        if entry is not None and entry[0] is value:
            LOGGER.debug("Tree cache hit for %r", root_id)
            return entry[1]

        LOGGER.debug("Tree cache miss for %r", root_id)
        tree = builder.build(value, root_id=root_id, label=label)
        self._cache[key] = (value, tree)
        return tree

    def clear(self) -> None:
        """Drop every cached tree."""
        self._cache.clear()

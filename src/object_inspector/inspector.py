"""ObjectInspector: ties a value, its tree, its open state and its size together.

The inspector is what an application holds on to. It memoizes the tree per
value identity and label, turns the caller's expand paths into the initial
open-state mapping, keeps the last reported container size, and hands all of
it to a ``TreeRenderer``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from object_inspector.cache import TreeCache
from object_inspector.config import InspectorConfig
from object_inspector.protocols import TreeRenderer
from object_inspector.tree.builder import TreeBuilder
from object_inspector.tree.nodes import TreeNode
from object_inspector.view import Dimensions, initial_open_state, iter_visible

LOGGER = logging.getLogger(__name__)

_NO_DATA: Any = object()


class ObjectInspector:
    """Inspector for one value shown in one container.

    Args:
        data:         Value to inspect. Defaults to an empty dict.
        label:        Optional label for the root node.
        expand_paths: Node ids that should start open.
        config:       Build and display settings. Defaults to
                      ``InspectorConfig()``.

    Example::

        inspector = ObjectInspector({"x": 1}, expand_paths=["$ROOT"])
        inspector.resize(320, 200)
        [(0, root, True), (1, x, False)] = list(inspector.visible_rows())
    """

    def __init__(
        self,
        data: Any = _NO_DATA,
        label: str | None = None,
        expand_paths: Iterable[str] | None = None,
        config: InspectorConfig | None = None,
    ) -> None:
        self.config = config if config is not None else InspectorConfig()
        self.data = {} if data is _NO_DATA else data
        self.label = label
        self.expand_paths = None if expand_paths is None else tuple(expand_paths)
        self.dimensions = Dimensions()
        self._builder = TreeBuilder(config=self.config)
        self._cache = TreeCache(max_size=self.config.cache_size)

    @property
    def tree(self) -> list[TreeNode]:
        """Tree for the current value, rebuilt only when data or label change."""
        return self._cache.get_or_build(
            self.data, self._builder, root_id=self.config.root_id, label=self.label
        )

    @property
    def open_state(self) -> dict[str, bool]:
        """Initial ``{node_id: True}`` mapping for the renderer's open-state store."""
        return initial_open_state(self.expand_paths)

    def update(self, data: Any) -> None:
        """Point the inspector at a new value."""
        self.data = data

    def resize(self, width: float | None, height: float | None) -> Dimensions:
        """Record the container size reported by the caller."""
        self.dimensions = Dimensions(width=width, height=height)
        LOGGER.debug("Inspector resized to %sx%s", width, height)
        return self.dimensions

    def visible_rows(
        self, open_state: dict[str, bool] | None = None
    ) -> Iterator[tuple[int, TreeNode, bool]]:
        """Rows visible under ``open_state`` (the initial open state by default)."""
        state = self.open_state if open_state is None else open_state
        return iter_visible(self.tree, state)

    def render(self, renderer: TreeRenderer) -> Any:
        """Hand the tree, open state and size to ``renderer``.

        Raises:
            TypeError: If ``renderer`` does not satisfy ``TreeRenderer``.
        """
        if not isinstance(renderer, TreeRenderer):
            msg = f"{type(renderer).__name__} does not implement TreeRenderer"
            raise TypeError(msg)
        return renderer.render(
            self.tree,
            initial_open_state=self.open_state,
            width=self.dimensions.width,
            height=self.dimensions.height,
            indent=self.config.indent,
        )

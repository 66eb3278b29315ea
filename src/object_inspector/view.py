"""Display-side helpers: container dimensions, initial open state, visible rows.

Nothing here measures or observes anything. Width and height are reported by
the caller; open state is a plain ``{node_id: bool}`` mapping owned by the
renderer and never stored on the nodes themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from object_inspector.tree.nodes import TreeNode

__all__ = ["Dimensions", "initial_open_state", "iter_visible"]


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Container size as last reported by the caller.

    Attributes:
        width:  Width in pixels, or None before the first measurement.
        height: Height in pixels, or None before the first measurement.
    """

    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        if self.width is not None and self.width < 0:
            msg = f"width must be >= 0 or None, got {self.width}"
            raise ValueError(msg)
        if self.height is not None and self.height < 0:
            msg = f"height must be >= 0 or None, got {self.height}"
            raise ValueError(msg)

    @property
    def measured(self) -> bool:
        return self.width is not None and self.height is not None


def initial_open_state(expand_paths: Iterable[str] | None) -> dict[str, bool]:
    """Map each node id in ``expand_paths`` to True, in order.

    Ids are not checked against any tree; unknown ids are simply carried
    along for the renderer to ignore.
    """
    if expand_paths is None:
        return {}
    return {path: True for path in expand_paths}


def iter_visible(
    tree: Iterable[TreeNode], open_state: Mapping[str, bool]
) -> Iterator[tuple[int, TreeNode, bool]]:
    """Yield ``(depth, node, is_open)`` for every row a renderer would show.

    Walks in pre-order. Children of a node are visited only when the node
    is open in ``open_state``; nodes missing from the mapping are closed.
    """
    stack: list[tuple[int, TreeNode]] = [(0, node) for node in reversed(list(tree))]
    while stack:
        depth, node = stack.pop()
        is_open = bool(open_state.get(node.id, False))
        yield depth, node, is_open
        if is_open and node.children:
            stack.extend((depth + 1, child) for child in reversed(node.children))

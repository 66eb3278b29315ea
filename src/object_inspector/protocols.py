"""TreeRenderer Protocol: the seam to the external tree widget.

The widget that draws, virtualizes and navigates the tree lives outside this
package. Any class with a conformant ``render`` method passes ``isinstance``
checks; no inheritance required.

Example::

    from object_inspector.protocols import TreeRenderer

    class PrintRenderer:
        def render(self, tree, *, initial_open_state, width, height, indent):
            for node in tree[0].walk():
                print(node.id)

    assert isinstance(PrintRenderer(), TreeRenderer)  # True — structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from object_inspector.tree.nodes import TreeNode


@runtime_checkable
class TreeRenderer(Protocol):
    """Structural protocol for tree widgets.

    The ``render`` method receives:
    - ``tree``: the single-element root list from ``TreeBuilder.build``.
    - ``initial_open_state``: ``{node_id: True}`` for the nodes that start
      open. The renderer owns open state from then on, keyed by node id.
    - ``width`` / ``height``: container size reported by the caller, or
      None before the first measurement.
    - ``indent``: per-level indentation.

    Row text comes from ``format_value`` / ``entry_text`` with the node's
    current open flag.
    """

    def render(
        self,
        tree: list[TreeNode],
        *,
        initial_open_state: dict[str, bool],
        width: float | None,
        height: float | None,
        indent: int,
    ) -> Any: ...

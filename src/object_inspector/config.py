"""InspectorConfig: immutable settings for tree construction and display.

InspectorConfig is a frozen (immutable) dataclass. Every field is validated
in ``__post_init__`` so an invalid configuration fails at construction time
rather than halfway through a build.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_ROOT_ID: Final = "$ROOT"


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Immutable configuration for building and displaying a value tree.

    Attributes:
        root_id: Id given to the root node when the caller supplies none.
        separator: Literal joined between a parent id and a child key.
        max_depth: When set, nodes at this depth are not expanded (their
            ``children`` stay None). The root is depth 0.  Default None.
        detect_cycles: When True, a value that already appears on the
            ancestor chain (by identity) is emitted unexpanded instead of
            recursing forever.  Default False, so cyclic input raises
            ``RecursionError``.
        strict_keys: When True, a key whose text contains ``separator``
            raises ``ValueError`` because its id could collide with a
            sibling's descendant.  Default False.
        indent: Per-level indentation handed to the renderer.
        cache_size: Number of built trees an ``ObjectInspector`` memoizes.
    """

    root_id: str = DEFAULT_ROOT_ID
    separator: str = "."
    max_depth: int | None = None
    detect_cycles: bool = False
    strict_keys: bool = False
    indent: int = 8
    cache_size: int = 32

    def __post_init__(self) -> None:
        if not self.root_id:
            msg = "root_id must be a non-empty string"
            raise ValueError(msg)
        if not self.separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be >= 0 or None, got {self.max_depth}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.cache_size < 1:
            msg = f"cache_size must be >= 1, got {self.cache_size}"
            raise ValueError(msg)

"""TreeNode dataclass and ValueType StrEnum for value-to-tree representation.

Provides the data types produced by TreeBuilder and consumed by the label
formatter and by whatever widget renders the tree.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, Final


class ValueType(StrEnum):
    """Closed set of semantic types a node value can have.

    StrEnum values are the lowercased member names:
    - NULL      -> "null"      : None
    - ARRAY     -> "array"     : list, tuple, set, ndarray, other sequences
    - COLOR     -> "color"     : str starting with "#", "rgb", "rgba", "hsl", "hsla"
    - STRING    -> "string"    : any other str (and bytes)
    - NUMBER    -> "number"    : int within the safe-integer range, float, ...
    - BIGINT    -> "bigint"    : int outside the safe-integer range
    - BOOLEAN   -> "boolean"   : bool
    - SYMBOL    -> "symbol"    : enum members
    - FUNCTION  -> "function"  : non-class callables
    - UNDEFINED -> "undefined" : the UNDEFINED sentinel
    - OBJECT    -> "object"    : everything else (mappings, plain objects)
    """

    NULL = auto()
    ARRAY = auto()
    COLOR = auto()
    STRING = auto()
    NUMBER = auto()
    BIGINT = auto()
    BOOLEAN = auto()
    SYMBOL = auto()
    FUNCTION = auto()
    UNDEFINED = auto()
    OBJECT = auto()


class _Undefined:
    """Singleton standing in for a value that is absent rather than None."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the inspected-value tree.

    Attributes:
        id:       Address of the node, unique within one tree. The parent id
                  and the child's key joined by the configured separator.
        label:    Key under which the value was found in its parent; None for
                  the root unless one was supplied.
        value:    The original value, held by reference.
        type:     Semantic type assigned by ``classify``.
        children: Child nodes in entry order, or None when the value is not
                  composite or has no entries. Never an empty tuple.
        path:     Raw key segments from the root to this node; ``()`` for
                  the root. Unambiguous even when keys contain the separator.
    """

    id: str
    label: str | None
    value: Any
    type: ValueType
    children: tuple[TreeNode, ...] | None = None
    path: tuple[Any, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

"""Display labels and token types for tree nodes.

``get_label`` produces the text a node shows, which for ARRAY and OBJECT
nodes depends on whether the node is open. ``get_token_type`` assigns the
styling category; it never affects classification or label text.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from object_inspector.tree.classifier import entry_count
from object_inspector.tree.nodes import TreeNode, ValueType

__all__ = ["FormattedValue", "entry_text", "format_value", "get_label", "get_token_type"]


@dataclass(frozen=True, slots=True)
class FormattedValue:
    """Label text of one node plus its styling category.

    Attributes:
        text:       Display string, e.g. ``'"hello"'`` or ``"Array (3 items)"``.
        token_type: Styling category, e.g. ``"string"`` or ``"comment"``.
    """

    text: str
    token_type: str


def _coerce_type(value_type: ValueType | str) -> ValueType:
    try:
        return ValueType(value_type)
    except ValueError as exc:
        msg = f"Unknown value type: {value_type!r}"
        raise TypeError(msg) from exc


def _count_label(count: int, singular: str, title: str) -> str:
    noun = singular if count == 1 else f"{singular}s"
    return f"{title} ({count} {noun})"


def _function_name(value: Any) -> str:
    name = getattr(value, "__name__", "")
    if not isinstance(name, str) or name == "<lambda>":
        return ""
    return name


def _text(value: Any) -> str:
    if isinstance(value, memoryview):
        value = value.tobytes()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="backslashreplace")
    return str(value)


def _plain(value: Any) -> str:
    """String conversion of a scalar, with JSON-style booleans and NaN/inf."""
    if isinstance(value, np.ndarray):
        value = value.item()
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
        number = float(value)
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
    return str(value)


def get_label(value: Any, value_type: ValueType | str, is_open: bool) -> str:
    """Return the display text for ``value`` classified as ``value_type``.

    ``is_open`` only affects ARRAY and OBJECT: an open node shows its entry
    count (``"Array (3 items)"``), a closed one a placeholder (``"[…]"``,
    or ``"[]"`` when empty).

    Raises:
        TypeError: If ``value_type`` is not a ValueType name.
    """
    value_type = _coerce_type(value_type)

    if value_type is ValueType.ARRAY:
        count = entry_count(value)
        if is_open:
            return _count_label(count, "item", "Array")
        return "[…]" if count > 0 else "[]"
    if value_type is ValueType.OBJECT:
        count = entry_count(value)
        if is_open:
            return _count_label(count, "key", "Object")
        return "{…}" if count > 0 else "{}"
    if value_type is ValueType.NULL:
        return "null"
    if value_type is ValueType.UNDEFINED:
        return "undefined"
    if value_type is ValueType.FUNCTION:
        return f"f {_function_name(value)}()"
    # No escaping of embedded quotes or control characters.
    if value_type is ValueType.STRING:
        return f'"{_text(value)}"'
    if value_type is ValueType.SYMBOL:
        return f"Symbol({value})"
    return _plain(value)


def get_token_type(value_type: ValueType | str) -> str:
    """Return the styling category for ``value_type``.

    COLOR is styled as a string, ARRAY and OBJECT as comments, and every
    other type under its own name.
    """
    value_type = _coerce_type(value_type)
    if value_type is ValueType.COLOR:
        return "string"
    if value_type in (ValueType.ARRAY, ValueType.OBJECT):
        return "comment"
    return str(value_type)


def format_value(
    value: Any, value_type: ValueType | str, is_open: bool = False
) -> FormattedValue:
    """Return both the label text and the token type of one value."""
    return FormattedValue(
        text=get_label(value, value_type, is_open),
        token_type=get_token_type(value_type),
    )


def entry_text(node: TreeNode, is_open: bool = False) -> str:
    """Text of one tree row: ``"label: value"``, or just the value for the root."""
    text = get_label(node.value, node.type, is_open)
    if node.label:
        return f"{node.label}: {text}"
    return text

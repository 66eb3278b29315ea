"""Value classification: maps any Python value onto the closed ValueType set.

All precedence rules live in ``classify``; the entry helpers below share its
notion of "composite" so the tree builder and the label formatter always agree
on what a value contains.

Precedence (first match wins):
1. ``None``                               -> NULL
2. sequences, sets and ndarrays           -> ARRAY
3. str starting with a color prefix       -> COLOR
4. intrinsic kind (symbol, boolean, string, number/bigint, undefined,
   function), with OBJECT as the residual case
"""

from __future__ import annotations

import dataclasses
import enum
import numbers
import re
from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Any, Final

import numpy as np

from object_inspector.tree.nodes import UNDEFINED, ValueType

# Prefix match only; the remainder of the string is not validated.
_COLOR_PREFIX: Final = re.compile(r"^(#|rgb|rgba|hsl|hsla)")

# Largest integer a double represents exactly. Integers beyond it are BIGINT.
MAX_SAFE_INTEGER: Final = 2**53 - 1

_TEXT_TYPES: Final = (str, bytes, bytearray, memoryview)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, (Sequence, Set))


def classify(value: Any) -> ValueType:
    """Return the semantic type of ``value``.

    Total over every Python value: never raises.

    Example::

        classify("#fff")         # ValueType.COLOR
        classify([1, "x"])       # ValueType.ARRAY
        classify("")             # ValueType.STRING
        classify({"a": 1})       # ValueType.OBJECT
    """
    if value is None:
        return ValueType.NULL

    if _is_sequence(value):
        return ValueType.ARRAY

    if isinstance(value, str) and _COLOR_PREFIX.match(value):
        return ValueType.COLOR

    # A zero-dimensional array is a boxed scalar.
    if isinstance(value, np.ndarray):
        return classify(value.item())

    if value is UNDEFINED:
        return ValueType.UNDEFINED

    # Enum members before str/int: IntEnum and StrEnum members subclass both.
    if isinstance(value, enum.Enum):
        return ValueType.SYMBOL

    # CRITICAL: bool MUST be checked before int -- bool subclasses int in Python
    if isinstance(value, (bool, np.bool_)):
        return ValueType.BOOLEAN

    if isinstance(value, _TEXT_TYPES):
        return ValueType.STRING

    if isinstance(value, numbers.Integral):
        if abs(int(value)) > MAX_SAFE_INTEGER:
            return ValueType.BIGINT
        return ValueType.NUMBER

    if isinstance(value, numbers.Number):
        return ValueType.NUMBER

    if callable(value):
        return ValueType.FUNCTION

    return ValueType.OBJECT


def is_composite(value: Any) -> bool:
    """True when ``value`` is an ARRAY or OBJECT, i.e. may have entries."""
    return classify(value) in (ValueType.ARRAY, ValueType.OBJECT)


def _object_fields(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, Mapping):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        # init=False fields may not be assigned yet.
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if hasattr(value, f.name)
        }
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, Mapping):
        return attrs
    return None


def _as_sequence(value: Any) -> Any:
    # ndarray subclasses such as np.matrix keep rows 2-D; iterate the base array.
    if isinstance(value, np.ndarray) and type(value) is not np.ndarray:
        return np.asarray(value)
    return value


def iter_entries(value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, child)`` pairs of a composite value in display order.

    Sequences yield ``(index, item)`` in index order (sets in iteration
    order, ndarrays along their first axis). Mappings yield their items in
    insertion order, dataclass instances their fields in declaration order,
    and other objects their instance ``__dict__``. Non-composite values
    yield nothing.
    """
    value_type = classify(value)
    if value_type is ValueType.ARRAY:
        yield from enumerate(_as_sequence(value))
    elif value_type is ValueType.OBJECT:
        fields = _object_fields(value)
        if fields is not None:
            yield from fields.items()


def entry_count(value: Any) -> int:
    """Number of entries ``iter_entries`` would yield for ``value``."""
    value_type = classify(value)
    if value_type is ValueType.ARRAY:
        return len(_as_sequence(value))
    if value_type is ValueType.OBJECT:
        fields = _object_fields(value)
        return 0 if fields is None else len(fields)
    return 0

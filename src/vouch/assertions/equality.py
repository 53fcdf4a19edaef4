"""Structural equality used by the ``to_be`` and ``to_contain`` matchers."""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Any


SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def is_scalar(value: Any) -> bool:
    """Return True for values compared by plain equality."""
    return isinstance(value, SCALAR_TYPES)


def is_sequence(value: Any) -> bool:
    """Return True for ordered, index-aligned containers (lists and tuples)."""
    return isinstance(value, (list, tuple))


def is_instant(value: Any) -> bool:
    """Return True for date and datetime values."""
    return isinstance(value, date)


def is_record(value: Any) -> bool:
    """Return True for mappings and dataclass instances.

    ``None`` is never a record.
    """
    if value is None:
        return False
    if isinstance(value, Mapping):
        return True
    return is_dataclass(value) and not isinstance(value, type)


def record_items(value: Any) -> dict[str, Any]:
    """Return the key/value view of a record."""
    if isinstance(value, Mapping):
        return dict(value)
    return {f.name: getattr(value, f.name) for f in fields(value)}


def record_get(value: Any, key: Any) -> Any:
    """Look up ``key`` in a record, returning None when it is absent."""
    if isinstance(value, Mapping):
        return value.get(key)
    if not isinstance(key, str):
        return None
    return getattr(value, key, None)


def is_structured(value: Any) -> bool:
    """Return True for values compared by structure rather than by ``==``."""
    return is_sequence(value) or is_instant(value) or is_record(value)


def _values_equal(a: Any, b: Any) -> bool:
    # Strict equality: True is not 1 and False is not 0.
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Element-wise __eq__ results (arrays) have no single truth value.
        return False


def _instants_equal(a: date, b: date) -> bool:
    if isinstance(a, datetime) != isinstance(b, datetime):
        return False
    try:
        return a == b
    except TypeError:
        # Naive and aware datetimes do not name a comparable instant.
        return False


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Rules, applied in order:

    1. Identical objects are equal.
    2. Two sequences are equal when they have the same length and their
       elements are pairwise equal.
    3. Two dates/datetimes are equal when they denote the same instant.
    4. Two records are equal when every key of ``a`` maps to an equal value
       in ``b``.
    5. A sequence, instant or record is never equal to a value of another
       kind.
    6. Any other pair is compared with ``==``, except that a ``bool`` never
       equals a non-``bool``. This covers scalars and value types such as
       ``Decimal``, ``Fraction`` and sets.

    Rule 4 is a one-directional subset check. Keys present only in ``b`` are
    ignored, and a key of ``a`` holding ``None`` matches a key missing from
    ``b``. This makes ``deep_equal(a, b)`` usable for partial matches and is
    not symmetric.

    Parameters
    ----------
    a : Any
        The value under test.
    b : Any
        The value it is compared against.

    Returns
    -------
    bool
        Whether ``a`` equals ``b`` under the rules above.

    Examples
    --------
    >>> deep_equal([1, 2, 3], [1, 2, 3])
    True
    >>> deep_equal({"hello": "World", "hola": None}, {"hello": "World"})
    True
    >>> deep_equal({"hello": "World"}, {"hello": "World", "hola": "Mundo"})
    True
    >>> deep_equal({"hola": "Mundo"}, {"hello": "World"})
    False
    """
    if a is b:
        return True
    if is_sequence(a) and is_sequence(b):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if is_instant(a) and is_instant(b):
        return _instants_equal(a, b)
    if is_record(a) and is_record(b):
        return all(deep_equal(value, record_get(b, key)) for key, value in record_items(a).items())
    if is_structured(a) or is_structured(b):
        return False
    return _values_equal(a, b)

"""Folds that reduce a collection to a single scalar.

Every aggregate has a documented zero value for absent or empty input instead
of raising:

    - ``min_int``, ``max_int``, ``sum_ints``, ``sum_by``, ``count``: ``0``
    - ``min_decimal``, ``sum_decimal``: ``Decimal("0")``
    - ``reduce_to_string``: ``""``

Note:
    A zero returned by ``min_int`` is ambiguous: the input may have been empty
    or the true minimum may be ``0``. Check emptiness first when it matters.

Decimal helpers accept ``Decimal``, ``int`` and ``str`` results from the
transform. ``float`` results go through ``str()`` first so ``0.1`` becomes
``Decimal("0.1")`` rather than its binary expansion.
"""

import typing as tp
from decimal import Decimal

from listkit.core.types import (
    A,
    MaybeIterable,
    Predicate,
    Transform,
    is_absent_or_empty,
)

__all__ = [
    "min_int",
    "minimum",
    "min_decimal",
    "max_int",
    "sum_ints",
    "sum_by",
    "sum_decimal",
    "count",
    "reduce_to_string",
]

DecimalLike = tp.Union[Decimal, int, float, str]

DECIMAL_ZERO = Decimal(0)


def _as_decimal(value: DecimalLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def min_int(items: MaybeIterable[A], func: Transform[A, int]) -> int:
    """Return the smallest ``func(x)`` over the input, or 0 when it is empty.

    Args:
        items: Input collection, possibly ``None``.
        func: Transform producing an integer per element.

    Returns:
        The minimum transformed value.
    """
    if is_absent_or_empty(items):
        return 0

    return min((func(element) for element in items), default=0)


def minimum(items: MaybeIterable[A], func: Transform[A, int]) -> int:
    """Alias of :func:`min_int`."""
    return min_int(items, func)


def min_decimal(
    items: MaybeIterable[A], func: Transform[A, DecimalLike]
) -> Decimal:
    """Return the smallest ``func(x)`` as a ``Decimal``, ``Decimal(0)`` when empty."""
    if is_absent_or_empty(items):
        return DECIMAL_ZERO

    return min((_as_decimal(func(element)) for element in items), default=DECIMAL_ZERO)


def max_int(items: MaybeIterable[A], func: Transform[A, int]) -> int:
    """Return the greatest ``func(x)`` over the input, or 0 when it is empty."""
    if is_absent_or_empty(items):
        return 0

    return max((func(element) for element in items), default=0)


def sum_ints(items: MaybeIterable[int]) -> int:
    """Return the sum of an integer collection, 0 when absent or empty."""
    if is_absent_or_empty(items):
        return 0

    total = 0
    for element in items:
        total += element
    return total


def sum_by(items: MaybeIterable[A], func: Transform[A, int]) -> int:
    """Return the sum of ``func(x)`` over the input.

    Example:
        >>> sum_by([1, 2, 3], lambda x: x * 2)
        12
    """
    if is_absent_or_empty(items):
        return 0

    return sum_ints(func(element) for element in items)


def sum_decimal(
    items: MaybeIterable[A], func: Transform[A, DecimalLike]
) -> Decimal:
    """Return the exact ``Decimal`` sum of ``func(x)`` over the input."""
    total = DECIMAL_ZERO
    if is_absent_or_empty(items):
        return total

    for element in items:
        total += _as_decimal(func(element))
    return total


def count(items: MaybeIterable[A], predicate: Predicate[A]) -> int:
    """Count the elements for which ``predicate`` is truthy."""
    if is_absent_or_empty(items):
        return 0

    matches = 0
    for element in items:
        if predicate(element):
            matches += 1
    return matches


def reduce_to_string(items: MaybeIterable[A], func: Transform[A, str]) -> str:
    """Concatenate ``func(x)`` for every element, with no separator.

    Raises:
        TypeError: If ``func`` returns something other than ``str``.
    """
    if is_absent_or_empty(items):
        return ""

    return "".join([func(element) for element in items])

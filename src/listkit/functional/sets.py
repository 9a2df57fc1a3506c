"""Deduplication and set-building helpers."""

import typing as tp

from listkit.core.types import A, B, H, MaybeIterable, Transform, is_absent_or_empty

__all__ = [
    "distinct",
    "diff",
    "zip_unique",
]


class _FirstOccurrences(tp.Generic[A]):
    """Ordered accumulator keeping only the first occurrence of equal values.

    Hashable values are tracked in a set. Values that fail to hash (lists,
    dicts, tuples holding either) fall back to a linear equality scan over
    the kept values.
    """

    def __init__(self) -> None:
        self.values: tp.List[A] = []
        self._seen: tp.Set[tp.Any] = set()

    def add(self, value: A) -> None:
        try:
            hash(value)
        except TypeError:
            if value in self.values:
                return
        else:
            if value in self._seen:
                return
            self._seen.add(value)
        self.values.append(value)


def distinct(items: MaybeIterable[A]) -> tp.List[A]:
    """Return the input without duplicates, keeping first occurrences in order.

    Args:
        items: Input collection, possibly ``None``.

    Returns:
        A new list holding each distinct value once.

    Example:
        >>> distinct([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    unique: _FirstOccurrences[A] = _FirstOccurrences()
    if is_absent_or_empty(items):
        return unique.values

    for element in items:
        unique.add(element)
    return unique.values


def diff(items: MaybeIterable[A], func: Transform[A, B]) -> tp.List[B]:
    """Project every element through ``func`` and drop duplicate projections.

    Returns:
        The distinct values of ``func(x)``, in order of first occurrence.
    """
    unique: _FirstOccurrences[B] = _FirstOccurrences()
    if is_absent_or_empty(items):
        return unique.values

    for element in items:
        unique.add(func(element))
    return unique.values


def zip_unique(first: MaybeIterable[H], second: MaybeIterable[H]) -> tp.Set[H]:
    """Merge two collections into one set of unique values.

    Either side may be ``None``; it then contributes nothing.
    """
    merged: tp.Set[H] = set()
    for collection in (first, second):
        if not is_absent_or_empty(collection):
            merged.update(collection)
    return merged

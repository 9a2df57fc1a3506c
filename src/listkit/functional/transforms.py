"""Element-wise transformations over homogeneous collections.

Every function here walks its input once, in iteration order, and returns a
freshly allocated container. The input is never mutated. ``None`` and empty
inputs produce an empty result, and a failing callback aborts the walk and
propagates its exception without a partial result.

Examples:
    >>> from listkit.functional.transforms import map_list, filtered_map
    >>> map_list([1, 2, 3], lambda x: x * 10)
    [10, 20, 30]
    >>> filtered_map(["a", "", "b"], lambda s: s or None)
    ['a', 'b']
"""

import typing as tp

from listkit.core.types import (
    A,
    B,
    Action,
    IndexedTransform,
    MaybeIterable,
    MaybeSequence,
    Transform,
    is_absent_or_empty,
    require_sequence,
)

__all__ = [
    "map_list",
    "map_indexed",
    "filtered_map",
    "flat_map",
    "flat_map_unique",
    "each",
    "to_string_list",
]


def map_list(items: MaybeIterable[A], func: Transform[A, B]) -> tp.List[B]:
    """Apply ``func`` to every element and collect the results.

    Args:
        items: Input collection, possibly ``None``.
        func: Transform called once per element.

    Returns:
        A list with ``func(x)`` for each ``x``, same order and length as the input.
    """
    if is_absent_or_empty(items):
        return []

    return [func(element) for element in items]


def map_indexed(
    items: MaybeSequence[A], func: IndexedTransform[A, B]
) -> tp.List[B]:
    """Apply ``func`` to every element together with its zero-based position.

    Args:
        items: Index-addressable sequence, possibly ``None``.
        func: Callable receiving ``(element, index)``.

    Returns:
        A list with ``func(items[i], i)`` for each index ``i``.

    Raises:
        TypeError: If ``items`` is non-empty and not a sequence.
    """
    if is_absent_or_empty(items):
        return []
    require_sequence(items, "map_indexed")

    return [func(items[i], i) for i in range(len(items))]


def filtered_map(
    items: MaybeIterable[A], func: Transform[A, tp.Optional[B]]
) -> tp.List[B]:
    """Like :func:`map_list`, but drop every ``None`` result.

    Falsy results other than ``None`` (``0``, ``""``, ``[]``) are kept.
    """
    if is_absent_or_empty(items):
        return []

    results = []
    for element in items:
        result = func(element)
        if result is not None:
            results.append(result)
    return results


def flat_map(
    items: MaybeIterable[A], func: Transform[A, tp.Iterable[B]]
) -> tp.List[B]:
    """Apply ``func`` to every element and concatenate the returned iterables.

    Args:
        items: Input collection, possibly ``None``.
        func: Transform returning an iterable per element.

    Returns:
        One flat list holding every sub-result, in input order.
    """
    if is_absent_or_empty(items):
        return []

    flattened: tp.List[B] = []
    for element in items:
        flattened.extend(func(element))
    return flattened


def flat_map_unique(
    items: MaybeIterable[A], func: Transform[A, tp.Iterable[B]]
) -> tp.Set[B]:
    """Apply ``func`` to every element and merge all sub-results into one set.

    The results must be hashable. No ordering is guaranteed.
    """
    if is_absent_or_empty(items):
        return set()

    merged: tp.Set[B] = set()
    for element in items:
        merged.update(func(element))
    return merged


def each(items: MaybeIterable[A], action: Action[A]) -> None:
    """Run ``action`` on every element for its side effects."""
    if is_absent_or_empty(items):
        return

    for element in items:
        action(element)


def to_string_list(items: MaybeIterable[tp.Any]) -> tp.List[str]:
    """Return ``str(x)`` for every element, preserving order."""
    return map_list(items, str)

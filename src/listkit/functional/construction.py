"""Building and combining ordered sequences."""

import typing as tp

from listkit.core.types import A, MaybeIterable, is_absent_or_empty

__all__ = [
    "of",
    "unshift",
    "merge",
    "join",
]


def of(*elements: A) -> tp.List[A]:
    """Return a new list holding ``elements`` in the order given."""
    return list(elements)


def unshift(items: MaybeIterable[A], *elements: A) -> tp.List[A]:
    """Return ``elements`` followed by every element of ``items``.

    Args:
        items: Existing collection, possibly ``None``. It is not modified.
        *elements: Values placed at the front of the result.

    Returns:
        A new list.

    Example:
        >>> unshift([2, 3], 0, 1)
        [0, 1, 2, 3]
    """
    result = list(elements)
    if not is_absent_or_empty(items):
        result.extend(items)
    return result


def merge(*lists: MaybeIterable[A]) -> tp.List[A]:
    """Concatenate the given collections, in argument order, into a new list.

    ``None`` arguments contribute nothing. Calling with no arguments
    returns an empty list.
    """
    result: tp.List[A] = []
    for collection in lists:
        if not is_absent_or_empty(collection):
            result.extend(collection)
    return result


def join(delimiter: str, tokens: MaybeIterable[tp.Any]) -> str:
    """Join ``str(token)`` for every token, separated by ``delimiter``.

    There is no leading or trailing delimiter. Absent or empty ``tokens``
    yields ``""``.

    Example:
        >>> join(",", ["a", "b", "c"])
        'a,b,c'
    """
    if is_absent_or_empty(tokens):
        return ""

    return delimiter.join([str(token) for token in tokens])

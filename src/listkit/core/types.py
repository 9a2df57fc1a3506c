"""Reusable type definitions for the listkit functional module.

This module provides the type variables and callable aliases shared by every
helper in :mod:`listkit.functional`, plus the two guards that implement the
library-wide input rules.

Type Aliases:
    Transform: A one-argument callable mapping an element to a new value.
    IndexedTransform: A callable receiving an element and its zero-based index.
    Predicate: A one-argument callable returning a truthy/falsy value.
    Action: A one-argument callable run for its side effects.
    MaybeIterable: An iterable that may be absent (``None``).
    MaybeSequence: An index-addressable sequence that may be absent.
"""

import typing as tp
from collections.abc import Hashable, Sequence, Sized

from listkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "A",
    "B",
    "H",
    "Transform",
    "IndexedTransform",
    "Predicate",
    "Action",
    "MaybeIterable",
    "MaybeSequence",
    "is_absent_or_empty",
    "require_sequence",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
H = tp.TypeVar("H", bound=Hashable)

Transform = tp.Callable[[A], B]
IndexedTransform = tp.Callable[[A, int], B]
Predicate = tp.Callable[[A], tp.Any]
Action = tp.Callable[[A], tp.Any]

MaybeIterable = tp.Optional[tp.Iterable[A]]
MaybeSequence = tp.Optional[tp.Sequence[A]]


def is_absent_or_empty(items: tp.Optional[tp.Iterable[tp.Any]]) -> bool:
    """Check the absent/empty rule shared by every operation.

    Args:
        items: The input collection, possibly ``None``.

    Returns:
        True if ``items`` is ``None`` or a sized container of length zero.
        Unsized iterables (generators, iterators) are never reported as empty;
        callers simply iterate them.
    """
    if items is None:
        return True
    if isinstance(items, Sized):
        return len(items) == 0
    return False


def require_sequence(items: tp.Any, operation: str) -> None:
    """Validator to ensure an input is index-addressable.

    ``None`` passes, since absent input is handled by the caller's empty path.

    Args:
        items: The input collection to validate.
        operation: Name of the calling operation, used in the error message.

    Raises:
        TypeError: If ``items`` is not a ``Sequence``, or is text/bytes.
    """
    if items is None:
        return
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        logger.debug(
            f"{operation} rejected non-sequence input of type {type(items).__name__}"
        )
        raise TypeError(
            f"{operation} requires an index-addressable sequence, got '{type(items).__name__}'."
        )

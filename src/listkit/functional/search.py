"""Filtering and lookup helpers.

Lookups return ``None`` as the "no value" marker when nothing matches or the
input is absent/empty. Predicates are evaluated for truthiness and walk the
input in iteration order, stopping at the first decisive element.

Note:
    :func:`all_match` returns ``False`` for absent or empty input. This is
    deliberately not the vacuous-truth convention of the builtin ``all``.
"""

import typing as tp

from listkit.core.config import settings
from listkit.core.types import (
    A,
    B,
    MaybeIterable,
    MaybeSequence,
    Predicate,
    Transform,
    is_absent_or_empty,
    require_sequence,
)
from listkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "filter_list",
    "find",
    "first",
    "find_by_hash",
    "find_map",
    "index_of",
    "any_match",
    "all_match",
]


def filter_list(items: MaybeIterable[A], predicate: Predicate[A]) -> tp.List[A]:
    """Keep the elements for which ``predicate`` is truthy, in original order."""
    if is_absent_or_empty(items):
        return []

    return [element for element in items if predicate(element)]


def find(items: MaybeIterable[A], predicate: Predicate[A]) -> tp.Optional[A]:
    """Return the first element satisfying ``predicate``.

    Args:
        items: Input collection, possibly ``None``.
        predicate: Test applied to each element until one passes.

    Returns:
        The first matching element, or ``None`` if nothing matches.
    """
    if is_absent_or_empty(items):
        return None

    for element in items:
        if predicate(element):
            return element
    return None


def first(
    items: MaybeIterable[A], predicate: tp.Optional[Predicate[A]] = None
) -> tp.Optional[A]:
    """Return the first element, optionally the first one matching ``predicate``.

    With a predicate this is :func:`find`; the name tells the reader that more
    than one element may match. Without a predicate the input must be an
    ordered sequence and its element at position 0 is returned.

    Args:
        items: Input collection, possibly ``None``.
        predicate: Optional test applied to each element.

    Returns:
        The first (matching) element, or ``None``.

    Raises:
        TypeError: If no predicate is given and ``items`` is non-empty and not
            a sequence.
    """
    if predicate is not None:
        return find(items, predicate)

    if is_absent_or_empty(items):
        return None
    require_sequence(items, "first")
    return items[0]


def find_by_hash(items: MaybeIterable[A], probe: tp.Any) -> tp.Optional[A]:
    """Return the first element whose ``hash()`` equals ``hash(probe)``.

    Warning:
        Only hash values are compared, never equality. Two unrelated objects
        with colliding hashes match each other, so the returned element may
        not be equal to ``probe``. Use :func:`find` with an equality predicate
        when that matters. A warning is logged for such a collision while
        ``settings.WARN_ON_HASH_COLLISION`` is enabled. Detecting the collision
        calls the matched element's ``__eq__`` (unless it is ``probe`` itself),
        so an exception raised there propagates while the warning is enabled.

    Args:
        items: Input collection, possibly ``None``.
        probe: Object whose hash is looked up.

    Returns:
        The first element with a matching hash, or ``None``.

    Raises:
        TypeError: If ``probe`` or a visited element is unhashable.
    """
    if is_absent_or_empty(items):
        return None

    target = hash(probe)
    for element in items:
        if hash(element) == target:
            if (
                settings.WARN_ON_HASH_COLLISION
                and element is not probe
                and element != probe
            ):
                logger.warning(
                    f"find_by_hash matched {element!r} for probe {probe!r} by hash {target} only"
                )
            return element
    return None


def find_map(
    items: MaybeIterable[A], func: Transform[A, tp.Optional[B]]
) -> tp.Optional[B]:
    """Return the first non-``None`` result of ``func``.

    Elements after the first hit are never passed to ``func``.
    """
    if is_absent_or_empty(items):
        return None

    for element in items:
        result = func(element)
        if result is not None:
            return result
    return None


def index_of(items: MaybeSequence[A], predicate: Predicate[A]) -> int:
    """Return the position of the first element satisfying ``predicate``, or -1.

    Raises:
        TypeError: If ``items`` is non-empty and not a sequence.
    """
    if is_absent_or_empty(items):
        return -1
    require_sequence(items, "index_of")

    for i in range(len(items)):
        if predicate(items[i]):
            return i
    return -1


def any_match(items: MaybeIterable[A], predicate: Predicate[A]) -> bool:
    """Return True if at least one element satisfies ``predicate``."""
    if is_absent_or_empty(items):
        return False

    for element in items:
        if predicate(element):
            return True
    return False


def all_match(items: MaybeIterable[A], predicate: Predicate[A]) -> bool:
    """Return True if the input is non-empty and every element passes ``predicate``.

    Absent or empty input returns False.
    """
    if is_absent_or_empty(items):
        return False

    matched_any = False
    for element in items:
        if not predicate(element):
            return False
        matched_any = True
    # An unsized iterable can still turn out to be empty.
    return matched_any

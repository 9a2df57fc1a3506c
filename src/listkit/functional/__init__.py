"""Functional primitives for listkit.

Stateless, side-effect-free helpers over homogeneous collections: mapping,
filtering, lookups, deduplication, folds and sequence construction. Every
helper treats ``None`` like an empty input, returns a new container instead
of mutating its argument and evaluates eagerly.
"""

from listkit.functional.aggregates import (
    count,
    max_int,
    min_decimal,
    min_int,
    minimum,
    reduce_to_string,
    sum_by,
    sum_decimal,
    sum_ints,
)
from listkit.functional.construction import join, merge, of, unshift
from listkit.functional.search import (
    all_match,
    any_match,
    filter_list,
    find,
    find_by_hash,
    find_map,
    first,
    index_of,
)
from listkit.functional.sets import diff, distinct, zip_unique
from listkit.functional.transforms import (
    each,
    filtered_map,
    flat_map,
    flat_map_unique,
    map_indexed,
    map_list,
    to_string_list,
)

__all__ = [
    # transforms
    "map_list",
    "map_indexed",
    "filtered_map",
    "flat_map",
    "flat_map_unique",
    "each",
    "to_string_list",
    # search
    "filter_list",
    "find",
    "first",
    "find_by_hash",
    "find_map",
    "index_of",
    "any_match",
    "all_match",
    # sets
    "distinct",
    "diff",
    "zip_unique",
    # aggregates
    "min_int",
    "minimum",
    "min_decimal",
    "max_int",
    "sum_ints",
    "sum_by",
    "sum_decimal",
    "count",
    "reduce_to_string",
    # construction
    "of",
    "unshift",
    "merge",
    "join",
]

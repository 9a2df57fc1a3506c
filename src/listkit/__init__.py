"""listkit: eager, null-safe helpers for homogeneous collections."""

from listkit.functional import (
    all_match,
    any_match,
    count,
    diff,
    distinct,
    each,
    filter_list,
    filtered_map,
    find,
    find_by_hash,
    find_map,
    first,
    flat_map,
    flat_map_unique,
    index_of,
    join,
    map_indexed,
    map_list,
    max_int,
    merge,
    min_decimal,
    min_int,
    minimum,
    of,
    reduce_to_string,
    sum_by,
    sum_decimal,
    sum_ints,
    to_string_list,
    unshift,
    zip_unique,
)
__version__ = "0.1.0"

__all__ = [
    "map_list",
    "map_indexed",
    "filtered_map",
    "flat_map",
    "flat_map_unique",
    "each",
    "to_string_list",
    "filter_list",
    "find",
    "first",
    "find_by_hash",
    "find_map",
    "index_of",
    "any_match",
    "all_match",
    "distinct",
    "diff",
    "zip_unique",
    "min_int",
    "minimum",
    "min_decimal",
    "max_int",
    "sum_ints",
    "sum_by",
    "sum_decimal",
    "count",
    "reduce_to_string",
    "of",
    "unshift",
    "merge",
    "join",
]

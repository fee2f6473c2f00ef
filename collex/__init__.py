"""
'              _ _
'     ___ ___ | | | _____  __
'    / __/ _ \| | |/ _ \ \/ /
'   | (_| (_) | | |  __/>  <
'    \___\___/|_|_|\___/_/\_\
'
"""

# expose the main classes
from .enumerable import Enumerable, SortedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    from_sorted,
    empty,
    collex,
    P
)

# expose comparer contracts and the functional core
from .types import Comparison
from .debug import DebugFailure, AssertionLevel, set_assertion_level
from .comparers import (
    identity,
    equate_values,
    compare_values,
    compare_strings_case_sensitive,
    compare_strings_case_insensitive,
    equate_strings_case_insensitive,
    sort,
    binary_search,
    array_is_sorted
)
from .iterators import (
    EMPTY_ITERATOR,
    empty_iterator,
    single_iterator,
    array_iterator,
    get_iterator,
    map_iterator,
    flat_map_iterator,
    map_defined_iterator,
    zip_to_iterator,
    first_defined_iterator,
    reduce_left_iterator
)
from .arrays import (
    EMPTY_ARRAY,
    deduplicate,
    deduplicate_sorted,
    sort_and_deduplicate,
    insert_sorted,
    relative_complement,
    span_map,
    same_map,
    same_flat_map,
    flat_map,
    map_defined,
    compact,
    zip_with,
    find_map,
    first_defined
)
from .growth import append, combine, add_range, push_if_unique, append_if_unique

# define what `import *` does
__all__ = [
    "Enumerable",
    "SortedEnumerable",
    "from_iterable",
    "from_range",
    "from_sorted",
    "empty",
    "collex",
    "P",
    "Comparison",
    "DebugFailure",
    "AssertionLevel",
    "set_assertion_level",
    "identity",
    "equate_values",
    "compare_values",
    "compare_strings_case_sensitive",
    "compare_strings_case_insensitive",
    "equate_strings_case_insensitive",
    "sort",
    "binary_search",
    "array_is_sorted",
    "EMPTY_ITERATOR",
    "empty_iterator",
    "single_iterator",
    "array_iterator",
    "get_iterator",
    "map_iterator",
    "flat_map_iterator",
    "map_defined_iterator",
    "zip_to_iterator",
    "first_defined_iterator",
    "reduce_left_iterator",
    "EMPTY_ARRAY",
    "deduplicate",
    "deduplicate_sorted",
    "sort_and_deduplicate",
    "insert_sorted",
    "relative_complement",
    "span_map",
    "same_map",
    "same_flat_map",
    "flat_map",
    "map_defined",
    "compact",
    "zip_with",
    "find_map",
    "first_defined",
    "append",
    "combine",
    "add_range",
    "push_if_unique",
    "append_if_unique"
]

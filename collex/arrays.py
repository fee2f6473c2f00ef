"""
eager algorithms over finite sequences.

functions that accept an optional sequence pass none straight through.
functions documented as "same object" return their input unchanged (not a
copy) when the operation had nothing to do, so callers can detect a no-op
with `is`.
"""

import logging

import numpy as np

from .types import *
from . import debug
from .comparers import (
    compare_values, equate_values, sort, indices_of, stable_sort_indices,
    binary_search, identity, assert_sorted
)
from .growth import append, add_range, push_if_unique

logger = logging.getLogger(__name__)

# shared, read-only result for operations that produced nothing
EMPTY_ARRAY: Tuple[Any, ...] = ()


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# --- searching ---

def first_defined(array: Optional[Sequence[T]], callback: Callable[[T, int], Optional[U]]) -> Optional[U]:
    """returns the first result of `callback` that is not none. falsy results count."""
    if array is None:
        return None
    for i, item in enumerate(array):
        result = callback(item, i)
        if result is not None:
            return result
    return None


def find_map(array: Sequence[T], callback: Callable[[T, int], Optional[U]]) -> U:
    """
    returns the first truthy result of `callback`.
    the caller guarantees a match exists; not finding one is a debug failure.
    """
    for i, item in enumerate(array):
        result = callback(item, i)
        if result:
            return result
    debug.fail("find_map found no match")


# --- pairing ---

def zip_with(array_a: Sequence[T], array_b: Sequence[U], callback: Callable[[T, U, int], V]) -> List[V]:
    debug.assert_equal(len(array_a), len(array_b), "zipped sequences must have the same length")
    return [callback(a, b, i) for i, (a, b) in enumerate(zip(array_a, array_b))]


def zip_to_map(keys: Sequence[K], values: Sequence[V]) -> Dict[K, V]:
    debug.assert_equal(len(keys), len(values), "keys and values must have the same length")
    return dict(zip(keys, values))


def intersperse(array: List[T], element: T) -> List[T]:
    """puts `element` between every pair of items. same object when there is at most one item."""
    if len(array) <= 1:
        return array
    result = []
    for i, item in enumerate(array):
        if i:
            result.append(element)
        result.append(item)
    return result


# --- filtering ---

def filter(array: Optional[Sequence[T]], f: Predicate[T]) -> Optional[Sequence[T]]:
    """
    keeps the elements that satisfy `f`.
    returns the same object when every element passes.
    """
    if array:
        length = len(array)
        i = 0
        while i < length and f(array[i]):
            i += 1
        if i < length:
            result = list(array[:i])
            result.extend(item for item in array[i + 1:] if f(item))
            return result
    return array


def filter_mutate(array: List[T], f: Callable[[T, int, List[T]], bool]) -> None:
    """filters `array` in place"""
    out_index = 0
    for i in range(len(array)):
        if f(array[i], i, array):
            array[out_index] = array[i]
            out_index += 1
    del array[out_index:]


def compact(array: Sequence[T]) -> Sequence[T]:
    """removes falsy elements. same object when there are none."""
    result: Optional[List[T]] = None
    for i, item in enumerate(array):
        if result is not None or not item:
            if result is None:
                result = list(array[:i])
            if item:
                result.append(item)
    return array if result is None else result


# --- mapping ---

def same_map(array: Optional[Sequence[T]], f: Callable[[T, int], T]) -> Optional[Sequence[T]]:
    """
    maps each element through `f`.
    when every result is the very object it was computed from, the input
    sequence itself is returned and nothing is allocated. at the first
    changed element a new list is started from the unchanged prefix.
    """
    if array:
        for i, item in enumerate(array):
            mapped = f(item, i)
            if mapped is not item:
                result = list(array[:i])
                result.append(mapped)
                for j in range(i + 1, len(array)):
                    result.append(f(array[j], j))
                return result
    return array


def same_flat_map(array: Optional[Sequence[T]], f: Callable[[T, int], Union[T, Sequence[T]]]) -> Optional[Sequence[T]]:
    """
    like same_map, but `f` may also return a list or tuple of replacements.
    any element that changes, or expands into a sequence, switches to a new list.
    """
    result: Optional[List[T]] = None
    if array:
        for i, item in enumerate(array):
            mapped = f(item, i)
            if result is not None or mapped is not item or _is_array(mapped):
                if result is None:
                    result = list(array[:i])
                if _is_array(mapped):
                    result.extend(mapped)
                else:
                    result.append(mapped)
    return array if result is None else result


def flatten(array: Sequence[Union[T, Sequence[T], None]]) -> List[T]:
    """flattens one level of a mix of values and sequences, skipping none"""
    result: List[T] = []
    for value in array:
        if value is None:
            continue
        if _is_array(value):
            add_range(result, value)
        else:
            result.append(value)
    return result


def flat_map(array: Optional[Sequence[T]],
             map_fn: Callable[[T, int], Union[U, Sequence[U], None]]) -> Sequence[U]:
    """
    maps each element; sequence results are spread into the output and none
    results are skipped. returns the shared EMPTY_ARRAY if nothing was produced.
    """
    result: Optional[List[U]] = None
    if array:
        for i, item in enumerate(array):
            value = map_fn(item, i)
            if value is None:
                continue
            if _is_array(value):
                result = add_range(result, value)
            else:
                result = append(result, value)
    return result or EMPTY_ARRAY


def flat_map_to_mutable(array: Optional[Sequence[T]],
                        map_fn: Callable[[T, int], Union[U, Sequence[U], None]]) -> List[U]:
    """like flat_map, but always returns a new list the caller may mutate"""
    result: List[U] = []
    if array:
        for i, item in enumerate(array):
            value = map_fn(item, i)
            if value is None:
                continue
            if _is_array(value):
                add_range(result, value)
            else:
                result.append(value)
    return result


def map_all_or_fail(array: Sequence[T], map_fn: Callable[[T, int], Optional[U]]) -> Optional[List[U]]:
    """maps every element, or returns none as soon as one maps to none"""
    result = []
    for i, item in enumerate(array):
        mapped = map_fn(item, i)
        if mapped is None:
            return None
        result.append(mapped)
    return result


def map_defined(array: Optional[Sequence[T]], map_fn: Callable[[T, int], Optional[U]]) -> List[U]:
    result = []
    if array:
        for i, item in enumerate(array):
            mapped = map_fn(item, i)
            if mapped is not None:
                result.append(mapped)
    return result


# --- spans ---

def span_map(array: Optional[Sequence[T]],
             key_fn: Callable[[T, int], K],
             map_fn: Callable[[List[T], K, int, int], U]) -> Optional[List[U]]:
    """
    maps maximal contiguous runs of elements that share a key.
    only adjacency matters: [1, 1, 2, 1] gives three runs, not two.
    `map_fn(chunk, key, start, end)` is called once per run and its result is
    kept only if truthy, so a run can be dropped by returning none.
    """
    if array is None:
        return None
    result: List[U] = []
    if not array:
        return result

    def emit(start: int, end: int, key: K) -> None:
        value = map_fn(list(array[start:end]), key, start, end)
        if value:
            result.append(value)

    start = 0
    previous_key = key_fn(array[0], 0)
    for pos in range(1, len(array)):
        key = key_fn(array[pos], pos)
        if key != previous_key:
            emit(start, pos, previous_key)
            start, previous_key = pos, key
    emit(start, len(array), previous_key)
    return result


def get_ranges_where(array: Sequence[T], pred: Predicate[T], cb: Callable[[int, int], Any]) -> None:
    """calls `cb(start, after_end)` for every maximal run where `pred` holds"""
    start: Optional[int] = None
    for i, item in enumerate(array):
        if pred(item):
            if start is None:
                start = i
        elif start is not None:
            cb(start, i)
            start = None
    if start is not None:
        cb(start, len(array))


# --- equality ---

def array_is_equal_to(array1: Optional[Sequence[T]], array2: Optional[Sequence[T]],
                      equality_comparer: Callable[[T, T, int], bool] = lambda a, b, _: a == b) -> bool:
    if array1 is None or array2 is None:
        return array1 is array2
    if len(array1) != len(array2):
        return False
    return all(equality_comparer(a, b, i) for i, (a, b) in enumerate(zip(array1, array2)))


# --- deduplication ---

def _deduplicate_relational(array: Sequence[T], equality_comparer: EqualityComparer[T],
                            comparer: Comparer[T]) -> List[T]:
    # a stable sort keeps the first of any run of duplicates in front
    indices = indices_of(array)
    stable_sort_indices(array, indices, comparer)

    last = array[indices[0]]
    deduplicated = [indices[0]]
    for index in indices[1:]:
        item = array[index]
        if not equality_comparer(last, item):
            deduplicated.append(index)
            last = item

    # back to original order
    deduplicated.sort()
    return [array[i] for i in deduplicated]


def _deduplicate_equality(array: Sequence[T], equality_comparer: EqualityComparer[T]) -> List[T]:
    result: List[T] = []
    for item in array:
        push_if_unique(result, item, equality_comparer)
    return result


def deduplicate(array: Sequence[T],
                equality_comparer: EqualityComparer[T] = equate_values,
                comparer: Optional[Comparer[T]] = None) -> List[T]:
    """
    removes duplicates from an unsorted sequence, keeping the first occurrence
    of each value in its original position.

    :param equality_comparer: decides whether two values are duplicates.
    :param comparer: optional ordering used to sort before comparing, which
        turns the quadratic scan into an n log n one. it must agree with
        `equality_comparer`. the result is in the original order either way.
    """
    if len(array) == 0:
        return []
    if len(array) == 1:
        return list(array)
    if comparer is not None:
        return _deduplicate_relational(array, equality_comparer, comparer)
    return _deduplicate_equality(array, equality_comparer)


def deduplicate_sorted(array: Sequence[T],
                       comparer: Union[EqualityComparer[T], Comparer[T]]) -> Sequence[T]:
    """
    deduplicates a sequence that is already sorted, comparing each element
    only with the last one kept.

    `comparer` may be an equality predicate (True means duplicate) or an
    ordering predicate (EQUAL_TO means duplicate). a LESS_THAN result means
    the input was not sorted, which is a debug failure.
    """
    if len(array) == 0:
        return EMPTY_ARRAY

    last = array[0]
    deduplicated = [last]
    for item in array[1:]:
        result = comparer(item, last)
        # bools first: True == GREATER_THAN and False == EQUAL_TO as ints.
        # numpy scalars compare to np.bool_, which is not a bool subclass
        if isinstance(result, (bool, np.bool_)):
            if result:
                continue
        elif result == Comparison.EQUAL_TO:
            continue
        elif result == Comparison.LESS_THAN:
            debug.fail("Array is unsorted.")
        deduplicated.append(item)
        last = item
    return deduplicated


def _is_homogeneous_number_list(array: Sequence[Any]) -> bool:
    if not array:
        return False
    first_type = type(array[0])
    if first_type not in (int, float):
        return False
    return all(type(x) is first_type for x in array)


def _try_numpy_unique(array: Sequence[Any]) -> Optional[List[Any]]:
    """np.unique sorts and dedups in one go for plain ints or floats."""
    if not _is_homogeneous_number_list(array):
        return None
    try:
        arr = np.asarray(array)
        # nan != nan, and numpy collapses them; let the generic path decide
        if arr.dtype.kind == 'f' and np.isnan(arr).any():
            return None
        if arr.dtype.kind not in 'if':
            return None
        logger.debug("sort_and_deduplicate: numpy fast path for %d %s values", len(array), arr.dtype)
        return np.unique(arr).tolist()
    except (TypeError, ValueError, OverflowError):
        return None


def sort_and_deduplicate(array: Sequence[T],
                         comparer: Optional[Comparer[T]] = None,
                         equality_comparer: Optional[EqualityComparer[T]] = None) -> Sequence[T]:
    """
    stable sorts by `comparer` (default: natural ordering), then drops
    adjacent duplicates under `equality_comparer` (default: exact equality).
    """
    if comparer is None and equality_comparer is None:
        optimized = _try_numpy_unique(array)
        if optimized is not None:
            return optimized
    return deduplicate_sorted(sort(array, comparer or compare_values), equality_comparer or equate_values)


# --- sorted sequences ---

def insert_sorted(array: List[T], insert: T, comparer: Comparer[T]) -> bool:
    """
    inserts `insert` into the sorted list `array` at the position found by
    binary search. if an equal element already exists nothing is inserted,
    so this doubles as a sorted-set add. returns whether it was inserted.
    """
    if len(array) == 0:
        array.append(insert)
        return True

    assert_sorted(array, comparer)
    insert_index = binary_search(array, insert, identity, comparer)
    if insert_index < 0:
        array.insert(~insert_index, insert)
        return True
    return False


def relative_complement(array_a: Optional[Sequence[T]], array_b: Optional[Sequence[T]],
                        comparer: Comparer[T]) -> Optional[Sequence[T]]:
    """
    returns the elements of `array_b` that are not present in `array_a`
    (b minus a), in b's order. both inputs must be sorted by `comparer`;
    a violation noticed during the walk is a debug failure.

    a's cursor only moves past values smaller than the current b value, so
    repeated b values that equal the same a value are all dropped.
    if either input is none or empty, `array_b` is returned as-is.
    """
    if not array_b or not array_a:
        return array_b

    result: List[T] = []
    offset_a = 0
    length_a = len(array_a)
    for offset_b, item_b in enumerate(array_b):
        if offset_b > 0:
            debug.assert_greater_than_or_equal(comparer(item_b, array_b[offset_b - 1]), Comparison.EQUAL_TO)

        start_a = offset_a
        while offset_a < length_a:
            if offset_a > start_a:
                # only re-check a once its cursor moved during this step
                debug.assert_greater_than_or_equal(comparer(array_a[offset_a], array_a[offset_a - 1]),
                                                   Comparison.EQUAL_TO)
            comparison = comparer(item_b, array_a[offset_a])
            if comparison == Comparison.LESS_THAN:
                result.append(item_b)
                break
            if comparison == Comparison.EQUAL_TO:
                break
            offset_a += 1
        else:
            # a is exhausted: everything left in b is larger than all of a
            result.append(item_b)
    return result

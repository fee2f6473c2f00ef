from bisect import bisect_left
from functools import cmp_to_key
from .types import *
from . import debug


def identity(x: T) -> T:
    return x


def equate_values(a: T, b: T) -> bool:
    """exact value equality"""
    return a == b


def compare_values(a: Any, b: Any) -> Comparison:
    """
    three-way comparison using python's natural ordering.
    none sorts before every other value.
    """
    if a is b or a == b:
        return Comparison.EQUAL_TO
    if a is None:
        return Comparison.LESS_THAN
    if b is None:
        return Comparison.GREATER_THAN
    return Comparison.LESS_THAN if a < b else Comparison.GREATER_THAN


def compare_strings_case_sensitive(a: Optional[str], b: Optional[str]) -> Comparison:
    return compare_values(a, b)


def compare_strings_case_insensitive(a: Optional[str], b: Optional[str]) -> Comparison:
    """compares upper-cased text, the same way for every locale"""
    if a is b:
        return Comparison.EQUAL_TO
    if a is None:
        return Comparison.LESS_THAN
    if b is None:
        return Comparison.GREATER_THAN
    a, b = a.upper(), b.upper()
    return Comparison.LESS_THAN if a < b else Comparison.GREATER_THAN if a > b else Comparison.EQUAL_TO


def equate_strings_case_insensitive(a: Optional[str], b: Optional[str]) -> bool:
    return a is b or (a is not None and b is not None and a.upper() == b.upper())


def sort(array: Sequence[T], comparer: Comparer[T] = compare_values) -> List[T]:
    """stable sort into a new list. ties keep their original relative order."""
    if len(array) < 2:
        return list(array)
    # sorted() is guaranteed stable
    return sorted(array, key=cmp_to_key(comparer))


def indices_of(array: Sequence[Any]) -> List[int]:
    return list(range(len(array)))


def stable_sort_indices(array: Sequence[T], indices: List[int], comparer: Comparer[T]) -> None:
    """sorts `indices` in place by the elements they point at, breaking ties by index."""
    def compare_indices(x: int, y: int) -> int:
        return comparer(array[x], array[y]) or compare_values(x, y)
    indices.sort(key=cmp_to_key(compare_indices))


def binary_search(array: Sequence[T], value: T,
                  key_selector: Callable[[T], U],
                  key_comparer: Comparer[U],
                  offset: int = 0) -> int:
    """
    finds the index of an element whose key matches the key of `value`.
    when there is no exact match, returns the bitwise complement of the
    index at which `value` would have to be inserted to keep `array` sorted.
    """
    if len(array) <= offset:
        return ~offset
    wrap = cmp_to_key(key_comparer)
    target = key_selector(value)
    index = bisect_left(array, wrap(target), lo=offset, key=lambda item: wrap(key_selector(item)))
    if index < len(array) and key_comparer(key_selector(array[index]), target) == Comparison.EQUAL_TO:
        return index
    return ~index


def array_is_sorted(array: Sequence[T], comparer: Comparer[T]) -> bool:
    for previous, current in zip(array, array[1:]):
        if comparer(previous, current) == Comparison.GREATER_THAN:
            return False
    return True


def assert_sorted(array: Sequence[T], comparer: Comparer[T]) -> None:
    """full-scan sortedness check, only run at the most aggressive assertion level"""
    if debug.should_assert(debug.AssertionLevel.VERY_AGGRESSIVE):
        debug.assert_(array_is_sorted(array, comparer), "array is not sorted")

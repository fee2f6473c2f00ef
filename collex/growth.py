"""
helpers that grow an accumulated result across the absent / one / many
cardinalities without allocating until they have to.

lists are mutated in place and returned; tuples are treated as read-only
and a new tuple is returned instead.
"""

from .types import *
from .comparers import equate_values


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def append(to: Optional[Sequence[T]], value: Optional[T]) -> Optional[Sequence[T]]:
    """
    appends `value` to `to` and returns the result.
    a none value leaves `to` untouched; a none `to` becomes a new one-element list.
    """
    if value is None:
        return to
    if to is None:
        return [value]
    if isinstance(to, tuple):
        return to + (value,)
    to.append(value)
    return to


def concatenate(array1: Optional[Sequence[T]], array2: Optional[Sequence[T]]) -> Optional[Sequence[T]]:
    """concatenates two sequences, handing back either operand as-is if the other is empty"""
    if not array2:
        return array1
    if not array1:
        return array2
    return [*array1, *array2]


def combine(xs: Union[T, Sequence[T], None], ys: Union[T, Sequence[T], None]) -> Union[T, Sequence[T], None]:
    """
    combines two values or sequences into the smallest container that holds both:

        none  + none  -> none
        x     + none  -> x
        x     + y     -> [x, y]
        [xs]  + none  -> [xs]         (no-op)
        [xs]  + y     -> [xs..., y]   (append)
        [xs]  + [ys]  -> [xs..., ys...] (concatenate)
    """
    if xs is None:
        return ys
    if ys is None:
        return xs
    if _is_array(xs):
        return concatenate(xs, ys) if _is_array(ys) else append(xs, ys)
    if _is_array(ys):
        return append(ys, xs)
    return [xs, ys]


def to_offset(array: Sequence[Any], offset: int) -> int:
    """resolves a relative offset; negative offsets count back from the end"""
    return len(array) + offset if offset < 0 else offset


def add_range(to: Optional[Sequence[T]], from_: Optional[Sequence[T]],
              start: Optional[int] = None, end: Optional[int] = None) -> Optional[Sequence[T]]:
    """
    appends `from_[start:end]` to `to`, skipping none elements.

    :param to: destination. if none, a fresh slice of `from_` is returned instead.
    :param from_: source values. none or empty leaves `to` untouched.
    :param start: first offset to copy, may be negative.
    :param end: offset to stop at (exclusive), may be negative.
    """
    if not from_:
        return to
    if to is None:
        return list(from_[start:end])
    start = 0 if start is None else to_offset(from_, start)
    end = len(from_) if end is None else to_offset(from_, end)
    values = [from_[i] for i in range(max(start, 0), min(end, len(from_))) if from_[i] is not None]
    if isinstance(to, tuple):
        return to + tuple(values)
    to.extend(values)
    return to


def contains(array: Optional[Sequence[T]], value: T,
             equality_comparer: EqualityComparer[T] = equate_values) -> bool:
    if array:
        for item in array:
            if equality_comparer(item, value):
                return True
    return False


def push_if_unique(array: List[T], to_add: T,
                   equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
    """appends `to_add` unless an equal element is present. returns whether it was added."""
    if contains(array, to_add, equality_comparer or equate_values):
        return False
    array.append(to_add)
    return True


def append_if_unique(array: Optional[List[T]], to_add: T,
                     equality_comparer: Optional[EqualityComparer[T]] = None) -> List[T]:
    """like push_if_unique, but accepts none and always returns the list"""
    if array is None:
        return [to_add]
    push_if_unique(array, to_add, equality_comparer)
    return array

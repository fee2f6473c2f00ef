import typing
from .types import *
from .comparers import compare_values

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable, SortedEnumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(range(start, start + count)))

def from_sorted(data: Iterable[T], comparer: Comparer[T] = compare_values) -> 'SortedEnumerable[T]':
    """wrap data that is already sorted by `comparer`, without sorting it again"""
    from .enumerable import SortedEnumerable
    return SortedEnumerable(lambda: list(data), comparer, presorted=True)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
collex = from_iterable
P = from_iterable

from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from . import arrays
from .comparers import compare_values, sort, binary_search, identity, assert_sorted

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.zip import ZipAccessor
from .extensions.lazy import IterAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazily evaluated sequence with allocation-conscious collection algorithms."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.zip = ZipAccessor(self)
        self.iter = IterAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        state = f"{len(self._cached_result)} items" if self._is_cached else "pending"
        return f"{type(self).__name__}({state})"

# --- sorted enumerable class ---

class SortedEnumerable(Enumerable[T]):
    """
    a sequence kept sorted by a three-way comparer.
    the sort is stable and is applied once, the first time data is needed.
    """

    def __init__(self, data_func: Callable[[], List[T]], comparer: Comparer[T] = compare_values,
                 presorted: bool = False):
        super().__init__(data_func)
        self._comparer = comparer
        self._presorted = presorted

    @property
    def comparer(self) -> Comparer[T]:
        return self._comparer

    def _get_data(self) -> List[T]:
        """overrides base to sort once, or to trust a presorted source."""
        if not self._is_cached:
            data = self._data_func()
            if self._presorted:
                data = list(data)
                assert_sorted(data, self._comparer)
            else:
                data = sort(data, self._comparer)
            self._cached_result = data
            self._is_cached = True
        return self._cached_result

    def _sorted(self, data_func: Callable[[], List[T]]) -> 'SortedEnumerable[T]':
        return SortedEnumerable(data_func, self._comparer, presorted=True)

    def _other_data(self, other: Iterable[T]) -> List[T]:
        if isinstance(other, SortedEnumerable):
            if other._comparer is not self._comparer:
                raise TypeError("cannot combine sorted enumerables with different comparers.")
            return other._get_data()
        # plain iterables are trusted to already be sorted by our comparer
        return list(other)

    def binary_search(self, value: T) -> int:
        """index of an equal element, or the complement (~i) of its insertion point."""
        return binary_search(self._get_data(), value, identity, self._comparer)

    def contains(self, value: T) -> bool:
        return self.binary_search(value) >= 0

    def insert(self, value: T) -> 'SortedEnumerable[T]':
        """returns a new sorted enumerable with `value` added, unless an equal element exists."""
        def insert_data():
            data = list(self._get_data())
            arrays.insert_sorted(data, value, self._comparer)
            return data
        return self._sorted(insert_data)

    def deduplicate(self, equality_comparer: Optional[EqualityComparer[T]] = None) -> 'SortedEnumerable[T]':
        """
        drops adjacent duplicates in one pass. without an equality comparer,
        elements the sort comparer reports as equal are duplicates.
        """
        return self._sorted(lambda: list(arrays.deduplicate_sorted(self._get_data(),
                                                                  equality_comparer or self._comparer)))

    def relative_complement(self, other: Iterable[T]) -> 'SortedEnumerable[T]':
        """the elements of `other` that are not in this sequence (other minus self)."""
        def complement_data():
            result = arrays.relative_complement(self._get_data(), self._other_data(other), self._comparer)
            return list(result)
        return self._sorted(complement_data)

    def merge_with(self, other: Iterable[T]) -> 'SortedEnumerable[T]':
        """
        merges with another sequence sorted by the same comparer (o(n + m)).
        stable: on ties, elements of this sequence come first.
        """
        def merge_data():
            list_a = self._get_data()
            list_b = self._other_data(other)

            # two-pointer merge using the comparer
            result = []
            i, j = 0, 0
            while i < len(list_a) and j < len(list_b):
                if self._comparer(list_a[i], list_b[j]) <= 0:
                    result.append(list_a[i])
                    i += 1
                else:
                    result.append(list_b[j])
                    j += 1

            result.extend(list_a[i:])
            result.extend(list_b[j:])
            return result

        return self._sorted(merge_data)

from __future__ import annotations
import typing
from ..types import *
from .. import arrays
from ..comparers import compare_values, equate_values
from ..growth import contains, append_if_unique

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, SortedEnumerable

class SetAccessor(Generic[T]):
    """
    provides deduplication and membership operations driven by caller-supplied
    equality and ordering comparers. nothing here assumes elements are hashable.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def deduplicate(self, equality_comparer: EqualityComparer[T] = equate_values,
                    comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """
        return distinct elements. preserves order of first appearance.
        passing an ordering `comparer` consistent with `equality_comparer`
        makes this o(n log n) instead of o(n^2).
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.deduplicate(self._enumerable._get_data(), equality_comparer, comparer))

    def sort_and_deduplicate(self, comparer: Optional[Comparer[T]] = None,
                             equality_comparer: Optional[EqualityComparer[T]] = None) -> 'SortedEnumerable[T]':
        """sort, then drop adjacent duplicates. the result is sorted by `comparer`."""
        from ..enumerable import SortedEnumerable
        def sort_and_deduplicate_data():
            return list(arrays.sort_and_deduplicate(self._enumerable._get_data(), comparer, equality_comparer))
        return SortedEnumerable(sort_and_deduplicate_data, comparer or compare_values, presorted=True)

    def contains(self, value: T, equality_comparer: EqualityComparer[T] = equate_values) -> bool:
        """linear membership test under `equality_comparer`"""
        return contains(self._enumerable._get_data(), value, equality_comparer)

    def append_if_unique(self, value: T,
                         equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """append `value` unless an equal element is already present"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: append_if_unique(list(self._enumerable._get_data()), value, equality_comparer))

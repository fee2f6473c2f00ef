from __future__ import annotations
import typing
from ..types import *
from .. import arrays
from ..growth import concatenate
from ..comparers import compare_values

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, SortedEnumerable

class _CoreOperations(Generic[T]):
    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        # arrays.filter hands back the source list untouched when everything passes
        return Enumerable(lambda: arrays.filter(self._get_data(), predicate))

    def same_map(self: 'Enumerable[T]', selector: Callable[[T], T]) -> 'Enumerable[T]':
        """
        maps each element, returning this very enumerable when every element maps
        to itself. this is an EAGER operation: it has to look at the results to know.
        """
        from ..enumerable import Enumerable
        data = self._get_data()
        mapped = arrays.same_map(data, lambda x, _: selector(x))
        if mapped is data:
            return self
        return Enumerable(lambda: mapped)

    def same_flat_map(self: 'Enumerable[T]', selector: Callable[[T], Union[T, Sequence[T]]]) -> 'Enumerable[T]':
        """eager like same_map; `selector` may also return a list or tuple of replacements"""
        from ..enumerable import Enumerable
        data = self._get_data()
        mapped = arrays.same_flat_map(data, lambda x, _: selector(x))
        if mapped is data:
            return self
        return Enumerable(lambda: mapped)

    def flat_map(self: 'Enumerable[T]', selector: Callable[[T], Union[U, Sequence[U], None]]) -> 'Enumerable[U]':
        """project and flatten; sequences are spread and none results skipped"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.flat_map_to_mutable(self._get_data(), lambda x, _: selector(x)))

    def map_defined(self: 'Enumerable[T]', selector: Callable[[T], Optional[U]]) -> 'Enumerable[U]':
        """project, dropping none results. falsy values such as 0 and '' are kept."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.map_defined(self._get_data(), lambda x, _: selector(x)))

    def compact(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """drop falsy elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.compact(self._get_data()))

    def intersperse(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """put `element` between each pair of elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.intersperse(self._get_data(), element))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(concatenate(self._get_data(), list(other))))

    def sort(self: 'Enumerable[T]', comparer: Comparer[T] = compare_values) -> 'SortedEnumerable[T]':
        """stable sort with a three-way comparer"""
        from ..enumerable import SortedEnumerable
        return SortedEnumerable(self._get_data, comparer)

    def as_sorted(self: 'Enumerable[T]', comparer: Comparer[T] = compare_values) -> 'SortedEnumerable[T]':
        """
        treats the current sequence as already sorted by `comparer`.
        this does not perform a sort. use it only when the source is pre-sorted.
        """
        from ..enumerable import SortedEnumerable
        return SortedEnumerable(self._get_data, comparer, presorted=True)

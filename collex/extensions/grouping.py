from __future__ import annotations
import typing
from ..types import *
from .. import arrays

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def span_map(self, key_selector: KeySelector[T, K],
                 result_selector: Callable[[List[T], K, int, int], U]) -> 'Enumerable[U]':
        """
        map each maximal run of adjacent elements with the same key.
        `result_selector(chunk, key, start, end)`; falsy results are dropped.
        """
        from ..enumerable import Enumerable
        def span_data():
            return arrays.span_map(self._enumerable._get_data(), lambda x, _: key_selector(x), result_selector)
        return Enumerable(span_data)

    def batch_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[List[T]]':
        """batch consecutive elements with same key"""
        # chunks are never empty, so none of them is dropped
        return self.span_map(key_selector, lambda chunk, key, start, end: chunk)

    def ranges_where(self, predicate: Predicate[T]) -> 'Enumerable[Tuple[int, int]]':
        """(start, end) index pairs of each maximal run satisfying the predicate"""
        from ..enumerable import Enumerable
        def ranges_data():
            ranges = []
            arrays.get_ranges_where(self._enumerable._get_data(), predicate,
                                    lambda start, end: ranges.append((start, end)))
            return ranges
        return Enumerable(ranges_data)

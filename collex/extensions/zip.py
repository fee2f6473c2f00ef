from __future__ import annotations
import typing
from ..types import *
from .. import arrays
from ..iterators import zip_to_iterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    """positional pairing. both sides must have the same length."""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """zip two sequences of equal length with custom result selector"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: arrays.zip_with(self._enumerable._get_data(), list(other),
                                                  lambda t, u, _: result_selector(t, u)))

    def zip_to_map(self, values: Iterable[V]) -> Dict[T, V]:
        """use this sequence as keys and `values` as values"""
        return arrays.zip_to_map(self._enumerable._get_data(), list(values))

    def iterator(self, other: Sequence[U]) -> Iterator[Tuple[T, U]]:
        """lazy pairs; the length check happens immediately"""
        return zip_to_iterator(self._enumerable._get_data(), other)

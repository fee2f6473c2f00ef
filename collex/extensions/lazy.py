from __future__ import annotations
import typing
from ..types import *
from .. import iterators

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class IterAccessor(Generic[T]):
    """
    lazy pull-based views over the sequence.
    the combinators return plain iterators and call nothing until advanced;
    the consumers stop pulling as soon as they have their answer.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _source(self) -> Iterator[T]:
        return iterators.array_iterator(self._enumerable._get_data())

    def map(self, selector: Selector[T, U]) -> Iterator[U]:
        return iterators.map_iterator(self._source(), selector)

    def flat_map(self, selector: Callable[[T], Union[Iterable[U], None]]) -> Iterator[U]:
        return iterators.flat_map_iterator(self._source(), selector)

    def map_defined(self, selector: Callable[[T], Optional[U]]) -> Iterator[U]:
        return iterators.map_defined_iterator(self._source(), selector)

    def first_defined(self, callback: Callable[[T], Optional[U]]) -> Optional[U]:
        return iterators.first_defined_iterator(self._source(), callback)

    def reduce_left(self, f: Callable[[U, T, int], U], initial: U) -> U:
        return iterators.reduce_left_iterator(self._source(), f, initial)

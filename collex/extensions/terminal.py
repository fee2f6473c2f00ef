from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import arrays
from ..comparers import compare_values, array_is_sorted
from ..iterators import array_iterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def tuple(self) -> Tuple[T, ...]:
        """convert to a read-only tuple"""
        return tuple(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def iterator(self) -> Iterator[T]:
        """a pull-based cursor over the elements"""
        return array_iterator(self._enumerable._get_data())

    def first_defined(self, callback: Callable[[T], Optional[U]]) -> Optional[U]:
        """first result of `callback` that is not none, or none"""
        return arrays.first_defined(self._enumerable._get_data(), lambda x, _: callback(x))

    def find_map(self, callback: Callable[[T], Optional[U]]) -> U:
        """first truthy result of `callback`. a missing match is a debug failure."""
        return arrays.find_map(self._enumerable._get_data(), lambda x, _: callback(x))

    def is_sorted(self, comparer: Comparer[T] = compare_values) -> bool:
        return array_is_sorted(self._enumerable._get_data(), comparer)

    def is_equal_to(self, other: Optional[Iterable[T]],
                    equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """element-wise equality with another sequence"""
        other_data = None if other is None else list(other)
        if equality_comparer is None:
            return arrays.array_is_equal_to(self._enumerable._get_data(), other_data)
        return arrays.array_is_equal_to(self._enumerable._get_data(), other_data,
                                        lambda a, b, _: equality_comparer(a, b))

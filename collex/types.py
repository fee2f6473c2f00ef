from enum import IntEnum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Sequence, MutableSequence, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')


class Comparison(IntEnum):
    """outcome of an ordering predicate"""
    LESS_THAN = -1
    EQUAL_TO = 0
    GREATER_THAN = 1


Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], Comparison]
EqualityComparer = Callable[[T, T], bool]

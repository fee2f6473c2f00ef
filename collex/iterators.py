"""
pull-based lazy iterators.

every combinator here is a small state object over python's iterator
protocol: `next()` either returns the next element or raises StopIteration,
and keeps raising it once the source is exhausted. each produced element
costs exactly one `next()` on the upstream source (flat_map_iterator may
additionally pull past exhausted sub-sources).
"""

from abc import abstractmethod
from .types import *
from . import debug


class LazyIterator(Iterator[T]):
    """base for the combinators below. subclasses only implement __next__."""

    def __iter__(self) -> 'LazyIterator[T]':
        return self

    @abstractmethod
    def __next__(self) -> T:
        pass


class _EmptyIterator(LazyIterator[Any]):
    # carries no state, so a single instance is shared by everyone
    def __next__(self) -> Any:
        raise StopIteration

    def __repr__(self) -> str:
        return "EMPTY_ITERATOR"


EMPTY_ITERATOR: LazyIterator[Any] = _EmptyIterator()


class _SingleIterator(LazyIterator[T]):
    def __init__(self, value: T):
        self._value = value
        self._done = False

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        self._done = True
        value, self._value = self._value, None
        return value


class _ArrayIterator(LazyIterator[T]):
    def __init__(self, array: Sequence[T]):
        self._array = array
        self._index = 0

    def __next__(self) -> T:
        if self._index >= len(self._array):
            # drop the source so later appends cannot revive the cursor
            self._array = ()
            raise StopIteration
        self._index += 1
        return self._array[self._index - 1]


class _MapIterator(LazyIterator[U]):
    def __init__(self, source: Iterator[T], map_fn: Callable[[T], U]):
        self._source = source
        self._map_fn = map_fn

    def __next__(self) -> U:
        return self._map_fn(next(self._source))


class _FlatMapIterator(LazyIterator[U]):
    def __init__(self, source: Iterator[T], map_fn: Callable[[T], Union[Iterable[U], None]]):
        self._source = source
        self._map_fn = map_fn
        self._current: Iterator[U] = EMPTY_ITERATOR

    def _sub_iterator(self, item: T) -> Iterator[U]:
        result = self._map_fn(item)
        if result is None:
            return EMPTY_ITERATOR
        if isinstance(result, (list, tuple)):
            return _ArrayIterator(result)
        if isinstance(result, Iterator):
            return result
        return iter(result)

    def __next__(self) -> U:
        while True:
            try:
                return next(self._current)
            except StopIteration:
                pass
            # sub-source exhausted, pull the next one. StopIteration from the
            # outer source ends this iterator too.
            self._current = self._sub_iterator(next(self._source))


class _MapDefinedIterator(LazyIterator[U]):
    def __init__(self, source: Iterator[T], map_fn: Callable[[T], Optional[U]]):
        self._source = source
        self._map_fn = map_fn

    def __next__(self) -> U:
        while True:
            value = self._map_fn(next(self._source))
            # only none means "no value"; 0, '' and False are kept
            if value is not None:
                return value


class _ZipIterator(LazyIterator[Tuple[T, U]]):
    def __init__(self, array_a: Sequence[T], array_b: Sequence[U]):
        self._array_a = array_a
        self._array_b = array_b
        self._index = 0

    def __next__(self) -> Tuple[T, U]:
        if self._index == len(self._array_a):
            raise StopIteration
        self._index += 1
        return self._array_a[self._index - 1], self._array_b[self._index - 1]


# --- constructors ---

def empty_iterator() -> LazyIterator[Any]:
    return EMPTY_ITERATOR


def single_iterator(value: T) -> LazyIterator[T]:
    """yields `value` once, then is exhausted forever"""
    return _SingleIterator(value)


def array_iterator(array: Sequence[T]) -> LazyIterator[T]:
    return _ArrayIterator(array)


def get_iterator(iterable: Union[Sequence[T], Mapping[K, V], Set[T], frozenset, None]) -> Optional[Iterator[Any]]:
    """
    returns an iterator for a list, tuple, dict or set.
    dicts iterate their (key, value) pairs; none gives none.
    """
    if iterable is None:
        return None
    if isinstance(iterable, (list, tuple)):
        return _ArrayIterator(iterable)
    if isinstance(iterable, Mapping):
        return iter(iterable.items())
    if isinstance(iterable, (set, frozenset)):
        return iter(iterable)
    raise TypeError(f"iteration not supported for {type(iterable).__name__}")


# --- combinators ---

def map_iterator(source: Iterator[T], map_fn: Callable[[T], U]) -> LazyIterator[U]:
    """lazily applies `map_fn`; nothing is called until the result is advanced"""
    return _MapIterator(source, map_fn)


def flat_map_iterator(source: Iterator[T], map_fn: Callable[[T], Union[Iterable[U], None]]) -> LazyIterator[U]:
    """
    concatenates the sub-sequences produced by `map_fn`, in order.
    `map_fn` may return a sequence, an iterator, any other iterable, or none
    (which counts as empty).
    """
    return _FlatMapIterator(source, map_fn)


def map_defined_iterator(source: Iterator[T], map_fn: Callable[[T], Optional[U]]) -> LazyIterator[U]:
    """lazily maps and drops results that are none"""
    return _MapDefinedIterator(source, map_fn)


def zip_to_iterator(array_a: Sequence[T], array_b: Sequence[U]) -> LazyIterator[Tuple[T, U]]:
    """pairs elements by position. both sequences must have the same length."""
    debug.assert_equal(len(array_a), len(array_b), "zipped sequences must have the same length")
    return _ZipIterator(array_a, array_b)


# --- consumers ---

def first_defined_iterator(source: Iterator[T], callback: Callable[[T], Optional[U]]) -> Optional[U]:
    """returns the first result of `callback` that is not none, stopping there"""
    for item in source:
        result = callback(item)
        if result is not None:
            return result
    return None


def reduce_left_iterator(source: Optional[Iterator[T]],
                         f: Callable[[U, T, int], U],
                         initial: U) -> U:
    """folds left to right, passing each element's position to `f`"""
    result = initial
    if source is not None:
        for position, item in enumerate(source):
            result = f(result, item, position)
    return result

"""
the sequence operators.

every operator that returns a sequence returns an `Enumerable`: nothing runs
until it is iterated, and each iteration re-reads the source. argument checks
happen at call time, before any element is produced.
"""
from __future__ import annotations
import logging
from functools import cmp_to_key
from .types import *
from .errors import ArgumentNoneError, InvalidArgumentError, InvalidCastError
from .comparers import Comparer, ReverseComparer, DEFAULT, as_comparer
from .config import get_settings
from .enumerable import Enumerable

logger = logging.getLogger(__name__)


# --- validation helpers ---

def _require(value: Any, name: str) -> None:
    if value is None:
        raise ArgumentNoneError(name)


def _require_callable(func: Any, name: str) -> None:
    _require(func, name)
    if not callable(func):
        raise InvalidArgumentError(name, f"{name} must be callable.")


def _require_int(value: Any, name: str) -> None:
    # bool is an int subclass but never a meaningful bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, f"{name} must be an int.")


def element_type_of(source: Iterable[Any]) -> Optional[type]:
    """the statically known element type of a source, or None"""
    if isinstance(source, Enumerable):
        return source.element_type
    if isinstance(source, range):
        return int
    if isinstance(source, str):
        return str
    if isinstance(source, (bytes, bytearray)):
        return int
    return None


# --- operators ---

def filter(source: Iterable[T], predicate: Predicate[T]) -> Enumerable[T]:
    """elements of source for which predicate holds, in source order"""
    _require(source, 'source')
    _require_callable(predicate, 'predicate')

    def filter_data():
        for item in source:
            if predicate(item):
                yield item

    return Enumerable(filter_data, element_type_of(source))


def transform(source: Iterable[T], transformer: Selector[T, U]) -> Enumerable[U]:
    """transformer applied to each element of source, in order"""
    _require(source, 'source')
    _require_callable(transformer, 'transformer')

    def map_data():
        for item in source:
            yield transformer(item)

    return Enumerable(map_data)


def sort_by(source: Iterable[T], key: KeySelector[T, K],
            comparer: Union[Comparer[K], CompareFunc[K]] = DEFAULT) -> Enumerable[T]:
    """sort ascending by key, ordering keys with comparer"""
    _require(source, 'source')
    _require_callable(key, 'key')
    return _sorted(source, key, as_comparer(comparer), descending=False)


def sort_by_descending(source: Iterable[T], key: KeySelector[T, K],
                       comparer: Union[Comparer[K], CompareFunc[K]] = DEFAULT) -> Enumerable[T]:
    """sort descending by key. same sort as sort_by with the comparer's arguments swapped"""
    _require(source, 'source')
    _require_callable(key, 'key')
    return _sorted(source, key, ReverseComparer(as_comparer(comparer)), descending=True)


def _sorted(source: Iterable[T], key: KeySelector[T, K], comparer: Comparer[K],
            descending: bool) -> Enumerable[T]:
    def sorted_data():
        buffer = list(source)
        logger.debug("sorting %d buffered elements (descending=%s) with %r",
                     len(buffer), descending, comparer)
        buffer.sort(key=cmp_to_key(lambda a, b: comparer.compare(key(a), key(b))))
        yield from buffer

    return Enumerable(sorted_data, element_type_of(source))


def cast_to(source: Iterable[Any], target_type: TypeOrTuple) -> Iterable[U]:
    """
    narrows every element of source to target_type.

    when the source is already known to hold target_type elements it is
    returned as is. otherwise each element is checked as it is reached and
    the first mismatch raises InvalidCastError.
    """
    _require(source, 'source')
    _require(target_type, 'target_type')
    if not _is_type_or_tuple(target_type):
        raise InvalidArgumentError('target_type', "target_type must be a type or a tuple of types.")

    known = element_type_of(source)
    if known is not None and issubclass(known, target_type):
        logger.debug("cast to %r skipped, source already holds %r", target_type, known)
        return source

    def cast_data():
        for index, item in enumerate(source):
            if not isinstance(item, target_type):
                raise InvalidCastError(item, target_type, index)
            yield item

    return Enumerable(cast_data, target_type if isinstance(target_type, type) else None)


def _is_type_or_tuple(target_type: Any) -> bool:
    if isinstance(target_type, type):
        return True
    return isinstance(target_type, tuple) and len(target_type) > 0 and all(
        isinstance(t, type) for t in target_type)


def for_all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true when every element satisfies predicate. an empty source is true"""
    _require(source, 'source')
    _require_callable(predicate, 'predicate')
    # all() stops at the first counterexample
    return all(predicate(item) for item in source)


def get_range(start: int, count: int) -> Enumerable[int]:
    """count consecutive integers starting at start"""
    _require_int(start, 'start')
    _require_int(count, 'count')
    if count <= 0:
        raise InvalidArgumentError('count', "count cannot be less or equal to zero.")

    settings = get_settings()
    bounds = settings.range_bounds
    if bounds is None:
        return Enumerable(lambda: range(start, start + count), int)

    low, high = bounds
    if settings.range_overflow == 'raise':
        if not low <= start <= high:
            raise InvalidArgumentError('start', f"start must be within [{low}, {high}].")
        if start + count - 1 > high:
            raise InvalidArgumentError(
                'count', f"range of {count} values from {start} overflows {settings.range_bits}-bit integers.")
        return Enumerable(lambda: range(start, start + count), int)

    span = high - low + 1

    def wrapped_data():
        for value in range(start, start + count):
            yield (value - low) % span + low

    return Enumerable(wrapped_data, int)

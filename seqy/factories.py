import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """wrap an iterable. the data is read lazily, once per traversal"""
    from .enumerable import Enumerable
    from .errors import ArgumentNoneError
    from .operators import element_type_of
    if data is None:
        raise ArgumentNoneError('data')
    if isinstance(data, Enumerable):
        return data
    return Enumerable(lambda: data, element_type_of(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .operators import get_range
    return get_range(start, count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

# --- aliases ---
seqy = from_iterable
S = from_iterable

from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
CompareFunc = Callable[[T, T], int]
DataFunc = Callable[[], Iterable[T]]

# a single type or a tuple of types, as accepted by isinstance
TypeOrTuple = Union[Type[Any], Tuple[Type[Any], ...]]

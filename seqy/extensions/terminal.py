from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """eager operations: each call runs one full (or short-circuited) traversal"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return [item for item in self._enumerable]

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable)

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list(), dtype=dtype)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list(), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def for_all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        from .. import operators
        return operators.for_all(self._enumerable, predicate)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        found = self._first(predicate)
        if found is _MISSING:
            if predicate is None: raise ValueError("sequence contains no elements")
            raise ValueError("no element satisfies the condition")
        return found

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        found = self._first(predicate)
        return default if found is _MISSING else found

    def _first(self, predicate: Optional[Predicate[T]]) -> Any:
        for item in self._enumerable:
            if predicate is None or predicate(item):
                return item
        return _MISSING

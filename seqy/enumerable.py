from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh traversal of the sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: DataFunc[T], element_type: Optional[type] = None):
        """init with a function that returns a fresh iterable each time it is called"""
        self._data_func = data_func
        self.element_type = element_type

    def __iter__(self) -> Iterator[T]:
        # nothing is cached: every traversal re-runs the pipeline over the source
        return iter(self._data_func())

    def __repr__(self) -> str:
        if self.element_type is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(element_type={self.element_type.__name__})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, re-iterable sequence with chainable operators."""
    def __init__(self, data_func: DataFunc[T], element_type: Optional[type] = None):
        super().__init__(data_func, element_type)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

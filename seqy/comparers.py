from abc import ABC, abstractmethod
from .types import *
from .errors import InvalidArgumentError, ArgumentNoneError

# --- abstract base class ---

class Comparer(ABC, Generic[K]):
    """three-way ordering strategy over keys of one type."""

    @abstractmethod
    def compare(self, x: K, y: K) -> int:
        """negative if x < y, zero if equal, positive if x > y"""
        pass

    def __call__(self, x: K, y: K) -> int:
        return self.compare(x, y)


class DefaultComparer(Comparer[K]):
    """natural ordering via < and >. None sorts before everything else."""

    def compare(self, x: K, y: K) -> int:
        if x is None:
            return 0 if y is None else -1
        if y is None:
            return 1
        if x < y: return -1
        if x > y: return 1
        return 0

    def __repr__(self) -> str:
        return "DefaultComparer()"


class FunctionComparer(Comparer[K]):
    """adapts a plain (x, y) -> int function to the comparer interface."""

    def __init__(self, func: CompareFunc[K]):
        self._func = func

    def compare(self, x: K, y: K) -> int:
        return self._func(x, y)

    def __repr__(self) -> str:
        return f"FunctionComparer({getattr(self._func, '__name__', self._func)!r})"


class ReverseComparer(Comparer[K]):
    """swaps the arguments of an inner comparer, inverting its order."""

    def __init__(self, inner: Comparer[K]):
        self.inner = inner

    def compare(self, x: K, y: K) -> int:
        return self.inner.compare(y, x)

    def __repr__(self) -> str:
        return f"ReverseComparer({self.inner!r})"


DEFAULT = DefaultComparer()


def as_comparer(comparer: Union[Comparer[K], CompareFunc[K]]) -> Comparer[K]:
    """normalize a Comparer or a three-way function into a Comparer"""
    if comparer is None:
        raise ArgumentNoneError('comparer')
    if isinstance(comparer, Comparer):
        return comparer
    if callable(comparer):
        return FunctionComparer(comparer)
    raise InvalidArgumentError('comparer', "comparer must be a Comparer or a callable.")

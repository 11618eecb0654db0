from __future__ import annotations
import typing
from ..types import *
from ..comparers import Comparer, DEFAULT

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _CoreOperations(Generic[T]):
    """fluent counterparts of the functions in seqy.operators"""

    def filter(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from .. import operators
        return operators.filter(self, predicate)

    def transform(self: 'Enumerable[T]', transformer: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from .. import operators
        return operators.transform(self, transformer)

    def sort_by(self: 'Enumerable[T]', key: KeySelector[T, K],
                comparer: Union[Comparer[K], CompareFunc[K]] = DEFAULT) -> 'Enumerable[T]':
        """sort elements ascending by a key"""
        from .. import operators
        return operators.sort_by(self, key, comparer)

    def sort_by_descending(self: 'Enumerable[T]', key: KeySelector[T, K],
                           comparer: Union[Comparer[K], CompareFunc[K]] = DEFAULT) -> 'Enumerable[T]':
        """sort elements descending by a key"""
        from .. import operators
        return operators.sort_by_descending(self, key, comparer)

    def cast_to(self: 'Enumerable[T]', target_type: TypeOrTuple) -> 'Enumerable[Any]':
        """narrow every element to target_type, failing on the first mismatch"""
        # returns self unchanged when element_type already satisfies target_type
        from .. import operators
        return operators.cast_to(self, target_type)

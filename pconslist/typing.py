"""
Type aliases for the callables accepted by the list functions.

Only meant to be used in annotations, the functions themselves accept anything
callable with the right arguments.
"""
from typing import Callable, Optional, Tuple, Type, TypeVar, Union

from pconslist._ordering import Ordering

T = TypeVar('T')
U = TypeVar('U')

# Only the sign of the returned value is significant
Comparator = Callable[[T, T], Union[Ordering, int]]

Relation = Callable[[T, T], bool]

Predicate = Callable[[T], bool]

PartialFunction = Callable[[T], Optional[U]]

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]

__all__ = ('Comparator', 'Relation', 'Predicate', 'PartialFunction', 'ExceptionTypes')

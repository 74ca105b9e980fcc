from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar, Tuple
from typing_extensions import Protocol
from abc import abstractmethod

import itertools
import operator

from ._utility import sphinx_build

M = TypeVar('M')

class Monoid(Protocol[M]):
	r'''
	An associative binary operation with an identity element

	Anything with an ``empty`` attribute and a ``combine`` method
	can be passed where a monoid is expected, for example to
	:meth:`PCatList.foldmap`. Instances must satisfy:

	- ``combine(empty, x) == x == combine(x, empty)``
	- ``combine(combine(x, y), z) == combine(x, combine(y, z))``
	'''

	@property
	@abstractmethod
	def empty(self) -> M: ...

	@abstractmethod
	def combine(self, x:M, y:M) -> M: ...

class Applicative(Protocol):
	r'''
	A context that effects can be threaded through

	Used by :meth:`PCatList.traverse` and :meth:`PCatList.sequence`.
	``pure(x)`` wraps a plain value, and ``map2(func, fa, fb)``
	combines two wrapped values with ``func``,
	running the effects of ``fa`` before those of ``fb``.
	'''

	@abstractmethod
	def pure(self, value:Any) -> Any: ...

	@abstractmethod
	def map2(self, func:Callable[[Any,Any],Any], fa:Any, fb:Any) -> Any: ...

class FuncMonoid(Generic[M]):
	__slots__ = ('_name', '_empty', '_combine')

	if not sphinx_build:
		_name: str
		_empty: M
		_combine: Callable[[M,M],M]

	def __new__(cls, name:str, empty:M, combine:Callable[[M,M],M]):
		self = super().__new__(cls)
		self._name = name
		self._empty = empty
		self._combine = combine
		return self

	@property
	def empty(self) -> M:
		return self._empty

	def combine(self, x:M, y:M) -> M:
		return self._combine(x, y)

	def __repr__(self) -> str:
		return self._name

class FuncApplicative:
	__slots__ = ('_name', '_pure', '_map2')

	if not sphinx_build:
		_name: str
		_pure: Callable[[Any],Any]
		_map2: Callable[[Callable[[Any,Any],Any],Any,Any],Any]

	def __new__(cls, name:str, pure:Callable[[Any],Any],
			map2:Callable[[Callable[[Any,Any],Any],Any,Any],Any]):
		self = super().__new__(cls)
		self._name = name
		self._pure = pure
		self._map2 = map2
		return self

	def pure(self, value:Any) -> Any:
		return self._pure(value)

	def map2(self, func:Callable[[Any,Any],Any], fa:Any, fb:Any) -> Any:
		return self._map2(func, fa, fb)

	def __repr__(self) -> str:
		return self._name

def monoid(empty:M, combine:Callable[[M,M],M],
		name:str='monoid') -> FuncMonoid[M]:
	r'''
	Create a :class:`Monoid` from an identity element and an operation

	>>> m = monoid(frozenset(), frozenset.union, 'union_monoid')
	>>> m
	union_monoid
	>>> sorted(m.combine(frozenset([1]), frozenset([2])))
	[1, 2]
	'''
	return FuncMonoid(name, empty, combine)

def applicative(pure:Callable[[Any],Any],
		map2:Callable[[Callable[[Any,Any],Any],Any,Any],Any],
		name:str='applicative') -> FuncApplicative:
	r'''
	Create an :class:`Applicative` from ``pure`` and ``map2``

	>>> a = applicative(lambda x: [x],
	...     lambda f, xs, ys: [f(x, y) for x in xs for y in ys], 'list_applicative')
	>>> a.map2(operator.add, [1, 2], [10, 20])
	[11, 21, 12, 22]
	'''
	return FuncApplicative(name, pure, map2)

sum_monoid: FuncMonoid[Any] = monoid(0, operator.add, 'sum_monoid')
product_monoid: FuncMonoid[Any] = monoid(1, operator.mul, 'product_monoid')
str_monoid: FuncMonoid[str] = monoid('', operator.add, 'str_monoid')
tuple_monoid: FuncMonoid[Tuple[Any, ...]] = \
	monoid((), operator.add, 'tuple_monoid')

def _identity_map2(func, fa, fb):
	return func(fa, fb)

def _optional_map2(func, fa, fb):
	if fa is None or fb is None: return None
	return func(fa, fb)

def _tuple_map2(func, fa, fb):
	return tuple(func(a, b) for a, b in itertools.product(fa, fb))

identity_applicative: FuncApplicative = applicative(
	lambda value: value, _identity_map2, 'identity_applicative')

# None is failure, any other value is success
optional_applicative: FuncApplicative = applicative(
	lambda value: value, _optional_map2, 'optional_applicative')

# tuples of alternatives, combined as a cartesian product
tuple_applicative: FuncApplicative = applicative(
	lambda value: (value,), _tuple_map2, 'tuple_applicative')

__all__: Tuple[str, ...] = ('Monoid', 'Applicative', 'monoid', 'applicative',
	'sum_monoid', 'product_monoid', 'str_monoid', 'tuple_monoid',
	'identity_applicative', 'optional_applicative', 'tuple_applicative')
if sphinx_build: __all__ += ('FuncMonoid', 'FuncApplicative')

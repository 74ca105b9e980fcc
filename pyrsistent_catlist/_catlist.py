from __future__ import annotations
from typing import Collection, Iterable, Iterator, Hashable, ClassVar, \
	TypeVar, Generic, Optional, Callable, Tuple, List, Any, Union, cast

import functools

from pyrsistent import pdeque, PDeque

from ._algebra import Monoid, Applicative, FuncMonoid, monoid
from ._utility import compare_iter, identity, sphinx_build

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')

_EMPTY_QUEUE: PDeque[Any] = pdeque()

def _link(left:PCatList[T], right:PCatList[T]) -> PCatList[T]:
	# the right operand is queued as the newest pending sublist of the left,
	# its own structure is never inspected
	if left._size == 0: return right
	return PCatList(left._size + right._size, left._head,
		left._queue.append(right))

def _collapse(queue:PDeque[PCatList[T]]) -> PCatList[T]:
	# link(q[0], link(q[1], ... link(q[n-2], q[n-1])))
	# folded with a list as the stack, so queue length never limits depth
	stack: List[PCatList[T]] = []
	while queue:
		stack.append(queue.left)
		queue = queue.popleft()
	acc = stack.pop()
	while stack:
		acc = _link(stack.pop(), acc)
	return acc

def _prepend(value:T, seq:PCatList[T]) -> PCatList[T]:
	return seq.appendleft(value)

class PCatList(Generic[T], Collection[T], Hashable):
	r'''
	Persistent catenable list

	Meant for cases where sequences are built up by concatenation
	and consumed from the front, such as output buffers, work lists,
	or the results of :meth:`bind`.

	Do not instantiate directly, instead use the factory
	functions :func:`cl` or :func:`pcatlist` to create an instance.

	The :class:`PCatList` implements the :class:`python:typing.Collection`
	protocol and is :class:`python:typing.Hashable`.
	There is no random access: elements are reached
	by decomposing the list from the left.

	The following operations are amortized :math:`O(1)`:

		- adding an item at either end
		- concatenating two lists
		- removing the leftmost item

	The implementation is the catenable list of Okasaki's
	"Purely Functional Data Structures" (1998), section 10.2.1.
	A non-empty list is its first element together with a queue of
	non-empty sublists holding the remaining elements in order.
	Concatenation enqueues the right list onto the left one,
	and the queue is only relinked into a single list
	when the first element is removed.

	The following are examples of some common operations on catenable lists:

	>>> seq1 = pcatlist([1, 2, 3])
	>>> seq1
	pcatlist([1, 2, 3])
	>>> seq2 = seq1.append(4)
	>>> seq2
	pcatlist([1, 2, 3, 4])
	>>> seq3 = seq1 + seq2
	>>> seq3
	pcatlist([1, 2, 3, 1, 2, 3, 4])
	>>> seq1
	pcatlist([1, 2, 3])
	>>> head, rest = seq3.uncons()
	>>> head
	1
	>>> rest
	pcatlist([2, 3, 1, 2, 3, 4])
	>>> seq1.bind(lambda x: [x, x * 10])
	pcatlist([1, 10, 2, 20, 3, 30])
	'''

	__slots__ = ('_size', '_head', '_queue')

	if not sphinx_build:
		_size: int
		_head: T
		_queue: PDeque[PCatList[T]]

	_empty: ClassVar[PCatList[Any]] = cast(Any, None)

	def __new__(cls, _size, _head, _queue):
		self = super().__new__(cls)
		self._size = _size
		self._head = _head
		self._queue = _queue
		return self

	@staticmethod
	def _singleton(value:T) -> PCatList[T]:
		return PCatList(1, value, _EMPTY_QUEUE)

	def _rest(self) -> PCatList[T]:
		# every decomposition and traversal goes through here
		if not self._queue: return PCatList._empty
		return _collapse(self._queue)

	def _walk(self) -> Iterator[T]:
		seq = self
		while seq._size != 0:
			yield seq._head
			seq = seq._rest()

	def extendright(self, other:PCatLike[T]) -> PCatList[T]:
		r'''
		Concatenate two lists

		:math:`O(1)` extend with :class:`PCatList`

		:math:`O(k)` extend with iterable

		The empty list is an identity on both sides,
		and is never queued.

		>>> pcatlist([1,2]).extend([3,4])
		pcatlist([1, 2, 3, 4])
		>>> pcatlist([1,2]).extendright([3,4])
		pcatlist([1, 2, 3, 4])
		>>> pcatlist([1,2]) + pcatlist([3,4])
		pcatlist([1, 2, 3, 4])
		>>> pcatlist([1,2]) | pcatlist([3,4])
		pcatlist([1, 2, 3, 4])
		'''
		other = PCatList._fromitems(other)
		if other._size == 0: return self
		if self._size == 0: return other
		return _link(self, other)

	extend = extendright
	__add__ = extendright
	__or__ = extendright

	def extendleft(self, other:PCatLike[T]) -> PCatList[T]:
		r'''
		Concatenate two lists, with the other list on the left

		:math:`O(1)` extend with :class:`PCatList`

		:math:`O(k)` extend with iterable

		>>> pcatlist([1,2]).extendleft([3,4])
		pcatlist([3, 4, 1, 2])
		>>> [3,4] + pcatlist([1,2])
		pcatlist([3, 4, 1, 2])
		'''
		return PCatList._fromitems(other).extendright(self)

	__radd__ = extendleft
	__ror__ = extendleft

	def appendleft(self, value:T) -> PCatList[T]:
		r'''
		Add an element to the left end

		:math:`O(1)`

		>>> pcatlist([1,2,3]).appendleft(0)
		pcatlist([0, 1, 2, 3])
		'''
		return PCatList._singleton(value).extendright(self)

	def appendright(self, value:T) -> PCatList[T]:
		r'''
		Add an element to the right end

		:math:`O(1)`

		>>> pcatlist([1,2,3]).append(4)
		pcatlist([1, 2, 3, 4])
		>>> pcatlist([1,2,3]).appendright(4)
		pcatlist([1, 2, 3, 4])
		'''
		return self.extendright(PCatList._singleton(value))

	append = appendright

	def uncons(self) -> Optional[Tuple[T, PCatList[T]]]:
		r'''
		Split off the leftmost element

		amortized :math:`O(1)`, worst case :math:`O(k)`
		where :math:`k` is the number of queued sublists

		Returns ``None`` for an empty list.

		>>> pcatlist([1,2,3,4]).uncons()
		(1, pcatlist([2, 3, 4]))
		>>> pcatlist().uncons() is None
		True
		'''
		if self._size == 0: return None
		return self._head, self._rest()

	def viewleft(self) -> Tuple[T, PCatList[T]]:
		r'''
		Analyse the left end

		amortized :math:`O(1)`

		:raises IndexError: if the list is empty

		>>> pcatlist([1,2,3,4]).viewleft()
		(1, pcatlist([2, 3, 4]))
		>>> pcatlist().viewleft()
		Traceback (most recent call last):
		...
		IndexError: ...
		'''
		if self._size == 0:
			raise IndexError('peek from empty sequence')
		return self._head, self._rest()

	@property
	def left(self) -> T:
		r'''
		Extract the first element

		:math:`O(1)`

		:raises IndexError: if the list is empty

		>>> pcatlist([1,2,3,4]).left
		1
		>>> pcatlist().left
		Traceback (most recent call last):
		...
		IndexError: ...
		'''
		if self._size == 0:
			raise IndexError('peek from empty sequence')
		return self._head

	def map(self, func:Callable[[T],U]) -> PCatList[U]:
		r'''
		Apply a function to every element

		:math:`O(n)`

		>>> pcatlist([1,2,3]).map(lambda x: x * 2)
		pcatlist([2, 4, 6])
		'''
		acc: PCatList[U] = PCatList._empty
		for item in self._walk():
			acc = acc.appendright(func(item))
		return acc

	def foldl(self, func:Callable[[A,T],A], initial:A) -> A:
		r'''
		Fold from the left

		:math:`O(n)`

		>>> pcatlist([1,2,3]).foldl(lambda acc, x: acc * 10 + x, 0)
		123
		'''
		acc = initial
		for item in self._walk():
			acc = func(acc, item)
		return acc

	def foldr(self, func:Callable[[T,A],A], initial:A) -> A:
		r'''
		Fold from the right

		:math:`O(n)`

		>>> pcatlist([1,2,3]).foldr(lambda x, acc: acc * 10 + x, 0)
		321
		'''
		acc = initial
		for item in reversed(list(self._walk())):
			acc = func(item, acc)
		return acc

	def foldmap(self, func:Callable[[T],A], monoid:Monoid[A]) -> A:
		r'''
		Map every element into a monoid and combine the results

		:math:`O(n)`

		The results are combined from the right,
		``combine(f(x0), combine(f(x1), ... empty))``,
		with ``func`` called on the elements from left to right.

		>>> from pyrsistent_catlist import sum_monoid, str_monoid
		>>> pcatlist([1,2,3]).foldmap(lambda x: x * x, sum_monoid)
		14
		>>> pcatlist([1,2,3]).foldmap(str, str_monoid)
		'123'
		'''
		values = [func(item) for item in self._walk()]
		return functools.reduce(lambda acc, value: monoid.combine(value, acc),
			reversed(values), monoid.empty)

	def traverse(self, func:Callable[[T],Any], applicative:Applicative) -> Any:
		r'''
		Map every element to an effect and collect the results

		:math:`O(n)`

		The result is the list of results inside the
		applicative context, with the effects sequenced left to right.

		>>> from pyrsistent_catlist import optional_applicative
		>>> half = lambda x: x // 2 if x % 2 == 0 else None
		>>> pcatlist([2,4,6]).traverse(half, optional_applicative)
		pcatlist([1, 2, 3])
		>>> pcatlist([2,3,6]).traverse(half, optional_applicative) is None
		True
		'''
		effects = [func(item) for item in self._walk()]
		acc = applicative.pure(PCatList._empty)
		for effect in reversed(effects):
			acc = applicative.map2(_prepend, effect, acc)
		return acc

	def sequence(self, applicative:Applicative) -> Any:
		r'''
		Collect a list of effects into an effect producing a list

		:math:`O(n)`

		>>> from pyrsistent_catlist import tuple_applicative
		>>> pcatlist([(1,2), (3,4)]).sequence(tuple_applicative)
		(pcatlist([1, 3]), pcatlist([1, 4]), pcatlist([2, 3]), pcatlist([2, 4]))
		'''
		return self.traverse(identity, applicative)

	def bind(self, func:Callable[[T],PCatLike[U]]) -> PCatList[U]:
		r'''
		Map every element to a list and concatenate the results

		:math:`O(n+m)` where :math:`m` is the total size of the results

		``func`` may return any iterable.

		>>> pcatlist([1,2]).bind(lambda x: pcatlist([x, x * 10]))
		pcatlist([1, 10, 2, 20])
		>>> pcatlist([1,2,3]).bind(lambda x: [x] * x)
		pcatlist([1, 2, 2, 3, 3, 3])
		'''
		return self.foldmap(lambda item: PCatList._fromitems(func(item)),
			catlist_monoid)

	def __len__(self) -> int:
		r'''
		Get the length of the list

		:math:`O(1)`

		>>> len(pcatlist([1,2,3,4]))
		4
		'''
		return self._size

	def __bool__(self) -> bool:
		return self._size != 0

	def __contains__(self, value) -> bool:
		r'''
		Check if the value is in the list

		:math:`O(n)`

		>>> 2 in pcatlist([1,2,3])
		True
		>>> 4 in pcatlist([1,2,3])
		False
		'''
		return any(value == item for item in self._walk())

	def __iter__(self) -> Iterator[T]:
		r'''
		Create an iterator

		:math:`O(1)`

		Iterating the entire list is :math:`O(n)`.

		>>> i = iter(pcatlist([1,2,3]))
		>>> next(i)
		1
		>>> next(i)
		2
		>>> next(i)
		3
		>>> next(i)
		Traceback (most recent call last):
		...
		StopIteration
		'''
		return self._walk()

	def tolist(self) -> List[T]:
		r'''
		Convert the list to a :class:`python:list`

		:math:`O(n)`

		>>> pcatlist([1,2,3,4]).tolist()
		[1, 2, 3, 4]
		'''
		return list(self._walk())

	def totuple(self) -> Tuple[T, ...]:
		r'''
		Convert the list to a :class:`python:tuple`

		:math:`O(n)`

		>>> pcatlist([1,2,3,4]).totuple()
		(1, 2, 3, 4)
		'''
		return tuple(self._walk())

	def __repr__(self) -> str:
		r'''
		Get a formatted string representation

		:math:`O(n)`

		>>> repr(pcatlist([1,2,3]))
		'pcatlist([1, 2, 3])'
		'''
		return 'pcatlist({})'.format(self.tolist())

	__str__ = __repr__

	def __hash__(self) -> int:
		r'''
		Calculate the hash of the list

		:math:`O(n)`

		>>> x1 = pcatlist([1,2,3,4])
		>>> x2 = cl(1,2) + cl(3,4)
		>>> hash(x1) == hash(x2)
		True
		'''
		return hash(self.totuple())

	def __reduce__(self):
		r'''
		Support method for :mod:`python:pickle`

		:math:`O(n)`

		>>> import pickle
		>>> pickle.loads(pickle.dumps(pcatlist([1,2,3,4])))
		pcatlist([1, 2, 3, 4])
		'''
		return pcatlist, (self.tolist(),)

	def __eq__(self, other) -> bool:
		r'''
		Return self == other

		:math:`O(n)`

		>>> pcatlist([1,2,3]) == pcatlist([1,2,3])
		True
		>>> pcatlist([1,2,3]) == [1,2,3]
		True
		>>> pcatlist([1,2,3]) == pcatlist([2,3,4])
		False
		'''
		result = compare_iter(self, other, True)
		if result is NotImplemented: return NotImplemented
		return result == 0

	def __ne__(self, other) -> bool:
		result = compare_iter(self, other, True)
		if result is NotImplemented: return NotImplemented
		return result != 0

	def __gt__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result > 0

	def __ge__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result >= 0

	def __lt__(self, other) -> bool:
		r'''
		Return self < other

		:math:`O(n)`

		>>> pcatlist([1,2,3]) < pcatlist([1,2,4])
		True
		>>> pcatlist([1,2,3]) < pcatlist([1,2])
		False
		'''
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result < 0

	def __le__(self, other) -> bool:
		result = compare_iter(self, other, False)
		if result is NotImplemented: return NotImplemented
		return result <= 0

	@staticmethod
	def _fromitems(items:Optional[PCatLike[T]]=None) -> PCatList[T]:
		if items is None: return PCatList._empty
		if isinstance(items, PCatList): return items
		return functools.reduce(catlist_monoid.combine,
			map(PCatList._singleton, items), catlist_monoid.empty)

PCatList._empty = PCatList(0, None, _EMPTY_QUEUE) # type: ignore

PCatLike = Union[PCatList[T], Iterable[T]]

catlist_monoid: FuncMonoid[PCatList[Any]] = monoid(
	PCatList._empty, PCatList.extendright, 'catlist_monoid')

def pcatlist(items:Optional[PCatLike[T]]=None) -> PCatList[T]:
	r'''
	Create a :class:`PCatList` from the given items

	:math:`O(n)`

	>>> pcatlist()
	pcatlist([])
	>>> pcatlist([1,2,3,4])
	pcatlist([1, 2, 3, 4])
	'''
	return PCatList._fromitems(items)

def pcatlist_singleton(value:T) -> PCatList[T]:
	r'''
	Create a :class:`PCatList` holding a single element

	:math:`O(1)`

	>>> pcatlist.singleton(1)
	pcatlist([1])
	'''
	return PCatList._singleton(value)
setattr(pcatlist, 'singleton', pcatlist_singleton)

def pcatlist_unfoldr(func:Callable[[A],Optional[Tuple[T,A]]], seed:A) -> PCatList[T]:
	r'''
	Create a :class:`PCatList` by repeatedly applying a function to a seed

	:math:`O(n)`

	``func`` returns ``None`` to stop,
	or a pair of the next element and the next seed.

	>>> pcatlist.unfoldr(lambda n: (n, n - 1) if n > 0 else None, 5)
	pcatlist([5, 4, 3, 2, 1])
	'''
	acc: PCatList[T] = PCatList._empty
	step = func(seed)
	while step is not None:
		value, seed = step
		acc = acc.appendright(value)
		step = func(seed)
	return acc
setattr(pcatlist, 'unfoldr', pcatlist_unfoldr)

def cl(*items:T) -> PCatList[T]:
	'''
	Shorthand for :func:`pcatlist`

	Mnemonic: CatList

	>>> cl(1,2,3,4)
	pcatlist([1, 2, 3, 4])
	'''
	return pcatlist(items)

__all__: Tuple[str, ...] = ('cl', 'pcatlist', 'PCatList', 'catlist_monoid')

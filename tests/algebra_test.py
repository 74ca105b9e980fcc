from pyrsistent_catlist import cl, pcatlist, catlist_monoid, \
	monoid, applicative, sum_monoid, product_monoid, str_monoid, tuple_monoid, \
	identity_applicative, optional_applicative, tuple_applicative
import pyrsistent_catlist._catlist

from hypothesis import given, strategies as st

import pytest

def pcatlists(items=st.integers(), **kwargs):
	# mixes flat lists with lists that have nested queues
	def build(chunks, rotate):
		seq = pcatlist()
		for chunk in chunks:
			seq = seq + pcatlist(chunk)
		items = [x for chunk in chunks for x in chunk]
		for _ in range(min(rotate, len(items))):
			head, seq = seq.uncons()
			seq = seq.append(head)
			items = items[1:] + items[:1]
		return seq, items
	return st.builds(build, st.lists(st.lists(items, max_size=5), **kwargs),
		st.integers(0, 3))

functions = st.sampled_from([
	lambda x: x + 1,
	lambda x: x * 2,
	lambda x: -x,
	lambda x: x % 3,
])

binders = st.sampled_from([
	lambda x: cl(x),
	lambda x: cl(x, x * 10),
	lambda x: pcatlist(range(x % 3)),
	lambda x: pcatlist(),
	lambda x: cl(x) + cl(x + 1) + cl(x + 2),
])

@given(pcatlists())
def test_monoid_identity(seqitems):
	seq, items = seqitems
	empty = catlist_monoid.empty
	assert catlist_monoid.combine(empty, seq) == items
	assert catlist_monoid.combine(seq, empty) == items

@given(pcatlists(), pcatlists(), pcatlists())
def test_monoid_associative(seqitems1, seqitems2, seqitems3):
	(seq1, items1), (seq2, items2), (seq3, items3) = seqitems1, seqitems2, seqitems3
	combine = catlist_monoid.combine
	left = combine(combine(seq1, seq2), seq3)
	right = combine(seq1, combine(seq2, seq3))
	assert left == right == items1 + items2 + items3

@given(pcatlists())
def test_functor_identity(seqitems):
	seq, items = seqitems
	assert seq.map(lambda x: x) == items

@given(pcatlists(), functions, functions)
def test_functor_composition(seqitems, f, g):
	seq, items = seqitems
	assert seq.map(lambda x: f(g(x))) == seq.map(g).map(f) \
		== [f(g(x)) for x in items]

@given(pcatlists())
def test_foldable(seqitems):
	seq, items = seqitems
	assert seq.foldmap(pcatlist.singleton, catlist_monoid) == items
	assert pcatlist(items).foldmap(pcatlist.singleton, catlist_monoid) == items
	assert seq.foldmap(lambda x: x, sum_monoid) == sum(items)
	assert seq.foldmap(lambda x: (x,), tuple_monoid) == tuple(items)
	assert seq.foldmap(str, str_monoid) == ''.join(map(str, items))
	assert seq.foldl(lambda acc, x: acc + [x], []) == items
	assert seq.foldr(lambda x, acc: [x] + acc, []) == items

@given(pcatlists(items=st.integers(1, 5)))
def test_foldable_product(seqitems):
	seq, items = seqitems
	product = 1
	for x in items: product *= x
	assert seq.foldmap(lambda x: x, product_monoid) == product

def test_foldmap_right_associated():
	# a non-commutative, non-associative operation exposes the bracketing
	m = monoid('e', lambda x, y: '({}{})'.format(x, y))
	assert cl('a', 'b', 'c').foldmap(lambda x: x, m) == '(a(b(ce)))'

def test_foldmap_order_of_calls():
	seen = []
	def record(x):
		seen.append(x)
		return x
	seq = cl(1, 2) + cl(3) + cl(4, 5)
	seq.foldmap(record, sum_monoid)
	assert seen == [1, 2, 3, 4, 5]
	del seen[:]
	seq.traverse(record, identity_applicative)
	assert seen == [1, 2, 3, 4, 5]
	del seen[:]
	seq.map(record)
	assert seen == [1, 2, 3, 4, 5]

@given(pcatlists(), functions)
def test_traversable_identity(seqitems, f):
	seq, items = seqitems
	assert seq.traverse(f, identity_applicative) == seq.map(f)
	assert seq.sequence(identity_applicative) == items

@given(pcatlists())
def test_traversable_pure(seqitems):
	seq, items = seqitems
	assert seq.map(tuple_applicative.pure).sequence(tuple_applicative) \
		== (pcatlist(items),)
	assert seq.map(optional_applicative.pure).sequence(optional_applicative) \
		== items

@given(pcatlists(items=st.integers(0, 4)))
def test_traverse_optional(seqitems):
	seq, items = seqitems
	result = seq.traverse(lambda x: x if x != 0 else None, optional_applicative)
	if 0 in items:
		assert result is None
	else:
		assert result == items

@given(st.lists(st.tuples(st.integers(), st.integers()), max_size=5))
def test_sequence_tuple(items):
	seq = pcatlist(items[:2]) + pcatlist(items[2:])
	expected = [()]
	for pair in items:
		expected = [acc + (x,) for acc in expected for x in pair]
	result = seq.sequence(tuple_applicative)
	assert isinstance(result, tuple)
	assert [x.totuple() for x in result] == expected

@given(st.integers(), binders)
def test_monad_left_identity(value, f):
	assert pcatlist.singleton(value).bind(f) == f(value)

@given(pcatlists())
def test_monad_right_identity(seqitems):
	seq, items = seqitems
	assert seq.bind(pcatlist.singleton) == items

@given(pcatlists(), binders, binders)
def test_monad_associative(seqitems, f, g):
	seq, items = seqitems
	assert seq.bind(f).bind(g) == seq.bind(lambda x: f(x).bind(g))

@given(pcatlists(), binders)
def test_bind(seqitems, f):
	seq, items = seqitems
	assert seq.bind(f) == [y for x in items for y in f(x)]
	assert seq.bind(lambda x: list(f(x))) == seq.bind(f)

@given(pcatlists(), pcatlists())
def test_alternative(seqitems1, seqitems2):
	(seq1, items1), (seq2, items2) = seqitems1, seqitems2
	assert (seq1 | pcatlist()) is seq1
	assert (pcatlist() | seq1) is seq1
	assert (seq1 | seq2) == items1 + items2
	assert pcatlist().bind(lambda x: cl(x, x)) is pcatlist()

def test_bind_rejects_non_iterable():
	with pytest.raises(TypeError):
		cl(1, 2).bind(lambda x: x)

def test_callback_errors_propagate():
	def boom(x):
		raise ValueError(x)
	for call in [
		lambda seq: seq.map(boom),
		lambda seq: seq.foldmap(boom, sum_monoid),
		lambda seq: seq.traverse(boom, identity_applicative),
		lambda seq: seq.bind(boom),
	]:
		with pytest.raises(ValueError):
			call(cl(1, 2))

def test_instances_repr():
	assert repr(sum_monoid) == 'sum_monoid'
	assert repr(tuple_applicative) == 'tuple_applicative'
	assert repr(catlist_monoid) == 'catlist_monoid'
	assert repr(applicative(lambda x: x, lambda f, a, b: f(a, b))) == 'applicative'

@pytest.mark.parametrize('operation', [
	lambda seq: seq.uncons()[1].tolist(),
	lambda seq: list(seq),
	lambda seq: seq.map(lambda x: x).tolist(),
	lambda seq: seq.foldmap(lambda x: (x,), tuple_monoid),
	lambda seq: seq.traverse(lambda x: x, identity_applicative).tolist(),
	lambda seq: seq.sequence(identity_applicative).tolist(),
	lambda seq: seq.bind(pcatlist.singleton).tolist(),
	lambda seq: seq.foldl(lambda acc, x: acc + [x], []),
	lambda seq: seq.foldr(lambda x, acc: [x] + acc, []),
])
def test_shared_collapse(monkeypatch, operation):
	# every decomposition and traversal relinks through the same helper
	calls = []
	original = pyrsistent_catlist._catlist._collapse
	def collapse(queue):
		calls.append(len(queue))
		return original(queue)
	monkeypatch.setattr(pyrsistent_catlist._catlist, '_collapse', collapse)
	seq = cl(0) + cl(1, 2) + cl(3) + cl(4, 5, 6)
	result = operation(seq)
	assert calls
	assert calls[0] == 3
	assert list(result)[-3:] == [4, 5, 6]
	assert list(result)[:2] in ([0, 1], [1, 2])

def test_traversals_agree():
	seq = (cl(1) + cl(2, 3)).append(4).appendleft(0) + (cl(5) + cl(6))
	_, seq = seq.uncons()
	expected = [1, 2, 3, 4, 5, 6]
	assert list(seq) == expected
	assert seq.map(lambda x: x).tolist() == expected
	assert list(seq.foldmap(lambda x: (x,), tuple_monoid)) == expected
	assert seq.traverse(lambda x: x, identity_applicative).tolist() == expected
	assert seq.sequence(identity_applicative).tolist() == expected
	assert seq.bind(pcatlist.singleton).tolist() == expected

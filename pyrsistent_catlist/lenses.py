from __future__ import annotations

from typing import Iterator, TypeVar

from ._catlist import PCatList, pcatlist

from lenses import hooks

T = TypeVar('T')

@hooks.contains_add.register(PCatList)
def _pcatlist_contains_add(self:PCatList[T], item:T) -> PCatList[T]:
	return self.append(item)
@hooks.contains_remove.register(PCatList)
def _pcatlist_contains_remove(self:PCatList[T], item:T) -> PCatList[T]:
	return pcatlist(i for i in self if item != i)
@hooks.to_iter.register(PCatList)
def _pcatlist_to_iter(self:PCatList[T]) -> Iterator[T]:
	return iter(self)
@hooks.from_iter.register(PCatList)
def _pcatlist_from_iter(self:PCatList[T], items:Iterator[T]) -> PCatList[T]:
	return pcatlist(items)

"""
Sets of positions to print, expressed as sorted, disjoint half-open ranges.

A `Positions` object is read-only once built. However you describe the ranges going in,
they come out of `all()` sorted by start, with overlapping and touching ranges fused,
so the printer never sees the same position twice or goes backwards. Empty ranges
vanish. An inverted range (end before start) or a negative bound is a `RangeError`
at construction time; nothing is deferred to printing time.

The `end()` of a set is its extent: one past the highest position it covers.
"""

import bisect
from typing import Iterable, Iterator

from .interfaces import Position, PositionRange, RangeError

def _check(start, end) -> PositionRange:
	if start < 0 or end < start: raise RangeError(start, end)
	return PositionRange(start, end)

def _normalize(ranges: Iterable[PositionRange]) -> list[PositionRange]:
	merged = []
	for r in sorted(r for r in ranges if r.end > r.start):
		if merged and r.start <= merged[-1].end:
			if r.end > merged[-1].end: merged[-1] = merged[-1]._replace(end=r.end)
		else: merged.append(r)
	return merged


class Positions:
	""" An immutable, ordered collection of disjoint position ranges. """
	
	def __init__(self, pairs: Iterable[tuple[Position, Position]] = ()):
		self.__ranges = tuple(_normalize(_check(start, end) for start, end in pairs))
		self.__starts = [r.start for r in self.__ranges]
	
	def all(self) -> Iterator[PositionRange]:
		""" Yield each range in ascending order. Each call starts afresh. """
		yield from self.__ranges
	
	def end(self) -> Position:
		""" The extent: maximum end of any range, or zero if there are none. """
		return self.__ranges[-1].end if self.__ranges else 0
	
	def __len__(self):
		return sum(r.end - r.start for r in self.__ranges)
	
	def __bool__(self):
		return bool(self.__ranges)
	
	def __contains__(self, position):
		i = bisect.bisect_right(self.__starts, position) - 1
		return i >= 0 and position < self.__ranges[i].end
	
	def __eq__(self, other):
		if not isinstance(other, Positions): return NotImplemented
		return list(self.all()) == list(other.all())
	
	def __hash__(self):
		return hash(self.__ranges)
	
	def __repr__(self):
		return "Positions(%r)"%[tuple(r) for r in self.__ranges]


class PositionsBuilder:
	"""
	Accumulate positions and ranges in any order, then `build()` a `Positions`.
	The adding methods return the builder, so calls may be chained.
	"""
	
	def __init__(self):
		self.__ranges = []
	
	def add(self, position: Position) -> "PositionsBuilder":
		return self.add_range(position, position + 1)
	
	def add_range(self, start: Position, end: Position) -> "PositionsBuilder":
		self.__ranges.append(_check(start, end))
		return self
	
	def build(self) -> Positions:
		return Positions(self.__ranges)


def up_to(end: Position) -> Positions:
	""" Positions 0 up to but not including `end`. """
	return Positions([(0, end)])

def between(start: Position, end: Position) -> Positions:
	""" Positions `start` up to but not including `end`. """
	return Positions([(start, end)])

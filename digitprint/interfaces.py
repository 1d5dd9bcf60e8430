"""
This file aggregates the abstract capabilities and exception types which digitprint deals in.

A digit source is anything that can answer one of two questions about a sequence of
decimal digits, each digit tied to a zero-based position:

	Printable: "Which digits do you know between these two positions?"
	Writable: "Tell me every digit you know, front to back (or back to front)."

These are separate capabilities, not rungs of a class hierarchy. A source may offer
either one or both; the entry points in `numprint` pick a driving strategy by which
entry point you call, never by inspecting the source. Positions a source does not
mention are simply unknown, and get printed with a placeholder glyph.

Both capabilities also recognize duck-typed sources: anything with the right
methods counts as an instance, whether or not it inherits from these classes.
"""

from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple

Position = int
Digit = int

class DigitPrintError(ValueError):
	""" Base class of all exceptions arising from misuse of the digitprint machinery. """

class RangeError(DigitPrintError):
	"""
	Raised when a range of positions is malformed.
	Parameters are the offending start and end.
	"""
	def __init__(self, start, end):
		super().__init__(start, end)
		self.start, self.end = start, end
	
	def __str__(self): return "malformed range [%r, %r)"%(self.start, self.end)

class PositionError(DigitPrintError):
	"""
	Raised when digits arrive out of order, or beyond the extent being printed.
	Parameters are the offending position and the position the printer expected next.
	"""
	def __init__(self, position, cursor):
		super().__init__(position, cursor)
		self.position, self.cursor = position, cursor
	
	def __str__(self): return "position %r is out of order or out of bounds; expected %r or later"%(self.position, self.cursor)

class DigitError(DigitPrintError):
	""" A digit was not in 0..9, or a placeholder glyph was not a single character. """

class ShortWrite(OSError):
	""" The sink accepted fewer characters than it was given, without raising. """


class PositionRange(NamedTuple):
	""" Half-open interval [start, end) of positions. """
	start: Position
	end: Position


def _has_methods(cls, *names):
	return all(any(name in B.__dict__ and B.__dict__[name] is not None for B in cls.__mro__) for name in names)


class Printable(ABC):
	"""
	Random-access capability: a sequence of digits that can be asked about an
	arbitrary range of positions. Printed with `fprint`, `sprint` or `print_digits`.
	"""
	
	@abstractmethod
	def all_in_range(self, start: Position, end: Position) -> Iterator[tuple[Position, Digit]]:
		"""
		Yield (position, digit) for each known digit from position `start`
		up to but not including position `end`, in ascending order.
		"""
	
	@classmethod
	def __subclasshook__(cls, C):
		if cls is Printable: return _has_methods(C, 'all_in_range') or NotImplemented
		return NotImplemented


class Writable(ABC):
	"""
	Full-traversal capability: a finite sequence of digits that can be walked from
	either end. Written with `fwrite`, `swrite` or `write_digits`.
	"""
	
	@abstractmethod
	def all(self) -> Iterator[tuple[Position, Digit]]:
		""" Yield (position, digit) for each known digit, beginning to end. """
	
	@abstractmethod
	def backward(self) -> Iterator[tuple[Position, Digit]]:
		"""
		Yield (position, digit) for each known digit, end to beginning.
		Only the first pair is ever consulted: it tells how far the sequence goes.
		"""
	
	@classmethod
	def __subclasshook__(cls, C):
		if cls is Writable: return _has_methods(C, 'all', 'backward') or NotImplemented
		return NotImplemented

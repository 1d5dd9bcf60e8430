"""
A plain, finite digit source with both capabilities.

`Digits` is handy for digits that already sit in memory: a text file of pi, a list
computed elsewhere, or a handful of known positions with holes between them.
"""

import bisect
from typing import Iterable, Iterator, Mapping, Optional

from .interfaces import Printable, Writable, Position, Digit, DigitError

class Digits(Printable, Writable):
	""" Known digits keyed by position. Positions not present are unknown. """
	
	def __init__(self, known:Mapping[Position, Digit]=None):
		known = dict(known or {})
		for posit, digit in known.items():
			if isinstance(posit, bool) or not isinstance(posit, int) or posit < 0:
				raise DigitError("position must be a non-negative integer, not %r"%(posit,))
			if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
				raise DigitError("digit at position %d must be in 0..9, not %r"%(posit, digit))
		self.__posits = sorted(known)
		self.__digits = [known[p] for p in self.__posits]
	
	@classmethod
	def from_sequence(cls, digits:Iterable[Optional[Digit]]) -> "Digits":
		""" Digits at positions 0, 1, 2 and so on. A None is a hole. """
		return cls({posit: digit for posit, digit in enumerate(digits) if digit is not None})
	
	@classmethod
	def from_text(cls, text:str, skip:str='') -> "Digits":
		"""
		One position per character. Characters 0-9 are digits; anything else is a hole.
		If `text` starts with `skip` (say, "3." for pi), that prefix is dropped first.
		"""
		if skip and text.startswith(skip): text = text[len(skip):]
		return cls({posit: ord(c) - 48 for posit, c in enumerate(text) if '0' <= c <= '9'})
	
	def __len__(self):
		return len(self.__posits)
	
	def all_in_range(self, start:Position, end:Position) -> Iterator[tuple[Position, Digit]]:
		lo = bisect.bisect_left(self.__posits, start)
		hi = bisect.bisect_left(self.__posits, end, lo=lo) if end > start else lo
		for i in range(lo, hi): yield self.__posits[i], self.__digits[i]
	
	def all(self) -> Iterator[tuple[Position, Digit]]:
		yield from zip(self.__posits, self.__digits)
	
	def backward(self) -> Iterator[tuple[Position, Digit]]:
		yield from zip(reversed(self.__posits), reversed(self.__digits))

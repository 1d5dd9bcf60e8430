"""
The layout engine.

A `Printer` turns a stream of (position, digit) pairs into rows and columns of text.
It works like a little state machine with a cursor: the next position it expects.
Pairs must arrive in ascending order of position; gaps are filled with the missing-digit
glyph, exactly as if the source had supplied that glyph for each skipped position.
Every position, real or synthesized, goes through the same rendering step:

	[line feed, if this starts a row other than the first]
	[margin, if this starts a row and the count is shown]
	[space, if this starts a column other than the first in its row]
	["0.", if this is position zero and the leading decimal is on]
	the digit or the glyph.

Because separators are written in front of the digit that needs them, no row ever
ends with a space, and the last row never ends with a line feed of its own.
`finish()` pads out to the extent with glyphs and adds the trailing line feed (if
configured); it is the one and only way to get that tail end written.

The sink is any text stream with a `write` method. The first `OSError` or
`ValueError` it raises (a closed file, say) stops the printer for good: `can_consume()`
goes false, nothing more is written, and the error is kept for the caller alongside
the count of characters the sink accepted.
"""

import sys

from .interfaces import Position, Digit, PositionError, DigitError, ShortWrite
from .options import Settings

VERBOSE = False

def margin_width(extent:int, digits_per_row:int) -> int:
	""" Width of the widest count that can appear in the margin. """
	if extent <= 0 or digits_per_row <= 0: return 1
	return len(str((extent - 1) // digits_per_row * digits_per_row))


class Printer:
	
	def __init__(self, sink, extent:int, settings:Settings):
		self.__sink = sink
		self.__extent = max(0, extent)
		self.__settings = settings
		self.__width = margin_width(self.__extent, settings.digits_per_row)
		self.__cursor = 0
		self.__written = 0
		self.__error = None
		self.__pending = []
		self.__pending_size = 0
		self.__synthesized = 0
		self.__finished = False
	
	@property
	def written(self) -> int:
		""" Characters the sink has accepted so far. """
		return self.__written
	
	@property
	def error(self):
		""" The first write error, or None. """
		return self.__error
	
	@property
	def cursor(self) -> Position:
		return self.__cursor
	
	@property
	def extent(self) -> Position:
		return self.__extent
	
	def can_consume(self) -> bool:
		""" False once a write has failed or the whole extent is printed. Stop feeding when false. """
		return self.__error is None and self.__cursor < self.__extent
	
	def consume(self, position:Position, digit:Digit):
		"""
		Print `digit` at `position`, first filling any gap since the last digit.
		Out-of-order or out-of-extent positions are caller errors and raise.
		After a write error this quietly does nothing.
		"""
		if position < self.__cursor or position >= self.__extent:
			raise PositionError(position, self.__cursor)
		if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
			raise DigitError("digit at position %d must be in 0..9, not %r"%(position, digit))
		self.__fill(position)
		if self.__error is None: self.__render(chr(48 + digit))
	
	def finish(self):
		"""
		Pad out to the extent with the missing-digit glyph, add the trailing line feed
		if so configured, and hand any buffered text to the sink. Safe to call twice;
		the second call does nothing.
		"""
		if self.__finished: return
		self.__finished = True
		self.__fill(self.__extent)
		if self.__error is None and self.__settings.trailing_lf: self.__emit('\n')
		self.__flush()
		if VERBOSE: print(
			"Printed %d of %d positions (%d missing); %d characters written; error: %r"%(
				self.__cursor, self.__extent, self.__synthesized, self.__written, self.__error
			), file=sys.stderr)
	
	def __fill(self, position):
		glyph = self.__settings.missing_digit
		while self.__error is None and self.__cursor < position:
			self.__synthesized += 1
			self.__render(glyph)
	
	def __render(self, glyph:str):
		settings = self.__settings
		posit, per_row = self.__cursor, settings.digits_per_row
		column = posit % per_row if per_row > 0 else posit
		if column == 0:
			if posit > 0 and not self.__emit('\n'): return
			if settings.show_count and not self.__emit(self.__margin(posit)): return
			if posit > 0 and settings.leading_decimal and not self.__emit('  '): return
		elif settings.digits_per_column > 0 and column % settings.digits_per_column == 0:
			if not self.__emit(' '): return
		if posit == 0 and settings.leading_decimal and not self.__emit('0.'): return
		if self.__emit(glyph): self.__cursor += 1
	
	def __margin(self, posit):
		return str(posit).rjust(self.__width) + '  '
	
	def __emit(self, text:str) -> bool:
		# Coalesce small pieces when a buffer size is configured; otherwise write straight through.
		self.__pending.append(text)
		self.__pending_size += len(text)
		if self.__pending_size >= self.__settings.buffer_size: self.__flush()
		return self.__error is None
	
	def __flush(self):
		if not self.__pending: return
		text = ''.join(self.__pending)
		self.__pending.clear()
		self.__pending_size = 0
		try: accepted = self.__sink.write(text)
		except (OSError, ValueError) as ex:
			self.__error = ex
			return
		if accepted is None: accepted = len(text)
		if accepted < len(text):
			self.__written += max(0, accepted)
			self.__error = ShortWrite("sink accepted %d of %d characters"%(accepted, len(text)))
		else: self.__written += len(text)

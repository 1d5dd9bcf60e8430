"""
Printing options.

Each option is a small function that sets exactly one field of a draft settings record.
The entry points seed a draft with their own defaults, apply the caller's options in the
order given (so the last word on any field wins) and freeze the result into `Settings`.
"""

from typing import Callable, NamedTuple

from .interfaces import DigitPrintError, DigitError

class Settings(NamedTuple):
	digits_per_row: int = 50
	digits_per_column: int = 5
	show_count: bool = True
	missing_digit: str = '.'
	trailing_lf: bool = False
	leading_decimal: bool = False
	buffer_size: int = 0

Option = Callable[[dict], None]

# Fprint-style: a window onto a (possibly endless) decimal fraction.
PRINT_DEFAULTS = Settings(leading_decimal=True)
# Fwrite-style: the whole of a finite sequence, as a complete text file.
WRITE_DEFAULTS = Settings(trailing_lf=True)

def _setter(field, value) -> Option:
	def mutate(draft:dict): draft[field] = value
	return mutate

def _count(name, count) -> int:
	if isinstance(count, bool) or not isinstance(count, int):
		raise DigitPrintError("%s needs an integer, not %r"%(name, count))
	return count

def digits_per_row(count:int) -> Option:
	""" Digits on each row. Zero or negative means everything goes on one row. """
	return _setter('digits_per_row', _count('digits_per_row', count))

def digits_per_column(count:int) -> Option:
	""" Digits in each space-separated column. Zero or negative means no columns. """
	return _setter('digits_per_column', _count('digits_per_column', count))

def show_count(on:bool) -> Option:
	""" Show the count of preceding digits in a left margin on each row. """
	return _setter('show_count', bool(on))

def missing_digit(glyph:str) -> Option:
	""" The character printed in place of an unknown digit. """
	if not isinstance(glyph, str) or len(glyph) != 1 or not (glyph.isascii() and glyph.isprintable()):
		raise DigitError("missing digit glyph must be one printable ASCII character, not %r"%(glyph,))
	return _setter('missing_digit', glyph)

def trailing_lf(on:bool) -> Option:
	""" End the output with a line feed. """
	return _setter('trailing_lf', bool(on))

def leading_decimal(on:bool) -> Option:
	""" Print "0." before the digit at position zero. """
	return _setter('leading_decimal', bool(on))

def _buffer_size(size:int) -> Option:
	# Sizing hint for the string-returning entry points; not part of the public surface.
	return _setter('buffer_size', _count('buffer_size', size))

def apply_options(defaults:Settings, options) -> Settings:
	draft = defaults._asdict()
	for option in options: option(draft)
	return Settings(**draft)

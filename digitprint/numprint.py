"""
Pretty-print sequences of decimal digits.

Two families of entry point, one per source capability:

	fprint / sprint / print_digits take a `Printable` source plus the `Positions` to show.
		Defaults: 50 digits per row, 5 per column, count in the margin, "." for
		missing digits, no trailing line feed, leading "0." shown.
	
	fwrite / swrite / write_digits take a `Writable` source and show all of it.
		Defaults: 50 digits per row, 5 per column, count in the margin, "." for
		missing digits, trailing line feed, no leading "0.".

Options from the `options` module adjust either family. The sink-based forms return a
`Report` of characters written and the first write error (or None). The string forms
cannot fail on write, so they return just the text.
"""

import io, sys
from typing import Iterable, NamedTuple, Optional

from .interfaces import Printable, Writable, Position, Digit
from .positions import Positions
from .options import Option, PRINT_DEFAULTS, WRITE_DEFAULTS, apply_options, _buffer_size
from .printer import Printer

class Report(NamedTuple):
	written: int
	error: Optional[Exception]


def fprint(sink, source:Printable, positions:Positions, *options:Option) -> Report:
	"""
	Print the digits of `source` at `positions` to `sink`. Positions not in `positions`
	but below its extent print as missing digits, as do any the source lacks.
	Unless you need the advanced functionality, prefer `fwrite`.
	"""
	printer = Printer(sink, positions.end(), apply_options(PRINT_DEFAULTS, options))
	for r in positions.all():
		if not drive(source.all_in_range(r.start, r.end), printer): break
	printer.finish()
	return Report(printer.written, printer.error)

def fwrite(sink, source:Writable, *options:Option) -> Report:
	""" Write every digit of `source` to `sink`. """
	printer = Printer(sink, extent_of(source), apply_options(WRITE_DEFAULTS, options))
	drive(source.all(), printer)
	printer.finish()
	return Report(printer.written, printer.error)

def sprint(source:Printable, positions:Positions, *options:Option) -> str:
	""" Like `fprint`, but returns the text. """
	buffer = io.StringIO()
	fprint(buffer, source, positions, *options, _buffer_size(io.DEFAULT_BUFFER_SIZE))
	return buffer.getvalue()

def swrite(source:Writable, *options:Option) -> str:
	""" Like `fwrite`, but returns the text. """
	buffer = io.StringIO()
	fwrite(buffer, source, *options, _buffer_size(io.DEFAULT_BUFFER_SIZE))
	return buffer.getvalue()

def print_digits(source:Printable, positions:Positions, *options:Option) -> Report:
	""" Like `fprint`, to standard output. """
	return fprint(sys.stdout, source, positions, *options)

def write_digits(source:Writable, *options:Option) -> Report:
	""" Like `fwrite`, to standard output. """
	return fwrite(sys.stdout, source, *options)


def extent_of(source:Writable) -> Position:
	""" One past the last position of `source`, judging by the first step backward. """
	for posit, _ in source.backward(): return posit + 1
	return 0

def drive(pairs:Iterable[tuple[Position, Digit]], printer:Printer) -> bool:
	"""
	Feed pairs to the printer until either runs out. Returns whether the printer
	would take more. Stops pulling from `pairs` the moment the printer is done.
	"""
	if not printer.can_consume(): return False
	for posit, digit in pairs:
		printer.consume(posit, digit)
		if not printer.can_consume(): return False
	return True

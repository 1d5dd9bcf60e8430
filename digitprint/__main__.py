"""
Lay out a text file of decimal digits in rows and columns with a running count.

Any character other than 0-9 counts as an unknown digit, except that line breaks
are ignored. Give one or more --range arguments to show only part of the file.
"""

import sys, argparse, warnings

from digitprint import numprint, options, printer
from digitprint.positions import PositionsBuilder
from digitprint.sources import Digits
from digitprint.interfaces import DigitPrintError

def parse_range(text):
	start, sep, end = text.partition(':')
	try:
		if not sep: return int(start), int(start) + 1
		return int(start or 0), int(end)
	except ValueError: raise argparse.ArgumentTypeError("expected START:END, not %r"%text) from None

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m digitprint', description=__doc__,)
	parser.add_argument('source_path', help='path to input file, or - for standard input')
	parser.add_argument('-o', '--output', help='path to output file (default: standard output)')
	parser.add_argument('--row', type=int, default=50, help='digits per row; zero for one long row')
	parser.add_argument('--column', type=int, default=5, help='digits per column; zero for no columns')
	parser.add_argument('--no-count', action='store_false', dest='count', help='leave out the running count in the margin')
	parser.add_argument('--missing', default='.', help='character to show for an unknown digit')
	parser.add_argument('--leading-decimal', action='store_true', help='print "0." before the first digit')
	parser.add_argument('--no-trailing-lf', action='store_false', dest='trailing_lf', help='do not end the output with a line feed')
	parser.add_argument('--skip', default='', help='prefix to drop from the input, such as "3." for pi')
	parser.add_argument('--range', action='append', type=parse_range, dest='ranges', metavar='START:END', help='show only these positions; may be repeated')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about what was printed.")
	return parser.parse_args(argv)

def read_source(path, skip):
	if path == '-': text = sys.stdin.read()
	else:
		with open(path) as fh: text = fh.read()
	text = text.replace('\r', '').replace('\n', '')
	source = Digits.from_text(text, skip)
	holes = len(text) - len(skip if text.startswith(skip) else '') - len(source)
	if holes: warnings.warn("%d characters of %s are not digits; they print as missing."%(holes, path))
	return source

def main(args) -> int:
	if args.verbose: printer.VERBOSE = True
	try:
		chosen = [
			options.digits_per_row(args.row),
			options.digits_per_column(args.column),
			options.show_count(args.count),
			options.missing_digit(args.missing),
			options.leading_decimal(args.leading_decimal),
			options.trailing_lf(args.trailing_lf),
		]
		source = read_source(args.source_path, args.skip)
		if args.ranges:
			builder = PositionsBuilder()
			for start, end in args.ranges: builder.add_range(start, end)
			positions = builder.build()
	except (DigitPrintError, OSError) as e:
		print(e, file=sys.stderr)
		return 1
	try: sink = sys.stdout if args.output is None else open(args.output, 'w')
	except OSError as e:
		print(e, file=sys.stderr)
		return 1
	try:
		if args.ranges: report = numprint.fprint(sink, source, positions, *chosen)
		else: report = numprint.fwrite(sink, source, *chosen)
	finally:
		if sink is not sys.stdout: sink.close()
	if report.error is not None:
		print("Write failed after %d characters: %s"%(report.written, report.error), file=sys.stderr)
		return 1
	return 0

if __name__ == '__main__': exit(main(parse_arguments()))

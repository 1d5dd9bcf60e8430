import unittest
from digitprint import options
from digitprint.interfaces import DigitPrintError, DigitError


class TestOptions(unittest.TestCase):
	def test_00_defaults(self):
		p = options.PRINT_DEFAULTS
		self.assertEqual((50, 5, True, '.', False, True), (p.digits_per_row, p.digits_per_column, p.show_count, p.missing_digit, p.trailing_lf, p.leading_decimal))
		w = options.WRITE_DEFAULTS
		self.assertEqual((50, 5, True, '.', True, False), (w.digits_per_row, w.digits_per_column, w.show_count, w.missing_digit, w.trailing_lf, w.leading_decimal))
	
	def test_01_no_options_keeps_defaults(self):
		self.assertEqual(options.PRINT_DEFAULTS, options.apply_options(options.PRINT_DEFAULTS, []))
	
	def test_02_each_option_touches_one_field(self):
		s = options.apply_options(options.WRITE_DEFAULTS, [options.digits_per_row(10)])
		self.assertEqual(options.WRITE_DEFAULTS._replace(digits_per_row=10), s)
		s = options.apply_options(options.WRITE_DEFAULTS, [options.missing_digit('?'), options.show_count(False)])
		self.assertEqual(options.WRITE_DEFAULTS._replace(missing_digit='?', show_count=False), s)
	
	def test_03_last_option_wins(self):
		s = options.apply_options(options.PRINT_DEFAULTS, [
			options.digits_per_column(3), options.leading_decimal(False), options.digits_per_column(7),
		])
		self.assertEqual(7, s.digits_per_column)
		self.assertFalse(s.leading_decimal)
	
	def test_04_defaults_are_not_disturbed(self):
		options.apply_options(options.PRINT_DEFAULTS, [options.trailing_lf(True)])
		self.assertFalse(options.PRINT_DEFAULTS.trailing_lf)
	
	def test_05_validation(self):
		for glyph in ['', '..', '\n', 7, '\u00b7']:
			with self.subTest(glyph=glyph): self.assertRaises(DigitError, options.missing_digit, glyph)
		self.assertRaises(DigitPrintError, options.digits_per_row, 2.5)
		self.assertRaises(DigitPrintError, options.digits_per_column, True)


if __name__ == '__main__':
	unittest.main()

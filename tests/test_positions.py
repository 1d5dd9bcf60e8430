import unittest
from digitprint.positions import Positions, PositionsBuilder, up_to, between
from digitprint.interfaces import PositionRange, RangeError


class TestPositions(unittest.TestCase):
	def test_00_empty(self):
		p = Positions()
		self.assertEqual([], list(p.all()))
		self.assertEqual(0, p.end())
		self.assertEqual(0, len(p))
		self.assertFalse(p)
	
	def test_01_extent_is_max_end(self):
		p = Positions([(3, 7), (10, 12)])
		self.assertEqual(12, p.end())
		self.assertEqual(6, len(p))
		self.assertEqual([PositionRange(3, 7), PositionRange(10, 12)], list(p.all()))
	
	def test_02_inverted_range_is_rejected(self):
		with self.assertRaises(RangeError) as cm: Positions([(0, 3), (5, 4)])
		self.assertEqual((5, 4), (cm.exception.start, cm.exception.end))
		self.assertRaises(RangeError, Positions, [(-1, 4)])
		self.assertRaises(ValueError, between, 9, 2)
	
	def test_03_sorted_and_merged(self):
		p = Positions([(20, 25), (0, 5), (3, 8), (8, 10), (15, 15)])
		self.assertEqual([(0, 10), (20, 25)], [tuple(r) for r in p.all()])
		self.assertEqual(25, p.end())
	
	def test_04_restartable(self):
		p = Positions([(0, 2), (4, 6)])
		self.assertEqual(list(p.all()), list(p.all()))
	
	def test_05_membership(self):
		p = Positions([(2, 4), (10, 11)])
		for posit in [2, 3, 10]:
			with self.subTest(posit=posit): self.assertIn(posit, p)
		for posit in [0, 1, 4, 9, 11, 99]:
			with self.subTest(posit=posit): self.assertNotIn(posit, p)
	
	def test_06_shorthands(self):
		self.assertEqual(Positions([(0, 50)]), up_to(50))
		self.assertEqual(Positions([(5, 9)]), between(5, 9))
		self.assertEqual(0, up_to(0).end())


class TestPositionsBuilder(unittest.TestCase):
	def test_00_chaining(self):
		p = PositionsBuilder().add_range(10, 20).add(5).add(6).add_range(18, 30).build()
		self.assertEqual([(5, 7), (10, 30)], [tuple(r) for r in p.all()])
	
	def test_01_rejects_bad_input_right_away(self):
		builder = PositionsBuilder()
		self.assertRaises(RangeError, builder.add_range, 4, 3)
		self.assertRaises(RangeError, builder.add, -1)
		self.assertEqual(0, builder.build().end())


if __name__ == '__main__':
	unittest.main()

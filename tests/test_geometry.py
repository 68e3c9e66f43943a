import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.core.geometry import (
    Direction, Point, Size, distance, squared_distance, result_of,
    direction_between, equal, in_bounds
)


class TestDistance(unittest.TestCase):
    def test_simple_distances(self):
        self.assertEqual(distance(Point(0, 0), Point(0, 0)), 0)
        self.assertEqual(distance(Point(1, 5), Point(1, 5)), 0)
        self.assertEqual(distance(Point(0, 0), Point(0, 1)), 1)
        self.assertEqual(distance(Point(0, 0), Point(1, 0)), 1)
        self.assertEqual(distance(Point(0, 0), Point(0, 5)), 5)
        self.assertEqual(distance(Point(0, 1), Point(0, 5)), 4)
        self.assertEqual(distance(Point(0, 5), Point(0, 1)), 4)

    def test_pythagorean_triples(self):
        self.assertEqual(distance(Point(0, 3), Point(4, 0)), 5)
        self.assertEqual(distance(Point(0, 5), Point(12, 0)), 13)
        self.assertEqual(distance(Point(0, 68), Point(285, 0)), 293)

    def test_upper_bounds(self):
        self.assertLessEqual(distance(Point(5, 1), Point(1, 5)), 7)
        self.assertLessEqual(distance(Point(10, 3), Point(4, 25)), 23)
        self.assertLessEqual(distance(Point(0, 20), Point(132, 0)), 134)
        self.assertLessEqual(distance(Point(1, 1), Point(18, 9)), 19)

    def test_extreme_distances(self):
        self.assertEqual(distance(Point(0, 0), Point(65536, 0)), 65536)
        self.assertLessEqual(distance(Point(0, 4096), Point(65536, 0)), 65664)
        self.assertLessEqual(distance(Point(0, 16777216), Point(4096, 0)), 16777217)

    def test_symmetric_and_admissible(self):
        points = [Point(x, y) for x in range(0, 12, 3) for y in range(0, 9, 2)]
        for a in points:
            for b in points:
                d = distance(a, b)
                self.assertEqual(d, distance(b, a))
                manhattan = abs(a.x - b.x) + abs(a.y - b.y)
                self.assertLessEqual(d, manhattan)

    def test_squared_distance(self):
        self.assertEqual(squared_distance(Point(0, 3), Point(4, 0)), 25)
        self.assertEqual(squared_distance(Point(2, 2), Point(2, 2)), 0)
        # Overestimates the 7 moves needed
        self.assertGreater(squared_distance(Point(0, 0), Point(4, 3)), 7)


class TestPoints(unittest.TestCase):
    def test_equal(self):
        self.assertTrue(equal(Point(0, 0), Point(0, 0)))
        self.assertTrue(equal(Point(1, 5), (1, 5)))
        self.assertFalse(equal(Point(1, 5), Point(0, 0)))
        self.assertFalse(equal(Point(0, 4096), Point(65536, 0)))

    def test_in_bounds(self):
        self.assertFalse(in_bounds(Size(0, 0), Point(0, 0)))
        self.assertFalse(in_bounds(Size(0, 0), Point(5, 4)))
        self.assertTrue(in_bounds(Size(1, 1), Point(0, 0)))
        self.assertTrue(in_bounds(Size(65536, 4096), Point(0, 0)))
        self.assertFalse(in_bounds(Size(1, 1), Point(1, 0)))
        self.assertTrue(in_bounds(Size(256, 256), Point(0, 255)))
        self.assertFalse(in_bounds(Size(256, 256), Point(0, 256)))
        self.assertTrue(in_bounds(Size(256, 256), Point(255, 255)))
        self.assertTrue(Size(4, 5).contains(Point(3, 4)))
        self.assertFalse(Size(4, 5).contains(Point(-1, 0)))

    def test_result_of(self):
        p = Point(1, 1)
        self.assertEqual(result_of(p, Direction.EAST), Point(2, 1))
        self.assertEqual(result_of(p, Direction.SOUTH), Point(1, 2))
        self.assertEqual(result_of(p, Direction.WEST), Point(0, 1))
        self.assertEqual(result_of(p, Direction.NORTH), Point(1, 0))

        with self.assertRaises(ValueError):
            result_of(p, Direction.NORTH | Direction.EAST)

    def test_direction_between(self):
        p = Point(1, 1)
        for direction in Direction.ORDER:
            self.assertEqual(direction_between(p, result_of(p, direction)), direction)

        with self.assertRaises(ValueError):
            direction_between(Point(1, 1), Point(2, 2))
        with self.assertRaises(ValueError):
            direction_between(Point(1, 1), Point(1, 1))


if __name__ == '__main__':
    unittest.main()

import math
import unittest

from finalmark.core.classify import Category, classify


class ClassifyTests(unittest.TestCase):
    def test_band_edges_are_inclusive_on_the_upper_bound(self):
        self.assertEqual(classify(0), Category.SECURED)
        self.assertEqual(classify(85), Category.ACHIEVABLE)
        self.assertEqual(classify(95), Category.DIFFICULT)
        self.assertEqual(classify(100), Category.UNLIKELY)

    def test_just_past_each_edge(self):
        self.assertEqual(classify(0.0001), Category.ACHIEVABLE)
        self.assertEqual(classify(85.0001), Category.DIFFICULT)
        self.assertEqual(classify(95.0001), Category.UNLIKELY)
        self.assertEqual(classify(100.0001), Category.IMPOSSIBLE)

    def test_extremes(self):
        self.assertEqual(classify(-1e9), Category.SECURED)
        self.assertEqual(classify(1e9), Category.IMPOSSIBLE)
        self.assertEqual(classify(math.inf), Category.IMPOSSIBLE)
        self.assertEqual(classify(-math.inf), Category.SECURED)

    def test_nan_still_gets_a_category(self):
        self.assertEqual(classify(math.nan), Category.IMPOSSIBLE)


if __name__ == "__main__":
    unittest.main()

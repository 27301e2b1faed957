import itertools
import unittest

from rapidfuzz.distance import Levenshtein as RFLevenshtein

from bkspell.distance import get_distance_function, levenshtein_distance

SAMPLE_WORDS = ["", "a", "ab", "abc", "cat", "cot", "coat", "dog", "kitten", "sitting", "flaw", "lawn"]


class TestLevenshteinDistance(unittest.TestCase):
    """Tests for the dynamic-programming edit distance."""

    def test_known_distances(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)
        self.assertEqual(levenshtein_distance("cat", "cot"), 1)
        self.assertEqual(levenshtein_distance("cat", "dog"), 3)

    def test_empty_inputs_return_other_length(self):
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abcd", ""), 4)
        self.assertEqual(levenshtein_distance("", ""), 0)

    def test_works_on_any_sequence(self):
        self.assertEqual(levenshtein_distance(b"abc", b"abd"), 1)
        self.assertEqual(levenshtein_distance(("x", "y"), ("y",)), 1)

    def test_metric_properties(self):
        for a, b in itertools.product(SAMPLE_WORDS, repeat=2):
            d = levenshtein_distance(a, b)
            self.assertEqual(d, levenshtein_distance(b, a))
            self.assertEqual(d == 0, a == b)
        for a, b, c in itertools.product(SAMPLE_WORDS, repeat=3):
            self.assertLessEqual(
                levenshtein_distance(a, c),
                levenshtein_distance(a, b) + levenshtein_distance(b, c),
            )

    def test_agrees_with_rapidfuzz(self):
        for a, b in itertools.product(SAMPLE_WORDS, repeat=2):
            self.assertEqual(levenshtein_distance(a, b), RFLevenshtein.distance(a, b))


class TestGetDistanceFunction(unittest.TestCase):
    def test_known_backends(self):
        self.assertIs(get_distance_function("levenshtein"), levenshtein_distance)
        self.assertEqual(get_distance_function("RapidFuzz")("cat", "cot"), 1)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            get_distance_function("soundex")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

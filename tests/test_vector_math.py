"""
Unit tests for vector math primitives.
"""

import unittest
import sys
import os
import math
import numpy as np

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from vector_math import (
    Vector3,
    ZERO_VECTOR,
    as_vector3,
    dot_product,
    magnitude,
    is_zero_vector,
    scale_vector,
    cosine_similarity,
    normalize_input
)

class TestVectorPrimitives(unittest.TestCase):
    """Test dot product, magnitude and scaling."""

    def test_dot_product(self):
        """Test dot product of simple vectors."""
        self.assertEqual(dot_product(Vector3(1, 2, 3), Vector3(4, 5, 6)), 32)
        self.assertEqual(dot_product(Vector3(1, 0, 0), Vector3(0, 1, 0)), 0)
        self.assertEqual(dot_product(Vector3(-1, 2, -3), Vector3(1, 1, 1)), -2)

    def test_magnitude(self):
        """Test Euclidean norm."""
        self.assertEqual(magnitude(Vector3(3, 4, 0)), 5.0)
        self.assertEqual(magnitude(Vector3(2, 3, 6)), 7.0)
        self.assertAlmostEqual(magnitude(Vector3(1, 1, 1)), math.sqrt(3))

    def test_magnitude_zero_only_for_zero_vector(self):
        """Magnitude is zero iff the vector is zero."""
        self.assertEqual(magnitude(ZERO_VECTOR), 0.0)
        self.assertGreater(magnitude(Vector3(0, 0, 0.001)), 0.0)
        self.assertGreater(magnitude(Vector3(-1, 0, 0)), 0.0)

    def test_is_zero_vector(self):
        self.assertTrue(is_zero_vector(ZERO_VECTOR))
        self.assertTrue(is_zero_vector((0, 0, 0)))
        self.assertFalse(is_zero_vector((0, 0, 1e-300)))

    def test_scale_vector(self):
        """Test scalar multiplication."""
        self.assertEqual(scale_vector(Vector3(1, 2, 3), 2), Vector3(2, 4, 6))
        self.assertEqual(scale_vector(Vector3(1, 2, 3), 0), Vector3(0, 0, 0))

    def test_normalize_input_is_identity(self):
        """The normalize hook must not rescale slider values."""
        for value in [1, 5.5, 10, 0, -3.25]:
            self.assertEqual(normalize_input(value), value)

class TestCosineSimilarity(unittest.TestCase):
    """Test cosine similarity and its degenerate-input policy."""

    def setUp(self):
        """Set up sample vectors."""
        self.vectors = [
            Vector3(10, 10, 10),
            Vector3(1, 10, 1),
            Vector3(10, 1, 10),
            Vector3(2.5, 7.5, 5.0),
            Vector3(-3, 4, 0.5),
            Vector3(1, 2, 3)
        ]

    def test_self_similarity_is_one(self):
        """Self-similarity of a non-zero vector is exactly 1."""
        for v in self.vectors:
            self.assertEqual(cosine_similarity(v, v), 1.0)

    def test_symmetry(self):
        """cos(a, b) == cos(b, a)."""
        for a in self.vectors:
            for b in self.vectors:
                self.assertEqual(cosine_similarity(a, b), cosine_similarity(b, a))

    def test_zero_vector_returns_zero(self):
        """A zero vector on either side yields exactly 0."""
        for v in self.vectors:
            self.assertEqual(cosine_similarity(v, ZERO_VECTOR), 0.0)
            self.assertEqual(cosine_similarity(ZERO_VECTOR, v), 0.0)
        self.assertEqual(cosine_similarity(ZERO_VECTOR, ZERO_VECTOR), 0.0)

    def test_zero_vector_never_nan(self):
        """Degenerate input must not produce NaN."""
        result = cosine_similarity(ZERO_VECTOR, ZERO_VECTOR)
        self.assertFalse(math.isnan(result))

    def test_scale_invariance(self):
        """Scaling by a positive factor does not change similarity."""
        for v in self.vectors:
            for s in [0.001, 0.5, 2, 3.7, 1000]:
                self.assertAlmostEqual(cosine_similarity(v, scale_vector(v, s)), 1.0, places=12)

    def test_opposite_vectors(self):
        """Opposite directions score -1."""
        v = Vector3(1, 2, 3)
        self.assertAlmostEqual(cosine_similarity(v, scale_vector(v, -1)), -1.0, places=12)

    def test_orthogonal_vectors(self):
        """Orthogonal vectors score 0."""
        self.assertEqual(cosine_similarity(Vector3(1, 0, 0), Vector3(0, 5, 0)), 0.0)

    def test_known_value(self):
        """(1,10,1) vs (10,1,10) matches the closed form."""
        expected = (1 * 10 + 10 * 1 + 1 * 10) / (math.sqrt(102) * math.sqrt(201))
        result = cosine_similarity(Vector3(1, 10, 1), Vector3(10, 1, 10))
        self.assertAlmostEqual(result, expected, delta=1e-9)

    def test_parallel_vectors_score_identically(self):
        """Parallel vectors of different length give the same score."""
        user = Vector3(10, 10, 10)
        self.assertEqual(
            cosine_similarity(user, Vector3(10, 10, 10)),
            cosine_similarity(user, Vector3(1, 1, 1))
        )

    def test_range(self):
        """Results stay within [-1, 1] up to rounding."""
        for a in self.vectors:
            for b in self.vectors:
                result = cosine_similarity(a, b)
                self.assertGreaterEqual(result, -1.0 - 1e-12)
                self.assertLessEqual(result, 1.0 + 1e-12)

    def test_extreme_magnitudes(self):
        """Huge and tiny vectors still give finite, correct results."""
        huge = Vector3(1e200, 1e200, 1e200)
        tiny = Vector3(1e-200, 1e-200, 1e-200)
        self.assertAlmostEqual(cosine_similarity(huge, Vector3(1, 1, 1)), 1.0, places=12)
        self.assertAlmostEqual(cosine_similarity(tiny, Vector3(1, 1, 1)), 1.0, places=12)
        self.assertAlmostEqual(cosine_similarity(huge, tiny), 1.0, places=12)
        self.assertAlmostEqual(cosine_similarity(huge, scale_vector(tiny, -1)), -1.0, places=12)

    def test_accepts_plain_tuples(self):
        """Any 3-sequence works, not only Vector3."""
        self.assertEqual(cosine_similarity((1, 2, 3), [1, 2, 3]), 1.0)

class TestAsVector3(unittest.TestCase):
    """Test input coercion and rejection of malformed vectors."""

    def test_from_sequence(self):
        v = as_vector3([1, 2.5, 3])
        self.assertIsInstance(v, Vector3)
        self.assertEqual(v, Vector3(1.0, 2.5, 3.0))
        self.assertIsInstance(v.x, float)

    def test_from_mapping(self):
        self.assertEqual(as_vector3({"x": 1, "y": 2, "z": 3}), Vector3(1.0, 2.0, 3.0))

    def test_from_numpy(self):
        """numpy arrays and scalars are accepted."""
        v = as_vector3(np.array([1, 2, 3], dtype=np.int64))
        self.assertEqual(v, Vector3(1.0, 2.0, 3.0))
        v = as_vector3((np.float64(0.5), np.float32(1.5), 2))
        self.assertEqual(v, Vector3(0.5, 1.5, 2.0))

    def test_negative_and_zero_components_allowed(self):
        self.assertEqual(as_vector3((-5, 0, 100)), Vector3(-5.0, 0.0, 100.0))

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            as_vector3((1, 2))
        with self.assertRaises(ValueError):
            as_vector3((1, 2, 3, 4))

    def test_missing_mapping_key(self):
        with self.assertRaises(ValueError):
            as_vector3({"x": 1, "y": 2})

    def test_non_numeric_rejected(self):
        with self.assertRaises(TypeError):
            as_vector3(("1", 2, 3))
        with self.assertRaises(TypeError):
            as_vector3((None, 2, 3))
        with self.assertRaises(TypeError):
            as_vector3((True, 2, 3))
        with self.assertRaises(TypeError):
            as_vector3(5)

    def test_non_finite_rejected(self):
        with self.assertRaises(ValueError):
            as_vector3((float("nan"), 2, 3))
        with self.assertRaises(ValueError):
            as_vector3((1, float("inf"), 3))

if __name__ == '__main__':
    unittest.main()

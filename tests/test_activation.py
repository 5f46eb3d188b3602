import unittest
import warnings

import numpy as np

from xor_backprop.activation import sigmoid, sigmoid_derivative


class TestSigmoid(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(sigmoid(0.0), 0.5)

    def test_known_values(self):
        self.assertAlmostEqual(sigmoid(1.0), 1.0 / (1.0 + np.e ** -1))
        self.assertAlmostEqual(sigmoid(-2.0), 1.0 / (1.0 + np.e ** 2))

    def test_symmetry(self):
        for x in [0.1, 1.5, 4.0, 11.0]:
            self.assertAlmostEqual(sigmoid(x) + sigmoid(-x), 1.0)

    def test_bounds(self):
        x = np.linspace(-700.0, 35.0, 5001)
        y = sigmoid(x)
        self.assertTrue(np.all(y > 0.0))
        self.assertTrue(np.all(y < 1.0))

    def test_monotonic(self):
        y = sigmoid(np.linspace(-30.0, 30.0, 601))
        self.assertTrue(np.all(np.diff(y) > 0.0))

    def test_saturation_without_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            low = sigmoid(np.array([-1e6]))
            high = sigmoid(np.array([1e6]))
        self.assertEqual(low[0], 0.0)
        self.assertEqual(high[0], 1.0)

    def test_derivative(self):
        self.assertEqual(sigmoid_derivative(0.5), 0.25)
        self.assertEqual(sigmoid_derivative(1.0), 0.0)
        y = sigmoid(0.7)
        self.assertAlmostEqual(sigmoid_derivative(y), y * (1 - y))

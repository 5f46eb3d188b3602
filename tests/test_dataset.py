import unittest

from xor_backprop.dataset import sample_maker, XOR
from xor_backprop.network import network


class TestSampleMaker(unittest.TestCase):
    def setUp(self):
        self.network = network(seed=1)
        self.sampler = sample_maker(self.network)

    def loaded(self):
        return (tuple(self.network.input.values), self.network.output.expected[0])

    def test_cycle(self):
        expected = [((1, 1), 0), ((0, 1), 1), ((1, 0), 1), ((0, 0), 0)]
        for n in range(12):
            row = self.sampler.train()
            self.assertEqual(row, expected[n % 4])
            self.assertEqual(self.loaded(), expected[n % 4])
            self.assertEqual(self.sampler.counter, n + 1)

    def test_expected_slot(self):
        self.sampler.train()
        self.sampler.train()
        self.assertEqual(self.network.expected_values[self.network.output_index()], 1.0)
        self.assertEqual(list(self.network.expected_values[:4]), [0.0] * 4)

    def test_truth_table(self):
        for (a, b), desired in XOR:
            self.assertEqual(a ^ b, desired)

    def test_bad_row(self):
        self.assertRaises(AssertionError, self.sampler.set_xor, 4)
        self.assertRaises(AssertionError, self.sampler.set_xor, -1)

    def test_shape(self):
        self.assertRaises(ValueError, sample_maker, network(inputs=3, seed=1))
        self.assertRaises(ValueError, sample_maker, network(outputs=2, seed=1))

# test_identity.py
#
# Date: 2026-10-17
#

import unittest

from identity_registry import SequentialIDGenerator


class TestSequentialIDGenerator(unittest.TestCase):
    def test_sequence(self):
        gen = SequentialIDGenerator()
        self.assertEqual(gen.next(), 0)
        self.assertEqual(gen.next(), 1)
        self.assertEqual(gen.next(), 2)
        self.assertEqual(gen.issued, 3)

    def test_current_does_not_advance(self):
        gen = SequentialIDGenerator()
        self.assertEqual(gen.current, 0)
        self.assertEqual(gen.current, 0)
        self.assertEqual(gen.next(), 0)
        self.assertEqual(gen.current, 1)

    def test_start(self):
        gen = SequentialIDGenerator(start=100)
        self.assertEqual(gen.issued, 0)
        self.assertEqual(gen.next(), 100)
        self.assertEqual(gen.issued, 1)

    def test_negative_start(self):
        with self.assertRaises(ValueError):
            SequentialIDGenerator(start=-1)

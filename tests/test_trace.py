import unittest

from colorlock.grid import Color, freeze_grid
from colorlock.trace import SolutionTrace, is_on_trace

LETTERS = {c.name[0]: c for c in Color}


def g(*rows):
    return [[LETTERS[ch] for ch in row.split()] for row in rows]


class TestPathTracker(unittest.TestCase):
    def setUp(self):
        self.start = g(
            "R G",
            "B B",
        )
        self.after = g(
            "B G",
            "B B",
        )
        self.trace = SolutionTrace(
            snapshots=(freeze_grid(self.start), freeze_grid(self.after)),
            actions=(7,),
        )

    def test_matching_snapshot(self):
        self.assertTrue(is_on_trace(self.start, self.trace, 0))
        self.assertTrue(is_on_trace(self.after, self.trace, 1))

    def test_mismatch(self):
        self.assertFalse(is_on_trace(self.start, self.trace, 1))
        self.assertFalse(is_on_trace(self.after, self.trace, 0))

    def test_index_past_end_is_off_trace(self):
        self.assertFalse(is_on_trace(self.after, self.trace, 2))
        self.assertFalse(is_on_trace(self.after, self.trace, -1))

    def test_action_at(self):
        self.assertEqual(self.trace.num_actions, 1)
        self.assertEqual(len(self.trace.snapshots), 2)
        self.assertEqual(self.trace.action_at(0), 7)
        self.assertIsNone(self.trace.action_at(1))


if __name__ == "__main__":
    unittest.main()

import unittest

from colorlock.codec import ActionCodec, validate_color_map
from colorlock.errors import PuzzleDefinitionError
from colorlock.grid import CANONICAL_ORDER, Color


class TestLiveConvention(unittest.TestCase):
    def test_known_ids(self):
        codec = ActionCodec()
        self.assertEqual(codec.action_space_size, 150)
        self.assertEqual(codec.encode(0, 0, 0), 0)
        self.assertEqual(codec.encode(4, 4, 5), 149)
        self.assertEqual(codec.encode(1, 2, 3), 30 + 12 + 3)
        self.assertEqual(codec.decode(0), (0, 0, Color.RED))
        self.assertEqual(codec.decode(149), (4, 4, Color.ORANGE))

    def test_round_trip(self):
        codec = ActionCodec()
        seen = set()
        for row in range(5):
            for col in range(5):
                for idx, color in enumerate(CANONICAL_ORDER):
                    action_id = codec.encode(row, col, idx)
                    self.assertEqual(codec.decode(action_id), (row, col, color))
                    self.assertEqual(codec.encode_move(row, col, color), action_id)
                    seen.add(action_id)
        self.assertEqual(seen, set(range(150)))


class TestTraceConvention(unittest.TestCase):
    def test_rows_are_flipped(self):
        codec = ActionCodec()
        self.assertEqual(codec.decode_for_trace(0), (4, 0, Color.RED))
        self.assertEqual(codec.decode_for_trace(149), (0, 4, Color.ORANGE))
        self.assertEqual(codec.encode_for_trace(4, 0, Color.RED), 0)

    def test_color_map_is_searched(self):
        # canonical slot 1 (green) is solver color 0 and vice versa
        codec = ActionCodec(color_map=(1, 0, 2, 3, 4, 5))
        self.assertEqual(codec.decode_for_trace(0), (4, 0, Color.GREEN))
        self.assertEqual(codec.decode_for_trace(1), (4, 0, Color.RED))
        self.assertEqual(codec.encode_for_trace(4, 0, Color.GREEN), 0)
        # the live convention ignores the map
        self.assertEqual(codec.decode(0), (0, 0, Color.RED))

    def test_round_trip_with_and_without_map(self):
        for color_map in (None, (2, 0, 1, 5, 3, 4)):
            codec = ActionCodec(color_map=color_map)
            seen = set()
            for row in range(5):
                for col in range(5):
                    for color in CANONICAL_ORDER:
                        action_id = codec.encode_for_trace(row, col, color)
                        self.assertEqual(codec.decode_for_trace(action_id), (row, col, color))
                        seen.add(action_id)
            self.assertEqual(seen, set(range(150)))

    def test_conventions_differ(self):
        codec = ActionCodec()
        self.assertNotEqual(codec.encode_move(0, 3, Color.BLUE), codec.encode_for_trace(0, 3, Color.BLUE))


class TestColorMapValidation(unittest.TestCase):
    def test_accepts_permutation(self):
        self.assertIsNone(validate_color_map(None, 6))
        self.assertEqual(validate_color_map([5, 4, 3, 2, 1, 0], 6), (5, 4, 3, 2, 1, 0))

    def test_rejects_non_permutation(self):
        with self.assertRaises(PuzzleDefinitionError):
            validate_color_map([0, 0, 1, 2, 3, 4], 6)
        with self.assertRaises(PuzzleDefinitionError):
            validate_color_map([0, 1, 2], 6)


if __name__ == "__main__":
    unittest.main()

import unittest

from colorlock.flood import apply_move
from colorlock.grid import Color
from colorlock.regions import (
    GameStatus,
    evaluate_status,
    find_largest_region,
    locked_color,
    locked_regions_info,
    update_locks,
)

LETTERS = {c.name[0]: c for c in Color}


def g(*rows):
    return [[LETTERS[ch] for ch in row.split()] for row in rows]


# 12 red cells, everything else single-cell regions
TWELVE_RED = (
    "R R R R R",
    "R R R R R",
    "R R G B G",
    "B G B G B",
    "G B G B G",
)


class TestLargestRegion(unittest.TestCase):
    def test_single_color_board(self):
        grid = g(*(["B B B B B"] * 5))
        cells, size = find_largest_region(grid)
        self.assertEqual(size, 25)
        self.assertEqual(len(cells), 25)
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 13), GameStatus.SOLVED)

    def test_tie_breaks_on_first_found_row_major(self):
        grid = g(
            "R R B B",
            "G Y P O",
            "O P Y G",
            "G Y P O",
        )
        cells, size = find_largest_region(grid)
        self.assertEqual(size, 2)
        self.assertEqual(cells, {(0, 0), (0, 1)})

    def test_update_locks_never_shrinks(self):
        locked = frozenset({(0, 0), (0, 1)})
        self.assertEqual(update_locks(locked, {(4, 4)}), locked)
        self.assertEqual(update_locks(locked, {(3, 3), (3, 4)}), frozenset({(3, 3), (3, 4)}))
        bigger = {(2, 0), (2, 1), (2, 2)}
        self.assertEqual(update_locks(locked, bigger), frozenset(bigger))


class TestTermination(unittest.TestCase):
    def test_loss_threshold_is_exact(self):
        grid = g(*TWELVE_RED)
        cells, size = find_largest_region(grid)
        self.assertEqual(size, 12)
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 13), GameStatus.IN_PROGRESS)

        apply_move(grid, 2, 2, Color.RED)
        cells, size = find_largest_region(grid)
        self.assertEqual(size, 13)
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 13), GameStatus.LOST)

    def test_majority_of_target_color_continues(self):
        grid = g(*TWELVE_RED)
        apply_move(grid, 2, 2, Color.RED)
        cells, _ = find_largest_region(grid)
        self.assertEqual(evaluate_status(grid, cells, Color.RED, 13), GameStatus.IN_PROGRESS)

    def test_move_elsewhere_keeps_losing_block(self):
        grid = g(
            "R R R R R",
            "R R R R R",
            "R R R B G",
            "B G B G B",
            "G B G B G",
        )
        apply_move(grid, 4, 4, Color.YELLOW)
        cells, size = find_largest_region(grid)
        self.assertEqual(size, 13)
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 13), GameStatus.LOST)

    def test_unified_wrong_color_loses(self):
        grid = g(*(["R R R R R"] * 5))
        cells, _ = find_largest_region(grid)
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 13), GameStatus.LOST)
        # even when the majority rule is out of reach
        self.assertEqual(evaluate_status(grid, cells, Color.BLUE, 26), GameStatus.LOST)


class TestLockedHelpers(unittest.TestCase):
    def test_locked_regions_info(self):
        self.assertEqual(locked_regions_info(frozenset()), [])
        self.assertEqual(locked_regions_info(frozenset({(0, 0), (0, 1), (2, 2)})), [2, 1])

    def test_locked_color(self):
        grid = g(*TWELVE_RED)
        self.assertIsNone(locked_color(grid, frozenset()))
        self.assertEqual(locked_color(grid, frozenset({(0, 0), (0, 1)})), Color.RED)


if __name__ == "__main__":
    unittest.main()

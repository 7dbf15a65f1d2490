import random
import unittest
from collections import Counter

from boggle.core.constants import LETTER_WEIGHTS, NON_LETTER
from boggle.core.exceptions import GridShapeError
from boggle.engine.grid import GridConfig, LetterGrid
from boggle.utils.pretty import format_grid


ROWS = ["CATS", "ORED", "DOGX", "XXXX"]


class GridConstructionTests(unittest.TestCase):
    def test_new_grid_is_empty_and_unused(self) -> None:
        grid = LetterGrid()
        for row, col in grid.cells():
            self.assertEqual(grid.char_at(row, col), NON_LETTER)
            self.assertFalse(grid.is_in_use(row, col))

    def test_from_rows_lowercases_letters(self) -> None:
        grid = LetterGrid.from_rows([list(row) for row in ROWS])
        self.assertEqual(grid.char_at(0, 0), "c")
        self.assertEqual(grid.as_string(), "catsoreddogxxxxx")

    def test_wrong_row_count_fails_fast(self) -> None:
        with self.assertRaises(GridShapeError):
            LetterGrid.from_rows(ROWS[:3])

    def test_wrong_row_width_fails_fast(self) -> None:
        with self.assertRaises(ValueError):
            LetterGrid.from_rows(["CATS", "ORE", "DOGX", "XXXX"])

    def test_multi_letter_cell_rejected(self) -> None:
        with self.assertRaises(GridShapeError):
            LetterGrid.from_rows([["C", "A", "T", "ST"], list("ORED"), list("DOGX"), list("XXXX")])


class GridMixTests(unittest.TestCase):
    def test_mix_is_reproducible_with_seed(self) -> None:
        first = LetterGrid(GridConfig(rng_seed=7))
        second = LetterGrid(GridConfig(rng_seed=7))
        first.mix()
        second.mix()
        self.assertEqual(first.as_string(), second.as_string())

    def test_mix_uses_injected_rng(self) -> None:
        rng = random.Random(3)
        grid = LetterGrid(GridConfig(rng=rng))
        self.assertIs(grid.rng, rng)
        grid.mix()
        for row, col in grid.cells():
            self.assertIn(grid.char_at(row, col), LETTER_WEIGHTS)

    def test_mix_clears_in_use_mask(self) -> None:
        grid = LetterGrid(GridConfig(rng_seed=1))
        grid.mix()
        grid.use_char_at(0, 0)
        grid.use_char_at(3, 3)
        grid.mix()
        self.assertFalse(grid.any_in_use())

    def test_mix_follows_weighted_distribution(self) -> None:
        grid = LetterGrid(GridConfig(rng_seed=2024))
        counts: Counter = Counter()
        for _ in range(300):
            grid.mix()
            counts.update(grid.as_string())
        self.assertGreater(counts["e"], 3 * counts["q"])
        self.assertGreater(counts["t"], 3 * counts["z"])
        self.assertEqual(sum(counts.values()), 300 * 16)


class GridAccessTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid.from_rows(ROWS)

    def test_out_of_range_returns_sentinel(self) -> None:
        for row, col in [(-1, 0), (0, -1), (4, 0), (0, 4), (10, 10)]:
            self.assertEqual(self.grid.char_at(row, col), NON_LETTER)
            self.assertEqual(self.grid.use_char_at(row, col), NON_LETTER)

    def test_use_char_at_marks_cell(self) -> None:
        self.assertEqual(self.grid.use_char_at(1, 1), "r")
        self.assertTrue(self.grid.is_in_use(1, 1))
        self.assertEqual(self.grid.char_at(1, 1), NON_LETTER)
        self.assertEqual(self.grid.use_char_at(1, 1), NON_LETTER)

    def test_char_at_does_not_mark(self) -> None:
        self.assertEqual(self.grid.char_at(2, 2), "g")
        self.assertFalse(self.grid.any_in_use())

    def test_un_use_ignores_bad_coordinates(self) -> None:
        self.grid.use_char_at(0, 0)
        self.grid.un_use_char_at(-1, 9)
        self.grid.un_use_char_at(4, 4)
        self.assertTrue(self.grid.is_in_use(0, 0))
        self.grid.un_use_char_at(0, 0)
        self.assertFalse(self.grid.is_in_use(0, 0))

    def test_un_use_all(self) -> None:
        for row, col in self.grid.cells():
            self.grid.use_char_at(row, col)
        self.grid.un_use_all()
        self.assertFalse(self.grid.any_in_use())

    def test_claim_releases_on_exception(self) -> None:
        with self.assertRaises(RuntimeError):
            with self.grid.claim(0, 1) as letter:
                self.assertEqual(letter, "a")
                self.assertTrue(self.grid.is_in_use(0, 1))
                raise RuntimeError("boom")
        self.assertFalse(self.grid.is_in_use(0, 1))

    def test_claim_of_busy_cell_keeps_it_busy(self) -> None:
        self.grid.use_char_at(0, 2)
        with self.grid.claim(0, 2) as letter:
            self.assertEqual(letter, NON_LETTER)
        self.assertTrue(self.grid.is_in_use(0, 2))

    def test_format_grid_hides_used_cells(self) -> None:
        self.grid.use_char_at(0, 0)
        rendered = format_grid(self.grid)
        lines = rendered.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[2], " 0 |  .  A  T  S")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

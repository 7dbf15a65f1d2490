import random
import unittest

from boggle.data.lexicon import Lexicon
from boggle.engine.classification import classify_words
from boggle.engine.enumerator import BoardWordEnumerator, find_all_words
from boggle.engine.grid import GridConfig, LetterGrid
from boggle.engine.locator import is_on_board


ROWS = ["CATS", "ORED", "DOGX", "XXXX"]


class FindAllTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid.from_rows([list(row) for row in ROWS])

    def test_returns_traceable_subset(self) -> None:
        lexicon = Lexicon(["CAT", "DOG", "ZEBRA"])
        self.assertEqual(find_all_words(self.grid, lexicon), {"cat", "dog"})

    def test_empty_lexicon(self) -> None:
        self.assertEqual(find_all_words(self.grid, Lexicon()), set())

    def test_grid_left_clean(self) -> None:
        lexicon = Lexicon(["star", "gore", "xxxxxx", "zebra"])
        for prune in (False, True):
            with self.subTest(prune=prune):
                found = BoardWordEnumerator(lexicon, prune_prefixes=prune).find_all(self.grid)
                self.assertEqual(found, {"star", "gore"})
                self.assertFalse(self.grid.any_in_use())

    def test_pruned_walk_matches_full_scan(self) -> None:
        rng = random.Random(8)
        grid = LetterGrid(GridConfig(rng=rng))
        for _ in range(15):
            grid.mix()
            letters = grid.as_string()
            words = {letters[i:i + n] for i in range(16) for n in (2, 3, 4) if i + n <= 16}
            words |= {"".join(rng.choice("aeinorst") for _ in range(3)) for _ in range(200)}
            lexicon = Lexicon(words)
            scan = BoardWordEnumerator(lexicon).find_all(grid)
            pruned = BoardWordEnumerator(lexicon, prune_prefixes=True).find_all(grid)
            self.assertEqual(scan, pruned)
            self.assertEqual(scan, {word for word in lexicon if is_on_board(grid, word)})


class ClassificationTests(unittest.TestCase):
    def test_partition(self) -> None:
        grid = LetterGrid.from_rows(ROWS)
        result = classify_words(grid, ["CAT", "red", "zebra", "dog", ""], {"cat", "rat"})
        self.assertEqual(result.common, {"cat"})
        self.assertEqual(result.human_only, {"red", "dog"})
        self.assertEqual(result.computer_only, {"rat"})
        self.assertEqual(result.invalid, {"zebra"})
        self.assertFalse(grid.any_in_use())

    def test_no_words(self) -> None:
        result = classify_words(LetterGrid.from_rows(ROWS), [], [])
        self.assertEqual(
            (result.common, result.human_only, result.computer_only, result.invalid),
            (set(), set(), set(), set()),
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

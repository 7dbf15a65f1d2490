"""CLI entrypoint: mix (or load) a board and list every lexicon word on it."""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

from boggle.core.constants import DIMENSION
from boggle.data.lexicon import Lexicon, LexiconConfig
from boggle.engine.classification import classify_words
from boggle.engine.enumerator import BoardWordEnumerator
from boggle.engine.grid import GridConfig, LetterGrid
from boggle.utils.logger import configure_logging
from boggle.utils.pretty import format_classification, pretty_print_grid


def parse_grid_letters(text: str) -> List[str]:
    """Split a row-major letter string into grid rows. Spaces and commas are skipped.

    Returns an empty list when the letter count does not fill the grid.
    """
    letters = "".join(char for char in text if char not in " ,")
    if len(letters) != DIMENSION * DIMENSION:
        return []
    return [letters[r * DIMENSION:(r + 1) * DIMENSION] for r in range(DIMENSION)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every lexicon word on a Boggle-style letter grid",
    )
    parser.add_argument(
        "--lexicon",
        type=str,
        default=os.environ.get("BOGGLE_LEXICON", "dictionary.txt"),
        help="Word list path or http(s) URL, one word per line (env: BOGGLE_LEXICON)",
    )
    parser.add_argument(
        "--grid",
        type=str,
        help=f"Explicit board as {DIMENSION * DIMENSION} row-major letters (default: random mix)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Player words to classify against the board and the computer's words",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Walk the board with prefix pruning instead of scanning the whole lexicon",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    rng = random.Random(args.seed)
    if args.grid:
        rows = parse_grid_letters(args.grid)
        if len(rows) != DIMENSION:
            parser.error(f"--grid needs exactly {DIMENSION * DIMENSION} letters")
        grid = LetterGrid.from_rows(rows, GridConfig(rng=rng))
    else:
        grid = LetterGrid(GridConfig(rng=rng))
        grid.mix()

    lexicon = Lexicon.from_source(config=LexiconConfig(path=args.lexicon, rng=rng))
    enumerator = BoardWordEnumerator(lexicon, prune_prefixes=args.prune)
    found = enumerator.find_all(grid)

    pretty_print_grid(grid, stream=sys.stderr)

    payload: Dict[str, Any] = {
        "grid": grid.to_jsonable(),
        "found": sorted(found),
        "lexicon_load": {
            "status": lexicon.last_load.status.value if lexicon.last_load else None,
            "count": len(lexicon),
            "error": lexicon.last_load.error if lexicon.last_load else None,
        },
    }
    if args.words:
        classification = classify_words(grid, args.words, found)
        print(format_classification(classification), file=sys.stderr)
        payload["classification"] = {
            "common": sorted(classification.common),
            "human_only": sorted(classification.human_only),
            "computer_only": sorted(classification.computer_only),
            "invalid": sorted(classification.invalid),
        }

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()

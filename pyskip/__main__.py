"""Small demo: ``python -m pyskip [--size N] [--seed S] [--verbose]``."""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .skiplist import SkipList


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pyskip", description="Skip list walkthrough")
    parser.add_argument("--size", type=int, default=6, help="Number of values bulk-loaded")
    parser.add_argument("--seed", type=int, default=None, help="Seed for level selection")
    parser.add_argument("--verbose", action="store_true", help="Log structural changes")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    sl = SkipList(range(args.size), rng=random.Random(args.seed))
    for value in range(min(4, args.size)):
        sl.add(value)
    for value in (2, 3):
        if sl.find(value):
            sl.remove(value)

    print(list(sl))
    print(f"height: {sl.height}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

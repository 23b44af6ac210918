#!/usr/bin/env python3
"""
Rank-Biased Overlap (RBO) between two ranked list files.

Each file holds one item per line, best first. See Webber, Moffat & Zobel,
"A similarity measure for indefinite rankings", ACM TOIS 2010, for details.

Usage:
    python -m rbo.cli first.txt second.txt
    python -m rbo.cli -p 0.95 first.txt second.txt
    python -m rbo.cli --json first.txt second.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from rbo.config import settings
from rbo.errors import RboError
from rbo.overlap import rbo


def read_ranked_list(path: Path) -> list[str]:
    """Read one item per line; line endings are stripped."""
    return path.read_text(encoding="utf-8").splitlines()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rbo",
        description="Rank-Biased Overlap: a similarity measure for indefinite ranked lists",
    )
    parser.add_argument(
        "first",
        type=Path,
        metavar="FIRST_RANKED_LIST_FILE",
        help="First ranked list, one item per line",
    )
    parser.add_argument(
        "second",
        type=Path,
        metavar="SECOND_RANKED_LIST_FILE",
        help="Second ranked list, one item per line",
    )
    parser.add_argument(
        "-p",
        type=float,
        default=settings.DEFAULT_PERSISTENCE,
        dest="persistence",
        metavar="PERSISTENCE",
        help=f"Persistence value p where 0 <= p < 1.0 (default: {settings.DEFAULT_PERSISTENCE})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of the summary line",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    for path in (args.first, args.second):
        if not path.is_file():
            print(f"Error: {path} does not exist", file=sys.stderr)
            sys.exit(1)

    first = read_ranked_list(args.first)
    second = read_ranked_list(args.second)
    logger.info(
        "Comparing {} ({} items) with {} ({} items)",
        args.first.name,
        len(first),
        args.second.name,
        len(second),
    )

    try:
        result = rbo(first, second, args.persistence)
    except RboError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(result.model_dump_json())
    else:
        print(result)


if __name__ == "__main__":
    main()

"""Command line entry point: CSV of scattered samples in, isoline map JSON out."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from scalar_field.errors import EmptyInputError, InvalidArgumentError
from scalar_field.search import SEARCH_ENGINES

from .config import IsolineMapConfig
from .pipeline import IsolineMapPipeline

logger = logging.getLogger(__name__)


def prompt_title(input_fn: Callable[[str], str] = input) -> str:
    """Asks for a map title until a non-blank one is entered."""
    while True:
        title = (input_fn("Please enter the title of the isoline map: ") or "").strip()
        if title:
            return title
        print("The title must not be empty. Please enter a valid title.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interpolate scattered X,Y,Value samples onto a grid for "
        "heatmap and isoline rendering."
    )
    parser.add_argument("input", type=str, help="CSV file with an X,Y,Value header.")
    parser.add_argument("--title", "-t", type=str, default=None, help="Map title.")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output JSON file. Defaults to '<title>.json'.",
    )
    parser.add_argument("--resolution-x", type=int, default=400, help="Grid size along X.")
    parser.add_argument("--resolution-y", type=int, default=400, help="Grid size along Y.")
    parser.add_argument("--levels", type=int, default=25, help="Number of contour levels.")
    parser.add_argument(
        "--workers", type=int, default=None, help="Worker threads for evaluation."
    )
    parser.add_argument(
        "--search",
        choices=sorted(SEARCH_ENGINES),
        default="sorted",
        help="Quadrant search strategy.",
    )
    parser.add_argument("--delimiter", type=str, default=",", help="CSV field separator.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser


def main(
    argv: list[str] | None = None, input_fn: Callable[[str], str] = input
) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    title = args.title.strip() if args.title and args.title.strip() else prompt_title(input_fn)

    config = IsolineMapConfig(
        resolution_x=args.resolution_x,
        resolution_y=args.resolution_y,
        level_count=args.levels,
        max_workers=args.workers,
        search=args.search,
        delimiter=args.delimiter,
    )
    pipeline = IsolineMapPipeline(config)

    try:
        output = pipeline.run(Path(args.input), title)
    except FileNotFoundError as exc:
        logger.error(f"Input file not found: {exc}")
        return 2
    except (InvalidArgumentError, EmptyInputError) as exc:
        logger.error(f"Cannot build isoline map: {exc}")
        return 2

    pipeline.export(output, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

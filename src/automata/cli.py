"""Command-line entry point.

Usage:
    automata seating INPUT [--line-of-sight]
    automata tiles INPUT [--days N]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import DEFAULT_TILE_GENERATIONS, SeatingConfig, TileConfig
from .core.errors import AutomatonError
from .io.parsing import read_input_lines
from .solve import solve_seating, solve_tiles

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="automata",
        description="Run the seating or hex tile automaton to its final state",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seating = subparsers.add_parser("seating", help="Seat layout until no seat changes")
    seating.add_argument("input", help="File with one row of '.', 'L', '#' per line")
    seating.add_argument("--line-of-sight", action="store_true",
                         help="Count the first visible seat in each direction")

    tiles = subparsers.add_parser("tiles", help="Hex tile floor for a fixed number of days")
    tiles.add_argument("input", help="File with one direction path per line")
    tiles.add_argument("--days", type=int, default=DEFAULT_TILE_GENERATIONS,
                       help=f"Generations to simulate (default {DEFAULT_TILE_GENERATIONS})")
    tiles.add_argument("--address-bits", type=int, default=None,
                       help="Bits per axis for packed tile addresses")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        if args.command == "seating":
            config = SeatingConfig(line_of_sight=args.line_of_sight)
        else:
            config = TileConfig(generations=args.days, address_bits=args.address_bits)
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 2

    try:
        lines = read_input_lines(args.input)
        if args.command == "seating":
            occupants = solve_seating(lines, config)
            print(f"Occupied seats: {occupants}")
        else:
            initial, final = solve_tiles(lines, config)
            print(f"{initial} tiles remain flipped")
            print(f"After {config.generations} days, {final} tiles are black")
    except AutomatonError as exc:
        logger.error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

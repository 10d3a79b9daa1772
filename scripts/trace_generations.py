#!/usr/bin/env python3
"""
Generation Trace Script

Runs the seating automaton on an input file and records the occupied seat
count after every generation, or runs the tile automaton and records the
black tile count per day. Results are written as JSON.
"""

import sys
import os
import json
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from automata.core.errors import AutomatonError
from automata.core.config import DEFAULT_ADDRESS_BITS, DEFAULT_TILE_GENERATIONS
from automata.io.parsing import parse_seat_layout, parse_tile_floor, read_input_lines
from automata.seating.engine import SeatingSimulation
from automata.seating.rules import get_policy
from automata.tiles.coordinates import HexAddressing
from automata.tiles.rules import TileSimulation


def trace_seating(input_path, policy_name="adjacent"):
    """Run a seat layout to its fixed point, recording occupants per generation."""
    layout = parse_seat_layout(read_input_lines(input_path))
    simulation = SeatingSimulation(layout, get_policy(policy_name))

    logger.info(f"Layout {layout.row_count}x{layout.column_count}, policy {policy_name}")

    history = [simulation.count_occupants()]
    while simulation.evolve():
        history.append(simulation.count_occupants())

    logger.info(f"Fixed point after {simulation.generation} generations: {history[-1]} occupied")
    return {
        "automaton": "seating",
        "input": str(input_path),
        "policy": policy_name,
        "rows": layout.row_count,
        "columns": layout.column_count,
        "generations": simulation.generation,
        "occupied_history": history,
        "final_occupied": history[-1],
    }


def trace_tiles(input_path, days=DEFAULT_TILE_GENERATIONS, address_bits=DEFAULT_ADDRESS_BITS):
    """Run the tile floor for a number of days, recording black tiles per day."""
    floor = parse_tile_floor(read_input_lines(input_path), HexAddressing(address_bits))
    simulation = TileSimulation(floor, days)

    history = [floor.black_count()]
    for day in range(days):
        simulation.evolve()
        history.append(floor.black_count())
        if day % 10 == 9:
            logger.info(f"Day {day + 1}: {history[-1]} black")

    return {
        "automaton": "tiles",
        "input": str(input_path),
        "days": days,
        "black_history": history,
        "initial_black": history[0],
        "final_black": history[-1],
    }


def save_trace(results, output_file):
    """Write trace results as JSON."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Trace saved to: {output_path}")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Per-generation trace of the seating or tile automaton")
    parser.add_argument("automaton", choices=["seating", "tiles"], help="Automaton to run")
    parser.add_argument("input", help="Input file")
    parser.add_argument("--line-of-sight", action="store_true", help="Seating: line-of-sight policy")
    parser.add_argument("--days", type=int, default=DEFAULT_TILE_GENERATIONS, help="Tiles: days to simulate")
    parser.add_argument("--output", default="logs/trace.json", help="JSON output path")

    args = parser.parse_args()

    try:
        if args.automaton == "seating":
            results = trace_seating(args.input, "line_of_sight" if args.line_of_sight else "adjacent")
        else:
            results = trace_tiles(args.input, args.days)
        save_trace(results, args.output)
    except AutomatonError as e:
        logger.error(f"Trace failed: {e}")
        sys.exit(1)

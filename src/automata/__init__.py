"""
Stable states of two neighbor-counting cellular automata.

Seating: a rectangular layout of floor and seats evolved until no seat
changes, under an adjacent or a line-of-sight neighbor policy.

Tiles: a hexagonal floor of black and white tiles evolved for a fixed
number of generations.
"""

from .core.config import SeatingConfig, TileConfig
from .core.engine import FixedGenerations, StepEngine, UntilConverged
from .core.errors import (
    AutomatonError, CoordinateRangeError, InputReadError, MalformedDirectionTokenError,
    ParseError, RowWidthMismatchError, UnexpectedCharacterError,
)
from .io.parsing import parse_seat_layout, parse_tile_floor, try_parse
from .seating.engine import SeatingSimulation
from .tiles.rules import TileSimulation
from .solve import solve_seating, solve_tiles

__version__ = "0.1.0"

__all__ = [
    'SeatingConfig',
    'TileConfig',
    'StepEngine',
    'UntilConverged',
    'FixedGenerations',
    'AutomatonError',
    'ParseError',
    'UnexpectedCharacterError',
    'RowWidthMismatchError',
    'MalformedDirectionTokenError',
    'InputReadError',
    'CoordinateRangeError',
    'parse_seat_layout',
    'parse_tile_floor',
    'try_parse',
    'SeatingSimulation',
    'TileSimulation',
    'solve_seating',
    'solve_tiles',
]

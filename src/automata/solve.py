"""End-to-end runs: parsed input in, final counts out."""

from typing import Iterable, Optional, Tuple
import logging

from .core.config import SeatingConfig, TileConfig
from .io.parsing import parse_seat_layout, parse_tile_floor
from .seating.engine import SeatingSimulation
from .seating.rules import get_policy
from .tiles.coordinates import HexAddressing
from .tiles.rules import TileSimulation

logger = logging.getLogger(__name__)


def solve_seating(lines: Iterable[str], config: Optional[SeatingConfig] = None) -> int:
    """Occupied seat count once the layout stops changing.

    Args:
        lines: Seat rows
        config: Seating configuration (adjacent policy if None)

    Returns:
        Occupied seats at the fixed point
    """
    config = config or SeatingConfig()
    layout = parse_seat_layout(lines)
    simulation = SeatingSimulation(layout, get_policy(config.policy_name))
    return simulation.run()


def solve_tiles(lines: Iterable[str], config: Optional[TileConfig] = None) -> Tuple[int, int]:
    """Black tile counts before and after the configured generations.

    Args:
        lines: Direction token lines
        config: Tile configuration (100 generations if None)

    Returns:
        (initial black count, final black count)
    """
    config = config or TileConfig()
    floor = parse_tile_floor(lines, HexAddressing(config.address_bits))
    initial = floor.black_count()
    logger.info(f"{initial} tiles remain flipped")

    final = TileSimulation(floor, config.generations).run()
    return initial, final

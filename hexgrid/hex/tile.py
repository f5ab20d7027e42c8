"""
Purpose: Terrain tiles as grid payloads, with the stock movement cost function.
Dependencies: hexgrid/config.py (TERRAIN table).
Ext Hooks: Add more types (e.g., water: swim roll); per-actor cost closures.
Server: Rules (JSON serializable).
"""

from hexgrid.config import TERRAIN, DEFAULT_TERRAIN
from hexgrid.hex.grid import generate

IMPASSABLE = -1.0


class Tile:
    def __init__(self, tile_type=DEFAULT_TERRAIN):
        if tile_type not in TERRAIN:
            raise ValueError(f"Unknown tile type: {tile_type!r}")
        self.type = tile_type
        cost, self.blocked = TERRAIN[tile_type]
        self.cost = float('inf') if cost is None else cost

    def __repr__(self):
        return f"Tile({self.type!r})"

    def to_dict(self):
        """JSON form; blocked tiles report no cost."""
        return {'type': self.type, 'cost': None if self.blocked else self.cost, 'blocked': self.blocked}


def terrain_cost(from_tile, to_tile):
    """Cost of stepping onto to_tile; blocked tiles are impassable."""
    if to_tile.blocked:
        return IMPASSABLE
    return to_tile.cost


def tiles_from_rows(rows):
    """
    Build a tile grid from rows of type names (rows[y][x]).
    - All rows must have the same length; raises ValueError otherwise.
    """
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ValueError("tiles must be a list of rows")
    ydim = len(rows)
    xdim = len(rows[0]) if ydim else 0
    if any(len(row) != xdim for row in rows):
        raise ValueError("All tile rows must have the same length")
    return generate(xdim, ydim, lambda coord: Tile(rows[coord.y][coord.x]))

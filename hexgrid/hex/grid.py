"""
Purpose: Fixed-size hex grid storage with offset-row adjacency.
Dependencies: hexgrid/hex/coord.py, hexgrid/pathfinding (searches).
Ext Hooks: Ragged rows, wrap-around maps.

Rows are offset: odd rows sit half a hex to the right of even rows, so the
six neighbor offsets depend on row parity.
"""

from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from hexgrid.hex.coord import Coord
from hexgrid.pathfinding.find_path import find_path
from hexgrid.pathfinding.find_in_range import find_in_range

T = TypeVar('T')

# (dx, dy) per direction, clockwise from upper-left
_ODD_ROW_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 0),
)

_EVEN_ROW_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


class HexGrid(Generic[T]):
    def __init__(self, xdim: int, ydim: int, hexes: List[T]):
        if len(hexes) != xdim * ydim:
            raise ValueError(f"Expected {xdim * ydim} hexes, got {len(hexes)}")
        self.xdim = xdim
        self.ydim = ydim
        self.hexes = hexes  # Row-major: index = y * xdim + x

    def __len__(self):
        return len(self.hexes)

    def __repr__(self):
        return f"HexGrid(xdim={self.xdim}, ydim={self.ydim})"

    def dims(self) -> Tuple[int, int]:
        return self.xdim, self.ydim

    def index_of(self, coord: Coord) -> int:
        return coord.y * self.xdim + coord.x

    def coord_of(self, index: int) -> Coord:
        return Coord(index % self.xdim, index // self.xdim)

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.xdim and 0 <= coord.y < self.ydim

    def get_at(self, coord: Coord) -> Optional[T]:
        return self.get_at_xy(coord.x, coord.y)

    def get_at_xy(self, x: int, y: int) -> Optional[T]:
        """Element at (x, y), or None when the cell is outside the grid."""
        if x < 0 or x >= self.xdim or y < 0 or y >= self.ydim:
            return None
        return self.hexes[y * self.xdim + x]

    def set_at(self, coord: Coord, value: T) -> bool:
        """Replace the element at coord. False if coord is outside the grid."""
        if not self.in_bounds(coord):
            return False
        self.hexes[self.index_of(coord)] = value
        return True

    def map_hexes(self, hex_fn: Callable[[Coord, T], Optional[T]]) -> None:
        """
        Call hex_fn(coord, element) for every cell, row by row.
        - Mutable elements can be changed in place.
        - A non-None return value replaces the stored element.
        """
        for y in range(self.ydim):
            for x in range(self.xdim):
                index = y * self.xdim + x
                result = hex_fn(Coord(x, y), self.hexes[index])
                if result is not None:
                    self.hexes[index] = result

    def get_neighbors(self, coord: Coord) -> List[Coord]:
        return self.get_neighbors_xy(coord.x, coord.y)

    def get_neighbors_xy(self, x: int, y: int) -> List[Coord]:
        """In-bounds neighbors of (x, y) in offset-table order (0 to 6 entries)."""
        offsets = _ODD_ROW_OFFSETS if y % 2 == 1 else _EVEN_ROW_OFFSETS
        neighbors = []
        for dx, dy in offsets:
            coord = Coord(x + dx, y + dy)
            if self.in_bounds(coord):
                neighbors.append(coord)
        return neighbors

    def find_path(self, start: Coord, goal: Coord, cost_fn: Callable[[T, T], float]):
        return find_path(self, start, goal, cost_fn)

    def find_in_range(self, start: Coord, max_range: float, include_src: bool,
                      cost_fn: Callable[[T, T], float]):
        return find_in_range(self, start, max_range, include_src, cost_fn)


def generate(xdim: int, ydim: int, init_fn: Callable[[Coord], T]) -> HexGrid[T]:
    """Build a grid, calling init_fn(coord) once per cell (y outer, x inner)."""
    if xdim < 0 or ydim < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {xdim}x{ydim}")
    hexes = []
    for y in range(ydim):
        for x in range(xdim):
            hexes.append(init_fn(Coord(x, y)))
    return HexGrid(xdim, ydim, hexes)

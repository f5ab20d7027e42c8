"""
Hex grid container with movement-cost-aware path and range queries.

This package exposes the grid, its coordinate type and the two searches
(find_path, find_in_range) for tile-based simulations.
"""

from hexgrid.hex.coord import Coord
from hexgrid.hex.grid import HexGrid, generate
from hexgrid.pathfinding.find_path import PathResult, find_path
from hexgrid.pathfinding.find_in_range import RangeResult, find_in_range

__all__ = ['Coord', 'HexGrid', 'generate', 'PathResult', 'find_path', 'RangeResult', 'find_in_range']

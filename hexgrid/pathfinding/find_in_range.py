"""
Purpose: Cost-bounded reachability (movement range) on a HexGrid.
Dependencies: hexgrid/hex/coord.py, collections.
Ext Hooks: Per-actor movement modifiers via cost_fn closures.
"""

from collections import deque
from typing import NamedTuple

from hexgrid.hex.coord import Coord


class RangeResult(NamedTuple):
    coord: Coord
    cost: float

    def to_dict(self):
        return {'coord': self.coord.to_dict(), 'cost': self.cost}

    @staticmethod
    def by_distance(result):
        """Sort key: cost, then column, then row."""
        return result.cost, result.coord.x, result.coord.y


def find_in_range(grid, start, max_range, include_src, cost_fn):
    """
    Every cell reachable from start within max_range, with its cost.
    - Cells are expanded first-in first-out; a discovered cell is never re-costed,
      so costs are exact for uniform grids but not minimal for all cost functions.
    - cost_fn(hex_a, hex_b) < 0 marks the step impassable.
    - start is included (at cost 0) only when include_src is True.
    """
    if not grid.in_bounds(start):
        return []

    # Cost per flat index; None means undiscovered.
    visited = [None] * len(grid)
    start_index = grid.index_of(start)
    visited[start_index] = 0.0

    queue = deque([start])
    results = []
    while queue:
        candidate = queue.popleft()
        candidate_cost = visited[grid.index_of(candidate)]
        if candidate_cost > max_range:
            continue

        if candidate != start or include_src:
            results.append(RangeResult(candidate, candidate_cost))

        candidate_hex = grid.get_at(candidate)
        for neighbor in grid.get_neighbors(candidate):
            neighbor_index = grid.index_of(neighbor)
            if visited[neighbor_index] is not None:
                continue

            step_cost = cost_fn(candidate_hex, grid.get_at(neighbor))
            if step_cost < 0:
                continue

            visited[neighbor_index] = candidate_cost + step_cost
            queue.append(neighbor)

    return results

"""
Purpose: Best-first (A*-ordered) path search on a HexGrid with caller costs.
Dependencies: hexgrid/hex/coord.py, heapq, logging.
Ext Hooks: Swap the heuristic for true hex distance once results may change.

Notes:
- Search runs from goal back to start, so following back-pointers from start
  already gives the start -> goal order. cost_fn is therefore called as
  cost_fn(cell nearer goal, cell nearer start) and should be symmetric.
- A cell is finalized the first time it is popped and never revised.
- Ties on priority pop the most recently pushed entry first. This is a fixed
  rule; an unstable re-sort of the open list can break ties differently.
"""

import heapq
import logging
from typing import List, NamedTuple

from hexgrid.hex.coord import Coord

logger = logging.getLogger(__name__)


class PathResult(NamedTuple):
    cost: float
    path: List[Coord]


class _CostData(NamedTuple):
    index: int
    dist_so_far: float
    est_remaining: float
    prev_index: int

    def est_total(self):
        return self.dist_so_far + self.est_remaining


def est_distance(a, b):
    """Manhattan distance on offset coordinates."""
    return float(abs(a.x - b.x) + abs(a.y - b.y))


def find_path(grid, start, goal, cost_fn):
    """
    Find a path from start to goal through grid.
    - cost_fn(hex_a, hex_b) returns the step cost; negative means impassable.
    - Returns PathResult(cost, [start, ..., goal]) or None if no path exists.
    """
    if not grid.in_bounds(start) or not grid.in_bounds(goal):
        logger.debug("find_path endpoints out of bounds: %s -> %s", start, goal)
        return None

    # Reverse start and goal so the final path is already in the right order.
    origin, target = goal, start
    origin_index = grid.index_of(origin)
    target_index = grid.index_of(target)

    # Arena of finalized records, one slot per cell.
    real_costs = [None] * len(grid)

    sequence = 0
    first = _CostData(origin_index, 0.0, est_distance(origin, target), -1)
    open_set = [(first.est_total(), 0, first)]

    while open_set:
        _, _, parent = heapq.heappop(open_set)

        # An earlier pop of the same cell always had a better priority.
        if real_costs[parent.index] is not None:
            continue
        real_costs[parent.index] = parent

        if parent.index == target_index:
            path = []
            node = parent
            while True:
                path.append(grid.coord_of(node.index))
                if node.prev_index == -1:
                    break
                node = real_costs[node.prev_index]
            logger.debug("find_path found path: %s", path)
            return PathResult(parent.dist_so_far, path)

        parent_coord = grid.coord_of(parent.index)
        parent_hex = grid.get_at(parent_coord)
        for neighbor in grid.get_neighbors(parent_coord):
            neighbor_index = grid.index_of(neighbor)
            if real_costs[neighbor_index] is not None:
                continue

            edge_cost = cost_fn(parent_hex, grid.get_at(neighbor))
            # Negative edges would allow endless loops through free cells.
            if edge_cost < 0:
                continue

            record = _CostData(
                neighbor_index,
                parent.dist_so_far + edge_cost,
                est_distance(neighbor, target),
                parent.index,
            )
            sequence += 1
            heapq.heappush(open_set, (record.est_total(), -sequence, record))

    logger.debug("find_path: no path exists from %s to %s", start, goal)
    return None

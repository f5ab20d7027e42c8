"""
Purpose: Path and range queries over a posted tile grid.
Dependencies: hexgrid/hex/tile.py, hexgrid/hex/coord.py, hexgrid/config.py, flask.
Ext Hooks: Add actor-specific cost rules (e.g., flying ignores forest).
Server Only: Rules enforcement.
"""

import logging
import math

from flask import Blueprint, request, jsonify

from hexgrid.config import MAX_GRID_CELLS
from hexgrid.hex.coord import Coord
from hexgrid.hex.tile import terrain_cost, tiles_from_rows
from hexgrid.pathfinding.find_in_range import RangeResult

logger = logging.getLogger(__name__)

bp = Blueprint('grid', __name__)


def _load_grid(data):
    rows = data['tiles']
    if isinstance(rows, list) and sum(len(row) for row in rows if isinstance(row, list)) > MAX_GRID_CELLS:
        raise ValueError(f"Grid exceeds {MAX_GRID_CELLS} cells")
    return tiles_from_rows(rows)


def _invalid(e):
    logger.info("Rejected request: %s", e)
    return jsonify({"error": f"Invalid data: {e}"}), 400


def _require(data, *fields):
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    missing = [name for name in fields if name not in data]
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")


def _parse_max_range(value):
    if isinstance(value, bool):
        raise ValueError("max_range must be a number")
    max_range = float(value)
    if not math.isfinite(max_range):
        raise ValueError("max_range must be finite")
    return max_range


def _parse_include_src(data):
    include_src = data.get('include_src', False)
    if not isinstance(include_src, bool):
        raise ValueError("include_src must be true or false")
    return include_src


@bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@bp.route("/api/find_path", methods=["POST"])
def handle_find_path():
    data = request.get_json(silent=True)
    try:
        _require(data, 'tiles', 'start', 'goal')
        grid = _load_grid(data)
        start = Coord.from_dict(data['start'])
        goal = Coord.from_dict(data['goal'])
    except (ValueError, KeyError, TypeError) as e:
        return _invalid(e)

    result = grid.find_path(start, goal, terrain_cost)
    if result is None:
        return jsonify({"error": "no path exists", "path": []}), 200

    return jsonify({
        "cost": result.cost,
        "path": [coord.to_dict() for coord in result.path],
        "tiles": [grid.get_at(coord).to_dict() for coord in result.path],
    })


@bp.route("/api/find_in_range", methods=["POST"])
def handle_find_in_range():
    data = request.get_json(silent=True)
    try:
        _require(data, 'tiles', 'start', 'max_range')
        grid = _load_grid(data)
        start = Coord.from_dict(data['start'])
        max_range = _parse_max_range(data['max_range'])
        include_src = _parse_include_src(data)
    except (ValueError, KeyError, TypeError) as e:
        return _invalid(e)

    results = grid.find_in_range(start, max_range, include_src, terrain_cost)
    results.sort(key=RangeResult.by_distance)
    return jsonify({"results": [result.to_dict() for result in results]})

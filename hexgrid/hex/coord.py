"""
Purpose: Coordinate value type for offset hex grids, plus its JSON form.
Dependencies: dataclasses, functools, json.
Ext Hooks: Axial/cube conversions if a layout needs them.
"""

import json
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Coord:
    """
    A cell address: x is the column, y is the row.
    - Hashable, so it works as a dict key.
    - Sorts row-major (y first, then x), the same order map_hexes walks.
    """
    x: int
    y: int

    def __str__(self):
        return f"C({self.x}, {self.y})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __lt__(self, other):
        if not isinstance(other, Coord):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def to_dict(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data):
        """Build a Coord from {"x": int, "y": int}; raises ValueError if malformed."""
        if not isinstance(data, dict) or 'x' not in data or 'y' not in data:
            raise ValueError(f"Invalid coordinate: {data!r}")
        x, y = data['x'], data['y']
        # bool is an int subclass but never a valid coordinate
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise ValueError(f"Coordinate fields must be integers: {data!r}")
        return cls(x, y)

    def to_json(self):
        return json.dumps(self.to_dict(), separators=(',', ':'))

    @classmethod
    def from_json(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid coordinate JSON: {e}") from e
        return cls.from_dict(data)

import unittest
from hexgrid.hex.coord import Coord
from hexgrid.hex.grid import HexGrid, generate


def noop_init(coord):
    return 0


class TestGridStorage(unittest.TestCase):
    def test_generate_and_map_hexes(self):
        count = [0]

        def init(coord):
            count[0] += 1
            return count[0]

        grid = generate(3, 3, init)
        found = []
        fetched_after = []

        def visit(coord, value):
            found.append(value)
            self.assertEqual(grid.get_at(coord), value)
            return value + 1

        grid.map_hexes(visit)
        grid.map_hexes(lambda coord, value: fetched_after.append(value))
        self.assertEqual(found, [1, 2, 3, 4, 5, 6, 7, 8, 9])
        self.assertEqual(fetched_after, [2, 3, 4, 5, 6, 7, 8, 9, 10])

    def test_generate_row_major_order(self):
        seen = []
        generate(2, 2, lambda coord: seen.append(coord))
        self.assertEqual(seen, [Coord(0, 0), Coord(1, 0), Coord(0, 1), Coord(1, 1)])

    def test_map_hexes_in_place_mutation(self):
        grid = generate(2, 1, lambda coord: [])
        grid.map_hexes(lambda coord, cell: cell.append(coord.x))
        self.assertEqual(grid.get_at(Coord(0, 0)), [0])
        self.assertEqual(grid.get_at(Coord(1, 0)), [1])

    def test_dims(self):
        grid = generate(4, 2, noop_init)
        self.assertEqual(grid.dims(), (4, 2))
        self.assertEqual(len(grid), 8)

    def test_get_at_out_of_bounds(self):
        grid = generate(3, 3, lambda coord: 'cell')
        self.assertIsNone(grid.get_at(Coord(3, 0)))
        self.assertIsNone(grid.get_at(Coord(0, -1)))
        self.assertIsNone(grid.get_at_xy(-1, 0))
        self.assertEqual(grid.get_at_xy(2, 2), 'cell')

    def test_set_at(self):
        grid = generate(2, 2, noop_init)
        self.assertTrue(grid.set_at(Coord(1, 1), 7))
        self.assertEqual(grid.get_at_xy(1, 1), 7)
        self.assertFalse(grid.set_at(Coord(2, 1), 7))

    def test_index_round_trip(self):
        grid = generate(3, 4, noop_init)
        for index in range(len(grid)):
            self.assertEqual(grid.index_of(grid.coord_of(index)), index)
        self.assertEqual(grid.coord_of(5), Coord(2, 1))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            generate(-1, 3, noop_init)
        with self.assertRaises(ValueError):
            HexGrid(2, 2, [0, 0, 0])

    def test_empty_grid(self):
        grid = generate(0, 0, noop_init)
        self.assertEqual(grid.dims(), (0, 0))
        self.assertIsNone(grid.get_at(Coord(0, 0)))


class TestNeighbors(unittest.TestCase):
    def assert_counts(self, xdim, ydim, expected_counts):
        # expected_counts[x][y]
        grid = generate(xdim, ydim, noop_init)

        def check(coord, _):
            self.assertEqual(len(grid.get_neighbors(coord)), expected_counts[coord.x][coord.y], str(coord))

        grid.map_hexes(check)

    def test_counts_3x3(self):
        self.assert_counts(3, 3, [[2, 5, 2], [4, 6, 4], [3, 3, 3]])

    def test_counts_3x2(self):
        self.assert_counts(3, 2, [[2, 3], [4, 4], [3, 2]])

    def test_counts_2x4(self):
        # Two columns of four hexes each
        self.assert_counts(2, 4, [[2, 5, 3, 3], [3, 3, 5, 2]])

    def test_neighbors_xy(self):
        grid = generate(3, 3, noop_init)
        self.assertEqual(len(grid.get_neighbors_xy(2, 1)), 3)
        self.assertEqual(len(grid.get_neighbors_xy(1, 1)), 6)
        self.assertEqual(len(grid.get_neighbors_xy(0, 0)), 2)

    def test_neighbor_order(self):
        count = [0]

        def init(coord):
            count[0] += 1
            return count[0]

        grid = generate(3, 4, init)
        cases = [
            ("odd row", Coord(1, 1), [2, 3, 6, 9, 8, 4]),
            ("even row", Coord(1, 2), [4, 5, 9, 11, 10, 7]),
            ("upper left corner", Coord(0, 0), [2, 4]),
            ("lower right corner", Coord(2, 3), [9, 11]),
        ]
        for label, coord, expected_ids in cases:
            with self.subTest(label):
                ids = [grid.get_at(n) for n in grid.get_neighbors(coord)]
                self.assertEqual(ids, expected_ids)

    def test_neighbors_are_mutual(self):
        grid = generate(5, 5, noop_init)

        def check(coord, _):
            for neighbor in grid.get_neighbors(coord):
                self.assertIn(coord, grid.get_neighbors(neighbor))

        grid.map_hexes(check)


class TestCoord(unittest.TestCase):
    def test_json(self):
        self.assertEqual(Coord(10, 5).to_json(), '{"x":10,"y":5}')

    def test_json_round_trip(self):
        for x, y in [(0, 0), (10, 5), (-3, 7), (123456, -98765)]:
            coord = Coord(x, y)
            self.assertEqual(Coord.from_json(coord.to_json()), coord)
            self.assertEqual(Coord.from_dict(coord.to_dict()), coord)

    def test_from_dict_invalid(self):
        for bad in [{'x': 1}, {'x': 1, 'y': '2'}, {'x': True, 'y': 0}, [1, 2], None]:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    Coord.from_dict(bad)
        with self.assertRaises(ValueError):
            Coord.from_json('{"x": 1,')

    def test_str(self):
        self.assertEqual(str(Coord(1, 2)), "C(1, 2)")

    def test_row_major_ordering(self):
        coords = [Coord(1, 1), Coord(0, 1), Coord(2, 0), Coord(0, 0)]
        self.assertEqual(sorted(coords), [Coord(0, 0), Coord(2, 0), Coord(0, 1), Coord(1, 1)])
        self.assertTrue(Coord(5, 0) < Coord(0, 1))

    def test_hashable_and_unpackable(self):
        lookup = {Coord(1, 2): 'a'}
        self.assertEqual(lookup[Coord(1, 2)], 'a')
        x, y = Coord(3, 4)
        self.assertEqual((x, y), (3, 4))


if __name__ == '__main__':
    unittest.main()

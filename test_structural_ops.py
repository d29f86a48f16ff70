import unittest

from chart_data import ChartData, FieldSpec
from grid_model import HEADER_ROW_ID
from grid_projection import project_grid
import structural_ops


def _grid():
    chart = ChartData(
        fields=[FieldSpec("x"), FieldSpec("y"), FieldSpec("z")],
        records=[
            {"x": 1, "y": 2, "z": 3},
            {"x": 4, "y": 5, "z": 6},
            {"x": 7, "y": 8, "z": 9},
        ],
    )
    return project_grid(chart)


def _texts(grid):
    return [[c.text for c in row.cells] for row in grid.rows]


class ResizeTests(unittest.TestCase):
    def test_resize_one_column(self):
        grid = _grid()
        self.assertTrue(structural_ops.resize_column(grid, "y", 240))
        self.assertEqual([c.width for c in grid.columns], [150, 240, 150])

    def test_resize_unknown_column(self):
        grid = _grid()
        self.assertFalse(structural_ops.resize_column(grid, "nope", 10))


class ReorderColumnsTests(unittest.TestCase):
    def test_cells_follow_columns(self):
        grid = _grid()
        self.assertTrue(structural_ops.reorder_columns(grid, "x", ["z"]))
        self.assertEqual(grid.column_ids, ["z", "x", "y"])
        self.assertEqual(
            _texts(grid),
            [["z", "x", "y"], ["3", "1", "2"], ["6", "4", "5"], ["9", "7", "8"]],
        )

    def test_multi_column_move_keeps_alignment(self):
        grid = _grid()
        structural_ops.reorder_columns(grid, "z", ["x", "y"])
        for row in grid.rows:
            self.assertEqual(len(row.cells), len(grid.columns))
            for idx, col in enumerate(grid.columns):
                if row.id == HEADER_ROW_ID:
                    self.assertEqual(row.cells[idx].text, col.id)

    def test_unknown_moving_ids_are_ignored(self):
        grid = _grid()
        self.assertTrue(structural_ops.reorder_columns(grid, "x", ["ghost", "y"]))
        self.assertEqual(grid.column_ids, ["y", "x", "z"])

    def test_unknown_target_is_noop(self):
        grid = _grid()
        before = _texts(grid)
        self.assertFalse(structural_ops.reorder_columns(grid, "ghost", ["y"]))
        self.assertEqual(_texts(grid), before)

    def test_duplicate_ids_move_once(self):
        grid = _grid()
        structural_ops.reorder_columns(grid, "x", ["z", "z"])
        self.assertEqual(grid.column_ids, ["z", "x", "y"])


class ReorderRowsTests(unittest.TestCase):
    def test_header_stays_first(self):
        grid = _grid()
        self.assertTrue(structural_ops.reorder_rows(grid, "row-0", ["row-2"]))
        self.assertEqual(grid.rows[0].id, HEADER_ROW_ID)
        self.assertEqual(grid.row_ids, ["row-2", "row-0", "row-1"])

    def test_header_cannot_be_moved(self):
        grid = _grid()
        self.assertFalse(structural_ops.reorder_rows(grid, "row-1", [HEADER_ROW_ID]))
        self.assertEqual(grid.rows[0].id, HEADER_ROW_ID)

    def test_header_is_not_a_target(self):
        grid = _grid()
        self.assertFalse(structural_ops.reorder_rows(grid, HEADER_ROW_ID, ["row-1"]))
        self.assertEqual(grid.row_ids, ["row-0", "row-1", "row-2"])

    def test_row_ids_survive_reorder(self):
        grid = _grid()
        structural_ops.reorder_rows(grid, "row-0", ["row-1", "row-2"])
        self.assertEqual(grid.row_ids, ["row-1", "row-2", "row-0"])
        self.assertEqual(grid.cell_text("row-0", "x"), "1")


class DeleteTests(unittest.TestCase):
    def test_delete_column_from_every_row(self):
        grid = _grid()
        self.assertEqual(structural_ops.delete_columns(grid, ["x"]), 1)
        self.assertEqual(grid.column_ids, ["y", "z"])
        self.assertEqual(_texts(grid)[0], ["y", "z"])
        self.assertEqual(_texts(grid)[1], ["2", "3"])

    def test_delete_unknown_column(self):
        grid = _grid()
        self.assertEqual(structural_ops.delete_columns(grid, ["ghost"]), 0)
        self.assertEqual(len(grid.columns), 3)

    def test_delete_rows_by_id(self):
        grid = _grid()
        self.assertEqual(structural_ops.delete_rows(grid, ["row-0", "row-2"]), 2)
        self.assertEqual(grid.row_ids, ["row-1"])

    def test_header_row_is_never_deleted(self):
        grid = _grid()
        self.assertEqual(structural_ops.delete_rows(grid, [HEADER_ROW_ID]), 0)
        self.assertEqual(grid.rows[0].id, HEADER_ROW_ID)

    def test_delete_after_reorder_keeps_alignment(self):
        grid = _grid()
        structural_ops.reorder_columns(grid, "x", ["z"])
        structural_ops.delete_columns(grid, ["x"])
        self.assertEqual(grid.column_ids, ["z", "y"])
        self.assertEqual(_texts(grid)[1], ["3", "2"])


if __name__ == "__main__":
    unittest.main()

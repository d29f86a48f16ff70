"""Resize, reorder and delete on a TableGrid.

None of these are recorded in the edit history. Reorder and resize only change
presentation; callers sync the dataset after deletes.
"""
from dataclasses import replace

from grid_model import HEADER_ROW_ID
from grid_reorder import NOT_FOUND, reorder_items, resolve_indexes


def _moving_indexes(items, moving_ids, key):
    indexes = resolve_indexes(items, moving_ids, key)
    return list(dict.fromkeys(idx for idx in indexes if idx != NOT_FOUND))


# ----- resize -----
def resize_column(grid, column_id, width) -> bool:
    idx = grid.column_index(column_id)
    if idx == -1:
        return False
    grid.columns[idx] = replace(grid.columns[idx], width=width)
    return True


# ----- reorder -----
def reorder_columns(grid, target_id, moving_ids) -> bool:
    columns = list(grid.columns)
    target = grid.column_index(target_id)
    if target == -1:
        return False
    indexes = _moving_indexes(columns, moving_ids, lambda col: col.id)
    if not indexes:
        return False

    new_columns = reorder_items(columns, indexes, target)
    new_rows = [
        replace(row, cells=reorder_items(row.cells, indexes, target))
        for row in grid.rows
    ]
    grid.columns = new_columns
    grid.rows = new_rows
    return True


def reorder_rows(grid, target_id, moving_ids) -> bool:
    header = grid.header
    data_rows = grid.data_rows
    target = next((i for i, row in enumerate(data_rows) if row.id == target_id), -1)
    if target == -1:
        return False
    indexes = _moving_indexes(data_rows, moving_ids, lambda row: row.id)
    if not indexes:
        return False

    reordered = reorder_items(data_rows, indexes, target)
    grid.rows = ([header] if header is not None else []) + reordered
    return True


# ----- delete -----
def delete_columns(grid, column_ids) -> int:
    doomed = set(column_ids)
    keep = [i for i, col in enumerate(grid.columns) if col.id not in doomed]
    removed = len(grid.columns) - len(keep)
    if not removed:
        return 0
    grid.columns = [grid.columns[i] for i in keep]
    grid.rows = [replace(row, cells=[row.cells[i] for i in keep]) for row in grid.rows]
    return removed


def delete_rows(grid, row_ids) -> int:
    doomed = set(row_ids) - {HEADER_ROW_ID}
    kept = [row for row in grid.rows if row.is_header or row.id not in doomed]
    removed = len(grid.rows) - len(kept)
    grid.rows = kept
    return removed

from dataclasses import replace

from cell_coercion import coerce_cell_text


def rows_to_records(grid):
    records = []
    for row in grid.data_rows:
        record = {}
        for idx, cell in enumerate(row.cells):
            record[grid.columns[idx].id] = coerce_cell_text(cell.text)
        records.append(record)
    return records


def sync_out(grid, previous):
    """Rebuild the dataset's records from the grid, keeping everything else as is.

    Returns None when there is no dataset to update.
    """
    if previous is None:
        return None
    return replace(previous, records=rows_to_records(grid))

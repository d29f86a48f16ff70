from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

HEADER_ROW_ID = "header"

CELL_HEADER = "header"
CELL_TEXT = "text"


@dataclass(frozen=True)
class Cell:
    kind: str = CELL_TEXT
    text: str = ""


@dataclass
class ColumnDescriptor:
    id: str
    display_name: str
    width: Union[int, str] = 150  # int | "auto"
    reorderable: bool = True
    resizable: bool = True


@dataclass
class RowDescriptor:
    id: str
    cells: List[Cell] = field(default_factory=list)
    reorderable: bool = True

    @property
    def is_header(self) -> bool:
        return self.id == HEADER_ROW_ID


class TableGrid:
    """Positional grid: a header row followed by data rows, aligned to columns."""

    def __init__(self, columns=None, rows=None):
        self.columns: List[ColumnDescriptor] = list(columns or [])
        self.rows: List[RowDescriptor] = list(rows or [])

    def __repr__(self):
        return f"TableGrid({len(self.columns)} columns, {len(self.data_rows)} rows)"

    # ---------- lookups ----------
    @property
    def header(self) -> Optional[RowDescriptor]:
        if self.rows and self.rows[0].is_header:
            return self.rows[0]
        return None

    @property
    def data_rows(self) -> List[RowDescriptor]:
        return [row for row in self.rows if not row.is_header]

    @property
    def column_ids(self) -> List[str]:
        return [col.id for col in self.columns]

    @property
    def row_ids(self) -> List[str]:
        return [row.id for row in self.data_rows]

    def column_index(self, column_id) -> int:
        for idx, col in enumerate(self.columns):
            if col.id == column_id:
                return idx
        return -1

    def row_index(self, row_id) -> int:
        for idx, row in enumerate(self.rows):
            if row.id == row_id:
                return idx
        return -1

    def data_row_exists(self, row_id) -> bool:
        return row_id != HEADER_ROW_ID and self.row_index(row_id) != -1

    def cell_text(self, row_id, column_id) -> Optional[str]:
        r = self.row_index(row_id)
        c = self.column_index(column_id)
        if r == -1 or c == -1:
            return None
        return self.rows[r].cells[c].text

    def is_empty(self) -> bool:
        return not self.columns or not self.rows

    # ---------- mutation ----------
    def set_cell_text(self, row_id, column_id, text: str) -> bool:
        """Replace one data cell's text. Unknown ids and the header row are skipped."""
        if row_id == HEADER_ROW_ID:
            return False
        r = self.row_index(row_id)
        if r == -1:
            return False
        c = self.column_index(column_id)
        if c == -1:
            return False
        row = self.rows[r]
        cells = list(row.cells)
        cells[c] = replace(cells[c], text="" if text is None else str(text))
        self.rows[r] = replace(row, cells=cells)
        return True

    def snapshot(self):
        """Cell texts by row id, in current row and column order."""
        return [(row.id, [cell.text for cell in row.cells]) for row in self.rows]

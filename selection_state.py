from grid_model import HEADER_ROW_ID


class SelectionState:
    """Row and column ids currently marked for deletion."""

    def __init__(self):
        self.row_ids = frozenset()
        self.column_ids = frozenset()

    def set_rows(self, ids):
        self.row_ids = frozenset(i for i in (ids or ()) if i != HEADER_ROW_ID)

    def set_columns(self, ids):
        self.column_ids = frozenset(ids or ())

    def clear_rows(self):
        self.row_ids = frozenset()

    def clear_columns(self):
        self.column_ids = frozenset()

    def clear(self):
        self.clear_rows()
        self.clear_columns()

    def is_empty(self) -> bool:
        return not self.row_ids and not self.column_ids

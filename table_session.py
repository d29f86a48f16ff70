from typing import Callable, Optional

from config_paths import default_config, load_config
from edit_history import CellChange, EditHistory, apply_batch
from grid_projection import project_grid
from grid_sync import sync_out
from selection_state import SelectionState
import structural_ops


class TableSession:
    """Editable grid over one chart dataset, driven by widget and key events.

    Owns the grid, the edit history and the delete selection. Every operation
    that changes cell values (edit, undo, redo, delete) syncs the dataset and
    fires on_data_change; resize and reorder never do.
    """

    def __init__(
        self,
        chart_data,
        on_data_change: Optional[Callable] = None,
        set_status_cb: Optional[Callable[[str, float], None]] = None,
        config: Optional[dict] = None,
    ):
        # config.json applies unless the host passes its own settings
        self.config = load_config() if config is None else default_config()
        self.config.update(config or {})
        self._on_data_change = on_data_change
        self._set_status_cb = set_status_cb

        self.chart_data = chart_data
        self.transposed = bool(getattr(chart_data, "transposed", False))
        self.grid = project_grid(chart_data, self.config["DEFAULT_COLUMN_WIDTH"])
        self.history = EditHistory(self.config["HISTORY_MAX_DEPTH"])
        self.selection = SelectionState()

    # ---------- helpers ----------
    def _set_status(self, msg: str, ttl: float = 2):
        if self._set_status_cb is not None:
            self._set_status_cb(msg, ttl)

    def _sync(self):
        updated = sync_out(self.grid, self.chart_data)
        if updated is None:
            return
        self.chart_data = updated
        if self._on_data_change is not None:
            self._on_data_change(updated)

    @property
    def is_empty(self) -> bool:
        return self.grid.is_empty()

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ---------- lifecycle ----------
    def update_source(self, chart_data):
        """Take a fresh dataset from the host.

        An orientation flip rebuilds the grid and drops history and selection;
        otherwise only the sync target changes and the grid is left alone.
        """
        transposed = bool(getattr(chart_data, "transposed", False))
        self.chart_data = chart_data
        if transposed == self.transposed:
            return
        self.transposed = transposed
        self.grid = project_grid(chart_data, self.config["DEFAULT_COLUMN_WIDTH"])
        self.history.reset()
        self.selection.clear()
        if self.is_empty:
            self._set_status("No data to display", 3)

    # ---------- cell edits ----------
    def handle_cells_changed(self, changes) -> bool:
        if self.chart_data is None:
            return False
        batch = tuple(
            CellChange(c.row_id, c.column_id, c.previous_text, c.new_text)
            for c in changes
            if self.grid.data_row_exists(c.row_id)
            and self.grid.column_index(c.column_id) != -1
        )
        if not batch:
            return False
        apply_batch(self.grid, batch)
        self.history.record(batch)
        self._sync()
        return True

    def undo(self) -> bool:
        if not self.history.undo(self.grid):
            self._set_status("Nothing to undo", 2)
            return False
        remaining = self.history.undo_depth
        self._set_status(f"Undone ({remaining} more)" if remaining else "Undone", 2)
        self._sync()
        return True

    def redo(self) -> bool:
        if not self.history.redo(self.grid):
            self._set_status("Nothing to redo", 2)
            return False
        remaining = self.history.redo_depth
        self._set_status(f"Redone ({remaining} more)" if remaining else "Redone", 2)
        self._sync()
        return True

    # ---------- structure ----------
    def handle_column_resized(self, column_id, width) -> bool:
        return structural_ops.resize_column(self.grid, column_id, width)

    def handle_columns_reordered(self, target_column_id, column_ids) -> bool:
        return structural_ops.reorder_columns(self.grid, target_column_id, column_ids)

    def handle_rows_reordered(self, target_row_id, row_ids) -> bool:
        return structural_ops.reorder_rows(self.grid, target_row_id, row_ids)

    # ---------- selection / delete ----------
    def handle_row_selection_changed(self, row_ids):
        self.selection.set_rows(row_ids)

    def handle_column_selection_changed(self, column_ids):
        self.selection.set_columns(column_ids)

    def delete_selected(self) -> bool:
        deleted = False
        if self.selection.column_ids:
            removed = structural_ops.delete_columns(self.grid, self.selection.column_ids)
            self.selection.clear_columns()
            self._set_status(f"Deleted {removed} column{'s' if removed != 1 else ''}", 2)
            self._sync()
            deleted = True
        if self.selection.row_ids:
            removed = structural_ops.delete_rows(self.grid, self.selection.row_ids)
            self.selection.clear_rows()
            self._set_status(f"Deleted {removed} row{'s' if removed != 1 else ''}", 2)
            self._sync()
            deleted = True
        return deleted

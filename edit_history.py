from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class CellChange:
    row_id: str
    column_id: str
    previous_text: str
    new_text: str


EditBatch = Tuple[CellChange, ...]


def apply_batch(grid, batch, use_previous: bool = False) -> int:
    """Write each change into the grid, looking rows and columns up by id.

    Changes whose row or column no longer exists are skipped. Restoring runs
    the batch back to front so repeated writes to one cell unwind correctly.
    Returns the number of cells written.
    """
    applied = 0
    changes = reversed(batch) if use_previous else batch
    for change in changes:
        text = change.previous_text if use_previous else change.new_text
        if grid.set_cell_text(change.row_id, change.column_id, text):
            applied += 1
    return applied


class EditHistory:
    """Linear undo/redo over batches of cell changes."""

    def __init__(self, max_depth: int = 0):
        self.max_depth = max(0, int(max_depth or 0))
        self.batches: List[EditBatch] = []
        self.cursor = -1

    def __repr__(self):
        return f"EditHistory({len(self.batches)} batches, cursor={self.cursor})"

    # ---------- state ----------
    @property
    def can_undo(self) -> bool:
        return self.cursor >= 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.batches) - 1

    @property
    def undo_depth(self) -> int:
        return self.cursor + 1

    @property
    def redo_depth(self) -> int:
        return len(self.batches) - 1 - self.cursor

    def reset(self):
        self.batches = []
        self.cursor = -1

    # ---------- stack ----------
    def record(self, batch):
        batch = tuple(batch)
        if not batch:
            return
        self.batches = self.batches[: self.cursor + 1]
        self.batches.append(batch)
        if self.max_depth and len(self.batches) > self.max_depth:
            self.batches.pop(0)
        self.cursor = len(self.batches) - 1

    def undo(self, grid) -> bool:
        if not self.can_undo:
            return False
        apply_batch(grid, self.batches[self.cursor], use_previous=True)
        self.cursor -= 1
        return True

    def redo(self, grid) -> bool:
        if not self.can_redo:
            return False
        self.cursor += 1
        apply_batch(grid, self.batches[self.cursor])
        return True

from cell_coercion import value_to_text
from grid_model import (
    CELL_HEADER,
    CELL_TEXT,
    HEADER_ROW_ID,
    Cell,
    ColumnDescriptor,
    RowDescriptor,
    TableGrid,
)

DEFAULT_COLUMN_WIDTH = 150
AUTO_WIDTH = "auto"


def record_row_id(record, idx: int, taken=()) -> str:
    """Record id, else row-<idx>; never the header id and never one already taken."""
    record_id = record.get("id") if isinstance(record, dict) else None
    if record_id is None or value_to_text(record_id) == "":
        row_id = f"row-{idx}"
    else:
        row_id = str(record_id)
    if row_id == HEADER_ROW_ID:
        row_id = f"record-{row_id}"

    base, n = row_id, 1
    while row_id in taken:
        row_id = f"{base}~{n}"
        n += 1
    return row_id


def project_grid(chart_data, default_width: int = DEFAULT_COLUMN_WIDTH) -> TableGrid:
    """Build the header row plus one text row per record, in declared field order."""
    if chart_data is None or not chart_data.fields:
        return TableGrid()

    columns = [
        ColumnDescriptor(
            id=spec.field,
            display_name=spec.label,
            width=AUTO_WIDTH if spec.auto_size else default_width,
        )
        for spec in chart_data.fields
    ]
    header = RowDescriptor(
        id=HEADER_ROW_ID,
        cells=[Cell(CELL_HEADER, spec.label) for spec in chart_data.fields],
        reorderable=False,
    )

    rows = [header]
    taken = set()
    for idx, record in enumerate(chart_data.records):
        cells = [
            Cell(CELL_TEXT, value_to_text(record.get(spec.field)))
            for spec in chart_data.fields
        ]
        row_id = record_row_id(record, idx, taken)
        taken.add(row_id)
        rows.append(RowDescriptor(id=row_id, cells=cells))
    return TableGrid(columns, rows)

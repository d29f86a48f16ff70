import os

import pandas as pd

from chart_data import ChartData
from default_chart_initializer import DefaultChartInitializer

SUPPORTED_EXTENSIONS = {".csv", ".parquet", ".xlsx"}


class UnsupportedFileTypeError(ValueError):
    pass


class FileTypeHandler:
    """Loads and saves chart data as csv, parquet or xlsx through pandas."""

    def __init__(self, path: str, id_field: str | None = None):
        self.path = path
        self.id_field = id_field
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(
                f"Unsupported file type '{self.ext}' (use .csv, .parquet, or .xlsx)"
            )

    def load_or_create(self) -> ChartData:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return self._default_chart()

        if self.ext == ".csv":
            try:
                df = pd.read_csv(self.path)
            except pd.errors.EmptyDataError:
                return self._default_chart()
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            df = pd.read_parquet(self.path)
        else:
            self._ensure_excel_engine()
            df = pd.read_excel(self.path)

        if df.shape[1] == 0:
            return self._default_chart()
        return ChartData.from_frame(df, id_field=self.id_field)

    def save(self, chart_data: ChartData) -> None:
        df = chart_data.to_frame()
        if self.ext == ".csv":
            df.to_csv(self.path, index=False)
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            df.to_parquet(self.path)
        else:
            self._ensure_excel_engine()
            df.to_excel(self.path, index=False)

    def _default_chart(self) -> ChartData:
        return DefaultChartInitializer().create()

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401
        except ImportError as exc:
            raise UnsupportedFileTypeError(
                "Parquet support requires pyarrow. Install via: pip install pyarrow"
            ) from exc

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401
        except ImportError as exc:
            raise UnsupportedFileTypeError(
                "XLSX support requires openpyxl. Install via: pip install openpyxl"
            ) from exc

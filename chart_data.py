from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd


@dataclass
class FieldSpec:
    field: str
    header_name: Optional[str] = None
    auto_size: bool = False

    @property
    def label(self) -> str:
        return self.header_name or self.field


@dataclass
class ChartData:
    """Canonical field-keyed dataset: ordered fields plus ordered records.

    Anything besides the record list (fields, orientation, metadata) is
    carried through sync untouched.
    """

    fields: List[FieldSpec] = field(default_factory=list)
    records: List[Dict[str, Any]] = field(default_factory=list)
    transposed: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def field_names(self) -> List[str]:
        return [spec.field for spec in self.fields]

    @classmethod
    def from_frame(cls, df: pd.DataFrame, id_field=None, transposed=False, metadata=None):
        fields = [FieldSpec(str(col)) for col in df.columns]
        records = []
        for raw in df.to_dict(orient="records"):
            record = {}
            for key, value in raw.items():
                if isinstance(value, np.generic):
                    value = value.item()
                if not isinstance(value, (list, dict)) and pd.isna(value):
                    value = None
                record[str(key)] = value
            if id_field is not None and id_field in record:
                record["id"] = record[id_field]
            records.append(record)
        return cls(
            fields=fields,
            records=records,
            transposed=transposed,
            metadata=dict(metadata or {}),
        )

    def to_frame(self) -> pd.DataFrame:
        columns = self.field_names
        rows = [[record.get(name) for name in columns] for record in self.records]
        return pd.DataFrame(rows, columns=columns)

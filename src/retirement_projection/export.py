"""
CSV export of projection rows.
"""

import io
from typing import List, Sequence

import numpy as np
import pandas as pd

from .config import CSV_COLUMNS
from .models import DataRow

INT_COLUMNS = ["year", "age"]


def _plain_decimal(value: float) -> str:
    """Shortest round-trip digits, never in exponent notation."""
    return np.format_float_positional(value, trim="-")


def rows_to_frame(rows: Sequence[DataRow]) -> pd.DataFrame:
    """Rows as a DataFrame with the export column order."""
    records = [row.model_dump(by_alias=True) for row in rows]
    return pd.DataFrame.from_records(records, columns=CSV_COLUMNS)


def rows_to_csv(rows: Sequence[DataRow]) -> str:
    """
    Serialize rows as CSV: header line then one line per row.

    Numbers are written as plain decimals (shortest digits that round-trip,
    no exponent), without currency formatting.
    """
    frame = rows_to_frame(rows)
    return frame.to_csv(index=False, lineterminator="\n", float_format=_plain_decimal)


def rows_from_csv(text: str) -> List[DataRow]:
    """Parse an exported CSV back into rows."""
    frame = pd.read_csv(io.StringIO(text), float_precision="round_trip")
    missing = [c for c in CSV_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"CSV is missing columns: {', '.join(missing)}")
    frame = frame.astype({c: "int64" for c in INT_COLUMNS})
    frame = frame.astype({c: "float64" for c in CSV_COLUMNS if c not in INT_COLUMNS})
    return [DataRow.model_validate(record) for record in frame.to_dict(orient="records")]

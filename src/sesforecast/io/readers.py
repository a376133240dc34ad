"""src/sesforecast/io/readers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path, dtype=dtype)


def read_series(path: Path, column: str | None = None) -> np.ndarray:
    """
    Read one column of observations from a CSV file, in file order.

    column: name of the value column. When omitted, the first column with at
    least one numeric value is used. Cells that do not parse as numbers are
    dropped.
    """
    df = read_csv(path)
    df.columns = [str(c).strip() for c in df.columns]

    if column is not None:
        col = str(column).strip()
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found in {path.name}. Found columns: {list(df.columns)}")
        values = pd.to_numeric(df[col], errors="coerce")
    else:
        values = None
        for c in df.columns:
            candidate = pd.to_numeric(df[c], errors="coerce")
            if candidate.notna().any():
                values = candidate
                break
        if values is None:
            raise KeyError(f"No numeric column found in {path.name}. Found columns: {list(df.columns)}")

    return values.dropna().to_numpy(dtype=float)

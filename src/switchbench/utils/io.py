"""Writers for benchmark timing tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def save_dataframe(df: pd.DataFrame, path: Path) -> None:
    """Write the timings table to ``path`` as CSV without the index column."""

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)

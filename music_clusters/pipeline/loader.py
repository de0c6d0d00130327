"""CSV loading and summary writing."""

import logging
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .config import FEATURE_COLUMNS, LABEL_COLUMN, SUMMARY_FLOAT_FORMAT
from .records import SongRecord

logger = logging.getLogger(__name__)


def load_songs(csv_path: str) -> List[SongRecord]:
    """Load songs from a CSV file with a header row.

    Args:
        csv_path: Path to the input CSV

    Returns:
        Songs in file order

    Raises:
        ValueError: If a required column is missing or a feature value is
            missing, non-numeric or not finite
    """
    logger.info(f"Loading songs from {csv_path}")
    # Read every cell as text; labels such as "00" must survive unchanged
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    required = FEATURE_COLUMNS + [LABEL_COLUMN]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing required columns: {', '.join(missing)}")

    for col in FEATURE_COLUMNS:
        values = pd.to_numeric(df[col], errors='coerce').astype(np.float64)
        bad = ~np.isfinite(values.to_numpy())
        if bad.any():
            # +1 for 1-based data rows (header excluded)
            bad_rows = (np.flatnonzero(bad) + 1).tolist()
            raise ValueError(
                f"{csv_path}: invalid '{col}' value in data rows {bad_rows[:10]}"
            )
        df[col] = values

    songs = [SongRecord.from_row(row) for row in df[required].to_dict('records')]
    logger.info(f"Loaded {len(songs)} songs")
    return songs


def write_summary(summary: pd.DataFrame, output_path: str):
    """Write the cluster summary table as CSV.

    Args:
        summary: Table from build_summary()
        output_path: Destination CSV path
    """
    # Ensure parent directory exists
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    summary.to_csv(output_path, index=False, float_format=SUMMARY_FLOAT_FORMAT)
    logger.info(f"Cluster summary ({len(summary)} clusters) written to {output_path}")

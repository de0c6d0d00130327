"""Feature preparation for clustering pipeline."""

import logging
from typing import Sequence

import numpy as np

from ..config import FEATURE_COLUMNS
from ..records import SongRecord

logger = logging.getLogger(__name__)


def extract_feature_vectors(records: Sequence[SongRecord]) -> np.ndarray:
    """Project songs onto their numeric audio attributes.

    Row i holds the attributes of records[i] in FEATURE_COLUMNS order. Values
    are copied as-is: no scaling or centering is applied.

    Args:
        records: Songs in input order

    Returns:
        Feature matrix of shape (n_songs, 5)
    """
    if len(records) == 0:
        return np.empty((0, len(FEATURE_COLUMNS)), dtype=np.float64)

    features = np.array([song.features() for song in records], dtype=np.float64)
    logger.info(f"Extracted feature matrix: {features.shape}")
    return features

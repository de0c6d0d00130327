#!/usr/bin/env python3
"""Centralized configuration for the music cluster pipeline.

This module provides a single source of truth for all configuration settings
used by the CLI (run_analysis.py) and the pipeline orchestrator.
"""

from typing import Dict, Any, List

# =============================================================================
# FEATURE CONFIGURATION
# =============================================================================

# Numeric audio attributes, in the fixed order used to build feature vectors
FEATURE_COLUMNS: List[str] = [
    "danceability",
    "acousticness",
    "energy",
    "valence",
    "tempo",
]

# Text label carried through the pipeline but never clustered on
LABEL_COLUMN: str = "decade"

# Column header of the summary table (one row per observed cluster)
SUMMARY_COLUMNS: List[str] = [
    "Cluster",
    "Danceability",
    "Acousticness",
    "Energy",
    "Valence",
    "Tempo",
    "Count",
]

# Averages are written with two decimal places
SUMMARY_FLOAT_FORMAT: str = "%.2f"


# =============================================================================
# CLUSTERING CONFIGURATION
# =============================================================================

# Default parameters for the reducer + assigner pair
DEFAULT_CLUSTERING_PARAMS: Dict[str, Any] = {
    "target_dims": 2,
    "n_clusters": 3,
    "reducer": "truncate",
    "assigner": "sum-modulo",
}

# Reducer / assigner variants selectable from the CLI
REDUCER_CHOICES: List[str] = ["truncate", "pca"]
ASSIGNER_CHOICES: List[str] = ["sum-modulo", "k-means"]


# =============================================================================
# PATHS
# =============================================================================

DEFAULT_PATHS: Dict[str, str] = {
    "input": "top1000_songs.csv",
    "output": "music_clusters.csv",
    "log_dir": "logging",
}

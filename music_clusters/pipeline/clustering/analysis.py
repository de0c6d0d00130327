"""Cluster analysis functions."""

import logging
from typing import Dict, Sequence

import numpy as np
import pandas as pd

from ..config import SUMMARY_COLUMNS
from ..records import ClusterStats, SongRecord

logger = logging.getLogger(__name__)


def aggregate_clusters(
    records: Sequence[SongRecord],
    cluster_labels: np.ndarray
) -> Dict[int, ClusterStats]:
    """Fold every song into the statistics of its assigned cluster.

    Args:
        records: Songs in input order
        cluster_labels: Cluster id for each song, paired by position

    Returns:
        Dict mapping cluster id to its ClusterStats (only observed ids)
    """
    if len(records) != len(cluster_labels):
        raise ValueError(
            f"Got {len(records)} songs but {len(cluster_labels)} cluster labels"
        )

    cluster_stats: Dict[int, ClusterStats] = {}
    for song, label in zip(records, cluster_labels):
        cluster_id = int(label)
        stats = cluster_stats.get(cluster_id)
        if stats is None:
            stats = cluster_stats[cluster_id] = ClusterStats(cluster_id)
        stats.update(song)

    return cluster_stats


def analyze_cluster(stats: ClusterStats, n_total: int) -> Dict:
    """Summarize a single cluster.

    Args:
        stats: Accumulated statistics for the cluster
        n_total: Number of songs across all clusters

    Returns:
        Dictionary with cluster statistics
    """
    danceability, acousticness, energy, valence, tempo = stats.averages()
    return {
        'n_songs': stats.count,
        'percentage': stats.count / n_total * 100 if n_total > 0 else 0.0,
        'avg_danceability': danceability,
        'avg_acousticness': acousticness,
        'avg_energy': energy,
        'avg_valence': valence,
        'avg_tempo': tempo,
    }


def build_summary(cluster_stats: Dict[int, ClusterStats]) -> pd.DataFrame:
    """Build the per-cluster summary table, sorted by cluster id."""
    rows = []
    for cluster_id in sorted(cluster_stats):
        stats = cluster_stats[cluster_id]
        rows.append([stats.cluster, *stats.averages(), stats.count])

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return summary.astype({'Cluster': np.int64, 'Count': np.int64})

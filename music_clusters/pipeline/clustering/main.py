"""Main clustering pipeline orchestrator."""

import logging
from typing import Dict, Sequence

from sklearn.metrics import silhouette_score

from ..records import SongRecord
from .features import extract_feature_vectors
from .reduction import get_reducer
from .algorithms import get_assigner
from .analysis import aggregate_clusters, analyze_cluster, build_summary

logger = logging.getLogger(__name__)


def run_clustering_pipeline(
    records: Sequence[SongRecord],
    target_dims: int = 2,
    n_clusters: int = 3,
    reducer: str = 'truncate',
    assigner: str = 'sum-modulo'
) -> Dict:
    """Main clustering pipeline.

    Runs, in order:
    1. Feature extraction (songs -> 5-dim vectors)
    2. Dimensionality reduction (5 dims -> target_dims)
    3. Cluster assignment (one id per song)
    4. Per-cluster aggregation and summary

    Args:
        records: Songs in input order
        target_dims: Width of the reduced vectors
        n_clusters: Number of clusters to assign into
        reducer: 'truncate' or 'pca'
        assigner: 'sum-modulo' or 'k-means'

    Returns:
        Dict with features, labels, cluster stats, summary table, etc.
    """
    # Resolve both stages up front so bad configuration fails before any work
    dim_reducer = get_reducer(reducer, target_dims)
    cluster_assigner = get_assigner(assigner, n_clusters)

    logger.info(f"Running clustering on {len(records)} songs")
    logger.info(f"Reducer: {reducer} (target_dims={target_dims})")
    logger.info(f"Assigner: {assigner} (n_clusters={n_clusters})")

    # Step 1: Feature vectors
    features = extract_feature_vectors(records)

    # Step 2: Reduce
    reduced_features = dim_reducer.transform(features)
    logger.info(f"Reduced features for clustering: {reduced_features.shape}")

    # Step 3: Assign clusters
    cluster_labels = cluster_assigner.assign(reduced_features)

    # Step 4: Aggregate
    cluster_stats = aggregate_clusters(records, cluster_labels)
    summary = build_summary(cluster_stats)

    n_observed = len(cluster_stats)
    logger.info(f"Found {n_observed} clusters")

    for cluster_id in sorted(cluster_stats):
        info = analyze_cluster(cluster_stats[cluster_id], len(records))
        logger.info(
            f"Cluster {cluster_id}: {info['n_songs']} songs ({info['percentage']:.1f}%), "
            f"avg tempo {info['avg_tempo']:.2f}"
        )

    # Silhouette is only defined for 2..n-1 distinct labels
    if 1 < n_observed < len(records) and reduced_features.shape[1] > 0:
        sil_score = silhouette_score(reduced_features, cluster_labels)
    else:
        sil_score = 0.0

    logger.info(f"Silhouette score (on reduced features): {sil_score:.3f}")

    return {
        'features': features,
        'reduced_features': reduced_features,
        'cluster_labels': cluster_labels,
        'cluster_stats': cluster_stats,
        'summary': summary,
        'n_clusters': n_observed,
        'silhouette_score': float(sil_score),
    }

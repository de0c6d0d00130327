"""Clustering Pipeline.

Re-exports the stage functions and variants.
"""

from .main import run_clustering_pipeline
from .features import extract_feature_vectors
from .reduction import BaseReducer, TruncationReducer, PCAReducer, get_reducer
from .algorithms import BaseAssigner, SumModuloAssigner, KMeansAssigner, get_assigner
from .analysis import aggregate_clusters, analyze_cluster, build_summary

__all__ = [
    # Main pipeline
    "run_clustering_pipeline",
    # Features
    "extract_feature_vectors",
    # Reduction
    "BaseReducer",
    "TruncationReducer",
    "PCAReducer",
    "get_reducer",
    # Assignment
    "BaseAssigner",
    "SumModuloAssigner",
    "KMeansAssigner",
    "get_assigner",
    # Analysis
    "aggregate_clusters",
    "analyze_cluster",
    "build_summary",
]

"""Music Cluster Pipeline

Core modules for loading songs, reducing their audio features, assigning
clusters, and summarizing each cluster.
"""

from .records import SongRecord, ClusterStats
from .loader import load_songs, write_summary
from .clustering import run_clustering_pipeline

__all__ = [
    'SongRecord',
    'ClusterStats',
    'load_songs',
    'write_summary',
    'run_clustering_pipeline',
]

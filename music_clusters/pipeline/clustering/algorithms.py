"""Cluster assignment implementations."""

import logging
from abc import ABC, abstractmethod

import numpy as np
from sklearn.cluster import KMeans

logger = logging.getLogger(__name__)


class BaseAssigner(ABC):
    """Maps each row of a reduced feature matrix to an integer cluster id."""

    def __init__(self, n_clusters: int):
        if n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {n_clusters}")
        self.n_clusters = n_clusters

    @abstractmethod
    def assign(self, features: np.ndarray) -> np.ndarray:
        pass


class SumModuloAssigner(BaseAssigner):
    """Single-pass assignment: trunc(sum of row) mod n_clusters.

    The row sum is truncated toward zero, then reduced with floored modulo,
    so negative sums still land in [0, n_clusters). No centroids are kept.
    """

    def assign(self, features: np.ndarray) -> np.ndarray:
        logger.info(f"Running sum-modulo assignment (n_clusters={self.n_clusters})...")
        if len(features) == 0:
            return np.empty(0, dtype=np.int64)

        # Stay in floating point until the remainder is known; row sums may
        # exceed the int64 range
        totals = np.trunc(features.sum(axis=1))
        remainders = np.mod(np.fmod(totals, self.n_clusters), self.n_clusters)
        return remainders.astype(np.int64)


class KMeansAssigner(BaseAssigner):
    """K-Means clustering on the reduced features."""

    def __init__(self, n_clusters: int, n_init: int = 10, random_state: int = 42):
        super().__init__(n_clusters)
        self.n_init = n_init
        self.random_state = random_state

    def assign(self, features: np.ndarray) -> np.ndarray:
        if len(features) == 0:
            return np.empty(0, dtype=np.int64)

        # Adjust n_clusters if fewer songs than requested clusters
        actual_n_clusters = min(self.n_clusters, len(features))
        if actual_n_clusters < self.n_clusters:
            logger.warning(
                f"Reducing n_clusters from {self.n_clusters} to {actual_n_clusters} "
                f"due to small dataset size"
            )

        logger.info(f"Running K-Means (n_clusters={actual_n_clusters})...")
        clusterer = KMeans(
            n_clusters=actual_n_clusters,
            init='k-means++',
            n_init=self.n_init,
            random_state=self.random_state
        )
        return clusterer.fit_predict(features).astype(np.int64)


def get_assigner(name: str, n_clusters: int) -> BaseAssigner:
    """Get an assigner by name ('sum-modulo' or 'k-means')."""
    if name == 'sum-modulo':
        return SumModuloAssigner(n_clusters)
    elif name == 'k-means':
        return KMeansAssigner(n_clusters)
    else:
        raise ValueError(f"Unknown assigner: {name}")

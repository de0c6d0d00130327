"""Dimensionality reduction stage.

The default TruncationReducer keeps the leading columns of each feature
vector. PCAReducer is a drop-in alternative backed by scikit-learn.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from sklearn.decomposition import PCA
from sklearn.preprocessing import StandardScaler

logger = logging.getLogger(__name__)


class BaseReducer(ABC):
    """Maps an (n, d) feature matrix to an (n, d') matrix, row order preserved."""

    def __init__(self, target_dims: int):
        if target_dims < 0:
            raise ValueError(f"target_dims must be >= 0, got {target_dims}")
        self.target_dims = target_dims

    @abstractmethod
    def transform(self, features: np.ndarray) -> np.ndarray:
        pass


class TruncationReducer(BaseReducer):
    """Keep the first `target_dims` columns of every row.

    No rotation, centering or basis change. Asking for more columns than
    the input has returns every column.
    """

    def transform(self, features: np.ndarray) -> np.ndarray:
        reduced = features[:, :self.target_dims].copy()
        logger.info(f"Truncated features {features.shape} -> {reduced.shape}")
        return reduced


class PCAReducer(BaseReducer):
    """Standardize then project onto the leading principal components."""

    def __init__(self, target_dims: int, random_state: int = 42):
        super().__init__(target_dims)
        self.random_state = random_state

    def transform(self, features: np.ndarray) -> np.ndarray:
        n_components = min(features.shape[0], features.shape[1], self.target_dims)
        if n_components == 0:
            return np.empty((features.shape[0], 0), dtype=np.float64)

        features_norm = StandardScaler().fit_transform(features)

        logger.info(f"Reducing features to {n_components} components via PCA...")
        pca = PCA(n_components=n_components, random_state=self.random_state)
        reduced = pca.fit_transform(features_norm)
        logger.info(f"Explained Variance: {np.sum(pca.explained_variance_ratio_):.2f}")

        return reduced


def get_reducer(name: str, target_dims: int) -> BaseReducer:
    """Get a reducer by name ('truncate' or 'pca')."""
    if name == 'truncate':
        return TruncationReducer(target_dims)
    elif name == 'pca':
        return PCAReducer(target_dims)
    else:
        raise ValueError(f"Unknown reducer: {name}")

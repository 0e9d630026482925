"""
Neighborhood Recall Metrics
===========================

This module implements the k-nearest-neighbor recall of an embedding: for
every point, the fraction of its k nearest neighbors in the original space
that are also among its k nearest neighbors in the embedding.

Neighbors are found with an exact brute-force Euclidean search, so the
result is a deterministic function of (X, Y, k).

Functions
---------
knn_indices
    Indices of the k nearest neighbors of every point.
neighbor_recall
    Per-point recall of the high-dimensional neighborhoods in the embedding.
summarize_recall
    Summary statistics of a recall distribution.

References
----------
.. [1] Pitsianis, N., Iliopoulos, A. S., Floros, D., & Sun, X. (2019).
       Spaceland embedding of sparse stochastic graphs. IEEE HPEC.
"""

from typing import Optional

import numpy as np
import pandas as pd
from sklearn.neighbors import NearestNeighbors

from ..utils import as_2d_array, check_n_neighbors, check_same_n


def knn_indices(data: np.ndarray, k: int, include_self: bool = True,
                n_jobs: Optional[int] = None) -> np.ndarray:
    """
    Compute the exact k nearest neighbors of every point.

    Parameters
    ----------
    data : np.ndarray of shape (n_samples, n_features)
        Points, used both as reference and as query set.
    k : int
        Number of neighbors, in (0, n_samples - 1].
    include_self : bool, default=True
        If True, every point is a candidate of its own search and is usually
        returned first. If False, each point is left out of its own list.
    n_jobs : int, optional
        Number of parallel jobs for the search.

    Returns
    -------
    indices : np.ndarray of shape (n_samples, k)
        Neighbor indices sorted by ascending distance.
    """
    nbrs = NearestNeighbors(n_neighbors=k, algorithm="brute", metric="euclidean", n_jobs=n_jobs)
    nbrs.fit(data)

    if include_self:
        _, indices = nbrs.kneighbors(data)
    else:
        # Without a query set, sklearn skips each sample in its own result
        _, indices = nbrs.kneighbors()

    return indices


def neighbor_recall(X: np.ndarray, Y: np.ndarray, k: int = 10,
                    include_self: bool = True, n_jobs: Optional[int] = None) -> np.ndarray:
    """
    Compute the k-neighbors recall at every point.

    recall(i) = |NN_X(i) ∩ NN_Y(i)| / k

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        High-dimensional data.
    Y : np.ndarray of shape (n_samples, n_components)
        Low-dimensional embedding of the same points.
    k : int, default=10
        Neighborhood size.
    include_self : bool, default=True
        Self-inclusion convention, applied identically in both spaces.
    n_jobs : int, optional
        Number of parallel jobs for the search.

    Returns
    -------
    recall : np.ndarray of shape (n_samples,)
        Values in [0, 1].

    Raises
    ------
    ShapeMismatchError
        If X and Y have a different number of rows.
    InvalidParameterError
        If k is not an integer in (0, n_samples - 1].

    Examples
    --------
    >>> recall = neighbor_recall(X, X_emb, k=10)
    >>> recall.mean()
    """
    X = as_2d_array(X, name="X")
    Y = as_2d_array(Y, name="Y")
    check_same_n(X.shape[0], Y.shape[0], name="Y")
    k = check_n_neighbors(k, X.shape[0])

    idx_high = knn_indices(X, k, include_self=include_self, n_jobs=n_jobs)
    idx_low = knn_indices(Y, k, include_self=include_self, n_jobs=n_jobs)

    # Rows hold distinct indices, so after sorting both lists together every
    # shared neighbor shows up as one pair of equal adjacent entries
    merged = np.sort(np.hstack((idx_high, idx_low)), axis=1)
    hits = (merged[:, 1:] == merged[:, :-1]).sum(axis=1)

    return hits / k


def summarize_recall(recall: np.ndarray) -> pd.Series:
    """
    Summary statistics of a recall distribution.

    Returns
    -------
    pd.Series
        Index: mean, median, std, min, q25, q75, max.
    """
    recall = np.asarray(recall, dtype=float)
    return pd.Series({
        "mean": recall.mean(),
        "median": np.median(recall),
        "std": recall.std(),
        "min": recall.min(),
        "q25": np.quantile(recall, 0.25),
        "q75": np.quantile(recall, 0.75),
        "max": recall.max(),
    })

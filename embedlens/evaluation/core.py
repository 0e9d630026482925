"""
Neighborhood Recall Core
========================

Entry points combining the recall metric with its visualization, and a
scale-space analysis of recall across neighborhood sizes.

Functions
---------
compute_neighbor_recall
    Per-point recall plus its histogram.
recall_profile
    Recall summary statistics for a range of k.
"""

import logging
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..config import RecallConfig, resolve_config
from ..exceptions import InvalidParameterError
from ..utils import as_2d_array, check_n_neighbors, check_same_n
from .metrics import neighbor_recall, summarize_recall

logger = logging.getLogger(__name__)


def compute_neighbor_recall(X: np.ndarray,
                            Y: np.ndarray,
                            k: Optional[int] = None,
                            config: Optional[RecallConfig] = None,
                            **options) -> Tuple[np.ndarray, plt.Figure]:
    """
    Compute the k-neighbors recall at every point and plot its histogram.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        High-dimensional data.
    Y : np.ndarray of shape (n_samples, n_components)
        Embedding of the same points.
    k : int, optional
        Neighborhood size. Overrides ``config.k`` (default 10).
    config : RecallConfig, optional
        Options. Keyword `options` override its fields.

    Returns
    -------
    recall : np.ndarray of shape (n_samples,)
        Values in [0, 1].
    fig : plt.Figure
        Density histogram of `recall`.

    Raises
    ------
    ShapeMismatchError
        If X and Y have different numbers of rows.
    InvalidParameterError
        If k is outside (0, n_samples - 1] or an option is invalid. Raised
        before any neighbor search.

    Examples
    --------
    >>> recall, fig = compute_neighbor_recall(X, X_emb, k=15)
    """
    if isinstance(k, np.integer):
        k = int(k)
    if k is not None:
        options["k"] = k
    cfg = resolve_config(RecallConfig, config, options)

    X = as_2d_array(X, name="X")
    Y = as_2d_array(Y, name="Y")
    check_same_n(X.shape[0], Y.shape[0], name="Y")
    check_n_neighbors(cfg.k, X.shape[0])

    logger.info(f"Computing {cfg.k}-neighbors recall for {X.shape[0]} points "
                f"({X.shape[1]}D -> {Y.shape[1]}D)...")
    recall = neighbor_recall(X, Y, k=cfg.k, include_self=cfg.include_self, n_jobs=cfg.n_jobs)
    logger.info(f"Mean recall: {recall.mean():.3f}")

    from ..viz.recall import plot_recall_histogram
    fig = plot_recall_histogram(recall, config=cfg)

    return recall, fig


def recall_profile(X: np.ndarray,
                   Y: np.ndarray,
                   k_range: Sequence[int] = (5, 10, 20, 50),
                   include_self: bool = True,
                   n_jobs: Optional[int] = None) -> pd.DataFrame:
    """
    Summarize recall over several neighborhood sizes.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        High-dimensional data.
    Y : np.ndarray of shape (n_samples, n_components)
        Embedding.
    k_range : sequence of int, default=(5, 10, 20, 50)
        Neighborhood sizes. Values outside (0, n_samples - 1] are skipped.
    include_self : bool, default=True
        Self-inclusion convention.
    n_jobs : int, optional
        Parallel jobs for the neighbor search.

    Returns
    -------
    pd.DataFrame
        One row per evaluated k with columns k, mean, median, std, min, q25,
        q75, max.

    Raises
    ------
    InvalidParameterError
        If no value of `k_range` is valid.
    """
    X = as_2d_array(X, name="X")
    Y = as_2d_array(Y, name="Y")
    check_same_n(X.shape[0], Y.shape[0], name="Y")
    n_samples = X.shape[0]

    rows = []
    for k in k_range:
        try:
            k = check_n_neighbors(k, n_samples)
        except InvalidParameterError as e:
            logger.warning(f"Skipping k={k}: {e}")
            continue

        recall = neighbor_recall(X, Y, k=k, include_self=include_self, n_jobs=n_jobs)
        rows.append({"k": k, **summarize_recall(recall).to_dict()})

    if not rows:
        raise InvalidParameterError(f"No valid k in {list(k_range)} for {n_samples} points.")

    return pd.DataFrame(rows)

"""
Embedding Visualization
=======================

Scatter plot of a 2D embedding, colored by cluster, with an optional overlay
of graph edges. Intra-cluster edges take the color of their cluster (or one
fixed color), inter-cluster edges share one muted color.

Functions
---------
render_embedding
    Draw the embedding and return the figure.
legend_handles
    Circle markers used in the cluster legend.
"""

import logging
from typing import Any, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.lines import Line2D

from ..config import EmbeddingPlotConfig, resolve_config
from ..utils import as_2d_array
from .edges import batch_edges, default_palette, draw_edge_batches, normalize_labels, unique_labels, validate_adjacency
from .style import set_style

logger = logging.getLogger(__name__)

MAX_LEGEND_COLUMNS = 10


def legend_handles(label_values: np.ndarray, palette: Sequence[Any],
                   marker_size: float = 10.0) -> List[Line2D]:
    """One black-edged circle marker per label, colored from `palette`."""
    return [
        Line2D([0], [0], marker="o", linestyle="", markersize=marker_size,
               markerfacecolor=palette[label], markeredgecolor="black", label=str(label))
        for label in label_values
    ]


def render_embedding(points: np.ndarray,
                     labels: Optional[Sequence[int]] = None,
                     adjacency: Optional[Any] = None,
                     config: Optional[EmbeddingPlotConfig] = None,
                     **options) -> plt.Figure:
    """
    Plot a 2D embedding, optionally with the edges of a graph.

    Parameters
    ----------
    points : np.ndarray of shape (n_samples, 2)
        Embedding coordinates.
    labels : array-like of int, optional
        Cluster membership per point. Need not start at 0 or be contiguous.
        The caller's array is not modified. Default: one cluster.
    adjacency : sparse matrix or np.ndarray, optional
        Symmetric (n_samples, n_samples) adjacency matrix. If given, its edges
        are drawn below the points.
    config : EmbeddingPlotConfig, optional
        Plot options. Keyword `options` override its fields.
    **options
        Any EmbeddingPlotConfig field, e.g. ``cmap``, ``resolution``,
        ``lwd_in``, ``lwd_out``, ``edge_alpha``, ``clr_in``, ``clr_out``,
        ``marker_size``, ``size_label``.

    Returns
    -------
    plt.Figure
        The figure. With more than one cluster it holds a legend axis on top
        of the plot axis.

    Raises
    ------
    InvalidParameterError
        For bad options, non-2D points, or a non-square/asymmetric adjacency.
    ShapeMismatchError
        If labels or adjacency disagree with the number of points.

    Examples
    --------
    >>> fig = render_embedding(Y, labels, adjacency=A, edge_alpha=0.1)
    """
    cfg = resolve_config(EmbeddingPlotConfig, config, options)
    points = as_2d_array(points, name="points", n_cols=2)
    n = points.shape[0]
    labels = normalize_labels(labels, n=n)
    A = validate_adjacency(adjacency, n) if adjacency is not None else None

    label_values = unique_labels(labels)
    palette = default_palette(label_values, cfg.cmap)
    nc = len(label_values)

    logger.info(f"Rendering {n} points in {nc} cluster(s)"
                + (f" with {A.nnz} adjacency entries." if A is not None else "."))

    set_style()
    figsize = (cfg.resolution[0] / cfg.dpi, cfg.resolution[1] / cfg.dpi)
    if nc > 1:
        fig, (ax_legend, ax) = plt.subplots(
            2, 1, figsize=figsize, dpi=cfg.dpi, gridspec_kw={"height_ratios": [1, 9]}
        )
        ax_legend.axis("off")
    else:
        fig, ax = plt.subplots(figsize=figsize, dpi=cfg.dpi)

    batches = batch_edges(points, labels, A, palette, cfg)
    draw_edge_batches(ax, batches)

    ax.scatter(points[:, 0], points[:, 1], c=np.asarray(palette)[labels],
               s=cfg.marker_size ** 2, edgecolors="none", zorder=2)
    ax.set_aspect("equal", adjustable="datalim")

    if cfg.title:
        ax.set_title(cfg.title, fontweight='bold')

    if nc > 1:
        ncol = min(nc, MAX_LEGEND_COLUMNS) if cfg.legend_orientation == "horizontal" else 1
        ax_legend.legend(handles=legend_handles(label_values, palette, cfg.legend_marker_size),
                         loc="center", ncol=ncol, frameon=False, fontsize=cfg.size_label)

    return fig

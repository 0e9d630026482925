"""
Recall Visualization
====================

Functions
---------
plot_recall_histogram
    Density histogram of per-point neighborhood recall.
plot_recall_profile
    Mean recall (with interquartile band) across neighborhood sizes.
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from ..config import RecallConfig, resolve_config
from .style import set_style


def plot_recall_histogram(recall: np.ndarray,
                          config: Optional[RecallConfig] = None,
                          ax: Optional[plt.Axes] = None,
                          **options) -> plt.Figure:
    """
    Plot the distribution of recall values.

    The histogram is normalized as a probability density over [0, 1]; the
    x-axis is fixed to [0, 1] and the y-axis starts at 0 with no upper limit.

    Parameters
    ----------
    recall : np.ndarray of shape (n_samples,)
        Recall values.
    config : RecallConfig, optional
        Uses ``resolution``, ``dpi``, ``bins``, ``color`` and ``title``.
    ax : plt.Axes, optional
        Existing axes to plot on. If None, a new figure is created.

    Returns
    -------
    plt.Figure
    """
    cfg = resolve_config(RecallConfig, config, options)
    set_style()

    if ax is None:
        fig, ax = plt.subplots(figsize=(cfg.resolution[0] / cfg.dpi, cfg.resolution[1] / cfg.dpi), dpi=cfg.dpi)
    else:
        fig = ax.get_figure()

    sns.histplot(x=np.asarray(recall, dtype=float), stat="density", bins=cfg.bins,
                 binrange=(0, 1), color=cfg.color, ax=ax)

    ax.set_xlim(0, 1)
    ax.set_ylim(bottom=0)
    ax.set_xlabel("neighborhood recall")
    ax.set_ylabel("relative frequency")
    if cfg.title:
        ax.set_title(cfg.title, fontweight='bold')

    return fig


def plot_recall_profile(profile: pd.DataFrame,
                        title: str = "Neighborhood Recall vs k",
                        ax: Optional[plt.Axes] = None) -> plt.Figure:
    """
    Plot mean recall against neighborhood size.

    Parameters
    ----------
    profile : pd.DataFrame
        Output of :func:`embedlens.evaluation.recall_profile` (columns
        ``k``, ``mean``, ``q25``, ``q75``).
    title : str
        Plot title.
    ax : plt.Axes, optional
        Existing axes.

    Returns
    -------
    plt.Figure
    """
    set_style()
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.get_figure()

    sns.lineplot(data=profile, x="k", y="mean", marker="o", linewidth=2.5, ax=ax)
    ax.fill_between(profile["k"], profile["q25"], profile["q75"], alpha=0.2)

    ax.set_ylim(0, 1.05)
    ax.set_xlabel("Neighborhood Size (k)", fontweight='bold')
    ax.set_ylabel("Recall", fontweight='bold')
    ax.set_title(title, fontsize=16, fontweight='bold', pad=15)
    ax.grid(True, linestyle='--', alpha=0.3)

    return fig

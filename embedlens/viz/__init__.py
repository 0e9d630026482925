"""
embedlens.viz
-------------
Plotting for embedding diagnostics.

Public API:
- render_embedding: scatter plot of a 2D embedding with an optional edge overlay.
- plot_recall_histogram: density histogram of neighborhood recall values.
- plot_recall_profile: mean recall across neighborhood sizes.
"""
from .edges import EdgeBatch, FixedColor, PaletteLookup, batch_edges
from .embedding import render_embedding
from .recall import plot_recall_histogram, plot_recall_profile

__all__ = [
    "render_embedding",
    "plot_recall_histogram",
    "plot_recall_profile",
    "batch_edges",
    "EdgeBatch",
    "FixedColor",
    "PaletteLookup",
]

"""
Package initializer for the embedlens package.
"""

from .config import EmbeddingPlotConfig, RecallConfig, load_config
from .evaluation import compute_neighbor_recall, neighbor_recall, recall_profile
from .exceptions import EmbedLensError, InvalidParameterError, ShapeMismatchError
from .viz import render_embedding

__version__ = "0.1.0"

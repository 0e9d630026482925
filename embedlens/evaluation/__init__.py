from .metrics import knn_indices, neighbor_recall, summarize_recall
from .core import compute_neighbor_recall, recall_profile

__all__ = [
    "knn_indices",
    "neighbor_recall",
    "summarize_recall",
    "compute_neighbor_recall",
    "recall_profile",
]

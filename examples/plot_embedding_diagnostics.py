"""
Embedding Diagnostics: Graph Overlay and Neighborhood Recall
============================================================

This example shows the two diagnostics of ``embedlens`` on a toy problem.

We embed 10-dimensional Gaussian blobs into 2D with PCA, draw the embedding
with its kNN graph on top (edges inside a cluster take the cluster color,
edges across clusters are drawn in grey), and measure how many of each
point's high-dimensional neighbors survive in the embedding.
"""

import matplotlib.pyplot as plt
from sklearn.datasets import make_blobs
from sklearn.decomposition import PCA
from sklearn.neighbors import kneighbors_graph

from embedlens import compute_neighbor_recall, recall_profile, render_embedding
from embedlens.viz import plot_recall_profile

###############################################################################
# 1. Data and Embedding
# ---------------------
# Four clusters in 10D, projected to 2D.

X, labels = make_blobs(n_samples=600, n_features=10, centers=4, cluster_std=2.0, random_state=0)
Y = PCA(n_components=2).fit_transform(X)

###############################################################################
# 2. Embedding with Graph Overlay
# -------------------------------
# The kNN graph is built in the original space and symmetrized.

A = kneighbors_graph(X, n_neighbors=8, include_self=False)
A = ((A + A.T) > 0).astype(float)

fig = render_embedding(Y, labels, adjacency=A, edge_alpha=0.3, marker_size=5)
plt.show()

###############################################################################
# 3. Neighborhood Recall
# ----------------------
# A recall of 1 means all 10 nearest neighbors of a point in 10D are also its
# 10 nearest neighbors in the embedding.

recall, fig = compute_neighbor_recall(X, Y, k=10)
print(f"Mean recall: {recall.mean():.3f}")
plt.show()

###############################################################################
# 4. Recall Across Scales
# -----------------------
# Small neighborhoods are the hardest to preserve.

profile = recall_profile(X, Y, k_range=[5, 10, 20, 50, 100])
print(profile)
plot_recall_profile(profile)
plt.show()

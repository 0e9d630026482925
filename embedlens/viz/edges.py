"""
Edge Batching
=============

Partition the edges of a graph over an embedding into per-cluster
(intra-cluster) groups and one inter-cluster group, and flatten each group
into a single NaN-separated polyline so that it is drawn with one call.

Functions
---------
normalize_labels
    Shift labels so that they start at 0 (returns a copy).
unique_labels
    Sorted distinct labels.
default_palette
    Palette sized to the label range.
validate_adjacency
    Check an adjacency matrix and convert it to CSR.
extract_edges
    Undirected edge list from the strictly lower triangle.
select_intra_edges / select_inter_edges
    Edge subsets by label predicate.
flatten_segments
    [A, B, NaN] interleaved coordinates for m edges.
batch_edges
    Build every non-empty edge group, ready to draw.
draw_edge_batches
    Issue one line draw call per group.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import matplotlib.colors as mcolors
import numpy as np
import scipy.sparse as sp
import seaborn as sns

from ..config import EmbeddingPlotConfig
from ..exceptions import InvalidParameterError, ShapeMismatchError

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]


def normalize_labels(labels: Optional[Any], n: Optional[int] = None) -> np.ndarray:
    """
    Return a copy of `labels` shifted so that its minimum is 0.

    Parameters
    ----------
    labels : array-like of int, optional
        Cluster membership per point. If None, all `n` points share label 0.
    n : int, optional
        Expected number of points.

    Returns
    -------
    np.ndarray of shape (n,)
        Integer labels starting at 0.
    """
    if labels is None:
        if n is None:
            raise InvalidParameterError("Either labels or n must be given.")
        return np.zeros(n, dtype=int)

    arr = np.asarray(labels)
    if arr.ndim != 1:
        raise InvalidParameterError(f"labels must be 1D, got shape {arr.shape}.")
    if n is not None and arr.shape[0] != n:
        raise ShapeMismatchError(f"labels has {arr.shape[0]} entries but there are {n} points.")
    if arr.size == 0:
        return arr.astype(int)
    if arr.dtype.kind not in ("i", "u", "b"):
        if arr.dtype.kind != "f" or not np.all(np.mod(arr, 1) == 0):
            raise InvalidParameterError("labels must be integers.")

    arr = arr.astype(int)
    return arr - arr.min()


def unique_labels(labels: np.ndarray) -> np.ndarray:
    """Distinct labels in ascending order."""
    return np.unique(labels)


def default_palette(label_values: np.ndarray,
                    cmap: Optional[Union[str, Sequence[Any]]] = None) -> List[Tuple[float, float, float]]:
    """
    Palette with one color per value of the label range.

    The palette has ``max(label_values) + 1`` entries so that a normalized
    label indexes its own color, even when some labels are absent.

    Parameters
    ----------
    label_values : np.ndarray
        Sorted distinct normalized labels.
    cmap : str or list of colors, optional
        Seaborn palette / matplotlib colormap name, or explicit colors.
        If None, "tab10" is used up to 10 colors and "husl" beyond.
    """
    n_colors = int(label_values.max()) + 1 if len(label_values) else 1
    if cmap is None:
        cmap = "tab10" if n_colors <= 10 else "husl"
    try:
        return list(sns.color_palette(cmap, n_colors))
    except ValueError as e:
        raise InvalidParameterError(f"Invalid colormap {cmap!r}: {e}") from e


def validate_adjacency(adjacency: Any, n: int) -> sp.csr_matrix:
    """
    Check that `adjacency` is a symmetric n x n matrix and return it as CSR.

    Raises
    ------
    InvalidParameterError
        If the matrix is not square or not symmetric.
    ShapeMismatchError
        If it is square but not n x n.
    """
    try:
        A = sp.csr_matrix(adjacency)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"adjacency must be a 2D numeric matrix: {e}") from e
    if A.shape[0] != A.shape[1]:
        raise InvalidParameterError(f"adjacency must be square, got shape {A.shape}.")
    if A.shape[0] != n:
        raise ShapeMismatchError(f"adjacency is {A.shape[0]} x {A.shape[1]} but there are {n} points.")
    if (A != A.T).nnz > 0:
        raise InvalidParameterError("adjacency must be symmetric.")
    return A


def extract_edges(adjacency: sp.spmatrix) -> np.ndarray:
    """
    Undirected edges from the strictly lower triangle of `adjacency`.

    Returns
    -------
    edges : np.ndarray of shape (m, 2)
        Rows (i, j) with i > j, in lexicographic order. Self-loops and
        explicit zeros are dropped.
    """
    i, j, _ = sp.find(sp.tril(adjacency, k=-1))
    order = np.lexsort((j, i))
    return np.column_stack((i[order], j[order])).astype(int)


def select_intra_edges(edges: np.ndarray, labels: np.ndarray, label: int) -> np.ndarray:
    """Edges whose two endpoints both carry `label`."""
    li, lj = labels[edges[:, 0]], labels[edges[:, 1]]
    return edges[(li == label) & (lj == label)]


def select_inter_edges(edges: np.ndarray, labels: np.ndarray) -> np.ndarray:
    """Edges whose endpoints carry different labels."""
    return edges[labels[edges[:, 0]] != labels[edges[:, 1]]]


def flatten_segments(points: np.ndarray, edges: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Interleave edge endpoints with NaN gaps.

    For m edges, x and y have length 3m: [x_a, x_b, nan, x_a, x_b, nan, ...].
    A line primitive breaks the polyline at every NaN, so the m segments are
    drawn in one call.
    """
    m = edges.shape[0]
    x = np.full((m, 3), np.nan)
    y = np.full((m, 3), np.nan)
    x[:, 0], x[:, 1] = points[edges[:, 0], 0], points[edges[:, 1], 0]
    y[:, 0], y[:, 1] = points[edges[:, 0], 1], points[edges[:, 1], 1]
    return x.ravel(), y.ravel()


@dataclass(frozen=True)
class FixedColor:
    """One caller-supplied color, used as given."""
    value: Any

    def resolve(self) -> RGBA:
        return mcolors.to_rgba(self.value)


@dataclass(frozen=True)
class PaletteLookup:
    """Color of palette entry `key`, with the edge alpha applied."""
    palette: Sequence[Any]
    key: int
    alpha: float = 1.0

    def resolve(self) -> RGBA:
        return mcolors.to_rgba(self.palette[self.key], alpha=self.alpha)


EdgeColor = Union[FixedColor, PaletteLookup]


def intra_edge_color(label: int, palette: Sequence[Any],
                     fixed: Optional[Any] = None, alpha: float = 1.0) -> EdgeColor:
    """Pick the color source of the intra-cluster group of `label`."""
    if fixed is not None:
        return FixedColor(fixed)
    return PaletteLookup(palette, label, alpha)


@dataclass
class EdgeBatch:
    """
    One group of edges, ready to draw.

    Attributes
    ----------
    kind : str
        "intra" or "inter".
    label : int or None
        Cluster of an intra group; None for the inter group.
    edges : np.ndarray of shape (m, 2)
        Endpoint indices.
    x, y : np.ndarray of shape (3m,)
        NaN-separated coordinates.
    color : tuple
        RGBA color.
    linewidth : float
    """
    kind: str
    label: Optional[int]
    edges: np.ndarray
    x: np.ndarray
    y: np.ndarray
    color: RGBA
    linewidth: float

    @property
    def n_edges(self) -> int:
        return self.edges.shape[0]


def batch_edges(points: np.ndarray,
                labels: np.ndarray,
                adjacency: Optional[sp.spmatrix],
                palette: Sequence[Any],
                config: Optional[EmbeddingPlotConfig] = None) -> List[EdgeBatch]:
    """
    Partition the edges of `adjacency` into drawable groups.

    Groups are emitted in draw order: one intra-cluster group per label in
    ascending label order, then the inter-cluster group. Empty groups are
    left out.

    Parameters
    ----------
    points : np.ndarray of shape (n, 2)
        Embedding coordinates.
    labels : np.ndarray of shape (n,)
        Normalized labels.
    adjacency : sparse matrix, optional
        Validated symmetric adjacency. None yields no groups.
    palette : sequence of colors
        Palette indexed by normalized label.
    config : EmbeddingPlotConfig, optional
        Line widths, alpha and override colors.

    Returns
    -------
    list of EdgeBatch
    """
    if adjacency is None:
        return []
    config = config or EmbeddingPlotConfig()

    edges = extract_edges(adjacency)
    batches = []

    for label in unique_labels(labels):
        idx = select_intra_edges(edges, labels, label)
        if idx.shape[0] == 0:
            logger.debug(f"No intra-cluster edges for label {label}, skipping.")
            continue
        color = intra_edge_color(int(label), palette, config.clr_in, config.edge_alpha)
        x, y = flatten_segments(points, idx)
        batches.append(EdgeBatch("intra", int(label), idx, x, y, color.resolve(), config.lwd_in))

    idx = select_inter_edges(edges, labels)
    if idx.shape[0] > 0:
        x, y = flatten_segments(points, idx)
        batches.append(EdgeBatch("inter", None, idx, x, y, FixedColor(config.clr_out).resolve(), config.lwd_out))

    logger.debug(f"Batched {edges.shape[0]} edges into {len(batches)} groups.")
    return batches


def draw_edge_batches(ax, batches: List[EdgeBatch]) -> int:
    """
    Draw each batch as one polyline on `ax`.

    Returns
    -------
    int
        Number of draw calls issued.
    """
    for batch in batches:
        ax.plot(batch.x, batch.y, color=batch.color, linewidth=batch.linewidth, zorder=1)
    return len(batches)

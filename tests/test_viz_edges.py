"""
Tests for edge selection and geometry batching.
"""

from unittest.mock import MagicMock

import matplotlib.colors as mcolors
import numpy as np
import pytest
import scipy.sparse as sp

from embedlens.config import EmbeddingPlotConfig
from embedlens.exceptions import InvalidParameterError, ShapeMismatchError
from embedlens.viz.edges import (
    FixedColor,
    PaletteLookup,
    batch_edges,
    default_palette,
    draw_edge_batches,
    extract_edges,
    flatten_segments,
    intra_edge_color,
    normalize_labels,
    select_inter_edges,
    select_intra_edges,
    unique_labels,
    validate_adjacency,
)


def _adjacency(n, pairs):
    """Symmetric boolean adjacency from 0-indexed pairs."""
    rows = [i for i, j in pairs] + [j for i, j in pairs]
    cols = [j for i, j in pairs] + [i for i, j in pairs]
    return sp.csr_matrix((np.ones(len(rows), dtype=bool), (rows, cols)), shape=(n, n))


@pytest.fixture
def random_graph():
    """Random symmetric graph with 40 nodes and 3 clusters."""
    rng = np.random.default_rng(3)
    n = 40
    dense = rng.random((n, n)) < 0.15
    dense = dense | dense.T
    points = rng.normal(size=(n, 2))
    labels = rng.integers(0, 3, size=n)
    return points, labels, dense


def test_normalize_labels_is_pure():
    labels = np.array([3, 5, 3, 7])
    normalized = normalize_labels(labels, n=4)
    np.testing.assert_array_equal(normalized, [0, 2, 0, 4])
    np.testing.assert_array_equal(labels, [3, 5, 3, 7])


def test_normalize_labels_default():
    np.testing.assert_array_equal(normalize_labels(None, n=3), [0, 0, 0])


def test_normalize_labels_errors():
    with pytest.raises(ShapeMismatchError):
        normalize_labels([0, 1], n=3)
    with pytest.raises(InvalidParameterError):
        normalize_labels([[0, 1]], n=2)
    with pytest.raises(InvalidParameterError, match="integers"):
        normalize_labels([0.5, 1.0], n=2)


def test_unique_labels_sorted():
    np.testing.assert_array_equal(unique_labels(np.array([2, 0, 2, 4])), [0, 2, 4])


def test_default_palette_sized_to_label_range():
    palette = default_palette(np.array([0, 2, 4]))
    assert len(palette) == 5
    assert len(default_palette(np.array([0]))) == 1
    assert len(default_palette(np.arange(15))) == 15


def test_default_palette_custom_colors():
    palette = default_palette(np.array([0, 1]), cmap=["red", "blue"])
    assert mcolors.to_hex(palette[0]) == "#ff0000"
    assert mcolors.to_hex(palette[1]) == "#0000ff"


def test_default_palette_invalid():
    with pytest.raises(InvalidParameterError):
        default_palette(np.array([0, 1]), cmap="no_such_palette")


def test_validate_adjacency():
    A = validate_adjacency(_adjacency(3, [(0, 1)]).toarray(), 3)
    assert sp.issparse(A)

    with pytest.raises(ShapeMismatchError):
        validate_adjacency(_adjacency(3, [(0, 1)]), 4)
    with pytest.raises(InvalidParameterError, match="square"):
        validate_adjacency(np.zeros((3, 4)), 3)
    with pytest.raises(InvalidParameterError, match="symmetric"):
        validate_adjacency(np.array([[0, 1], [0, 0]]), 2)


def test_validate_adjacency_rejects_3d():
    with pytest.raises(InvalidParameterError, match="2D numeric matrix"):
        validate_adjacency(np.zeros((3, 3, 3)), 3)


def test_extract_edges_lower_triangle():
    A = _adjacency(4, [(0, 1), (1, 2), (2, 3)])
    A = A + sp.eye(4, dtype=bool)
    edges = extract_edges(A)
    np.testing.assert_array_equal(edges, [[1, 0], [2, 1], [3, 2]])


def test_extract_edges_drops_explicit_zeros():
    A = sp.csr_matrix(np.array([[0.0, 2.0], [2.0, 0.0]]))
    A.data[:] = 0.0
    assert extract_edges(A).shape == (0, 2)


def test_scenario_cluster_edges():
    """Labels [0,0,1,1] with edges (0,1) intra and (1,2) inter."""
    labels = np.array([0, 0, 1, 1])
    edges = extract_edges(_adjacency(4, [(0, 1), (1, 2)]))

    assert select_intra_edges(edges, labels, 0).shape[0] == 1
    assert select_intra_edges(edges, labels, 1).shape[0] == 0
    assert select_inter_edges(edges, labels).shape[0] == 1

    points = np.arange(8, dtype=float).reshape(4, 2)
    batches = batch_edges(points, labels, _adjacency(4, [(0, 1), (1, 2)]), default_palette(unique_labels(labels)))
    assert [(b.kind, b.label, b.n_edges) for b in batches] == [("intra", 0, 1), ("inter", None, 1)]


def test_flatten_segments():
    points = np.array([[0.0, 10.0], [1.0, 11.0], [2.0, 12.0]])
    edges = np.array([[1, 0], [2, 1]])
    x, y = flatten_segments(points, edges)

    assert x.shape == (6,) and y.shape == (6,)
    np.testing.assert_array_equal(x[[0, 1, 3, 4]], [1.0, 0.0, 2.0, 1.0])
    np.testing.assert_array_equal(y[[0, 1, 3, 4]], [11.0, 10.0, 12.0, 11.0])
    assert np.isnan(x[[2, 5]]).all() and np.isnan(y[[2, 5]]).all()


def test_flatten_segments_empty():
    x, y = flatten_segments(np.zeros((3, 2)), np.empty((0, 2), dtype=int))
    assert x.shape == (0,) and y.shape == (0,)


def test_batches_partition_all_edges(random_graph):
    """Each undirected edge lands in exactly one group."""
    points, labels, dense = random_graph
    expected = {(max(i, j), min(i, j)) for i, j in zip(*np.nonzero(dense)) if i != j}

    batches = batch_edges(points, labels, sp.csr_matrix(dense), default_palette(unique_labels(labels)))
    seen = [tuple(edge) for batch in batches for edge in batch.edges]

    assert sum(b.n_edges for b in batches) == len(expected)
    assert len(seen) == len(set(seen))
    assert set(seen) == expected


def test_batches_are_label_ordered(random_graph):
    points, labels, dense = random_graph
    batches = batch_edges(points, labels, sp.csr_matrix(dense), default_palette(unique_labels(labels)))
    intra = [b.label for b in batches if b.kind == "intra"]
    assert intra == sorted(intra)
    assert batches[-1].kind == "inter"


def test_batch_edges_without_adjacency():
    assert batch_edges(np.zeros((3, 2)), np.zeros(3, dtype=int), None, default_palette(np.array([0]))) == []


def test_empty_group_issues_no_draw_call():
    """A label without internal edges produces no draw call."""
    labels = np.array([0, 0, 1, 1, 2])
    A = _adjacency(5, [(0, 1), (1, 2), (3, 4)])
    batches = batch_edges(np.zeros((5, 2)), labels, A, default_palette(unique_labels(labels)))

    ax = MagicMock()
    n_calls = draw_edge_batches(ax, batches)

    # label 0 intra, inter (1-2 and 3-4); labels 1 and 2 have no internal edges
    assert n_calls == 2
    assert ax.plot.call_count == 2


def test_edge_colors():
    labels = np.array([0, 0, 1, 1])
    palette = default_palette(unique_labels(labels))
    A = _adjacency(4, [(0, 1), (2, 3), (1, 2)])

    cfg = EmbeddingPlotConfig(edge_alpha=0.3, lwd_in=1.5, lwd_out=0.7)
    intra0, intra1, inter = batch_edges(np.zeros((4, 2)), labels, A, palette, cfg)

    assert intra0.color == mcolors.to_rgba(palette[0], alpha=0.3)
    assert intra1.color == mcolors.to_rgba(palette[1], alpha=0.3)
    assert intra0.linewidth == 1.5
    assert inter.color == mcolors.to_rgba("#aabbbbbb")
    assert inter.linewidth == 0.7

    cfg = EmbeddingPlotConfig(clr_in="black", clr_out="red")
    intra0, intra1, inter = batch_edges(np.zeros((4, 2)), labels, A, palette, cfg)
    assert intra0.color == intra1.color == (0.0, 0.0, 0.0, 1.0)
    assert inter.color == (1.0, 0.0, 0.0, 1.0)


def test_intra_edge_color_choice():
    palette = [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    assert intra_edge_color(1, palette, fixed="blue") == FixedColor("blue")

    lookup = intra_edge_color(1, palette, alpha=0.5)
    assert isinstance(lookup, PaletteLookup)
    assert lookup.resolve() == (0.0, 1.0, 0.0, 0.5)

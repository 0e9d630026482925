from unittest.mock import MagicMock

import numpy as np
import pytest


@pytest.fixture(scope="session", autouse=True)
def mock_visualizations():
    """
    Prevent plots from showing up during tests.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    plt.show = MagicMock()


@pytest.fixture(autouse=True)
def close_figures():
    """Close every figure a test created."""
    yield
    import matplotlib.pyplot as plt

    plt.close("all")


@pytest.fixture
def unit_square():
    """Four points at the corners of the unit square."""
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def blobs():
    """High-dimensional blobs and a noisy 2D projection of them."""
    from sklearn.datasets import make_blobs

    X, y = make_blobs(n_samples=60, n_features=8, centers=3, random_state=42)
    rng = np.random.default_rng(0)
    Y = X[:, :2] + rng.normal(0, 0.5, (60, 2))
    return X, Y, y

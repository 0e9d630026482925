"""
Input validation helpers shared by the evaluation and viz modules.
"""

from typing import Any, Optional

import numpy as np

from .exceptions import InvalidParameterError, ShapeMismatchError


def as_2d_array(data: Any, name: str = "data", n_cols: Optional[int] = None) -> np.ndarray:
    """
    Convert `data` to a float array of shape (n_samples, n_features).

    Raises
    ------
    InvalidParameterError
        If the array is not 2D, is empty, or does not have `n_cols` columns.
    """
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 2:
        raise InvalidParameterError(f"{name} must be 2D (n_samples, n_features), got shape {arr.shape}.")
    if arr.shape[0] == 0:
        raise InvalidParameterError(f"{name} must contain at least one point.")
    if n_cols is not None and arr.shape[1] != n_cols:
        raise InvalidParameterError(f"{name} must have {n_cols} columns, got {arr.shape[1]}.")
    return arr


def check_same_n(n_expected: int, n_actual: int, name: str):
    """Raise ShapeMismatchError when `name` does not have `n_expected` points."""
    if n_actual != n_expected:
        raise ShapeMismatchError(
            f"{name} has {n_actual} points but {n_expected} were expected."
        )


def check_n_neighbors(k: Any, n_samples: int) -> int:
    """
    Check that `k` is an integer in (0, n_samples - 1].

    Returns
    -------
    int
        `k` as a plain int.
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidParameterError(f"k must be an integer, got {type(k).__name__}.")
    if k <= 0 or k >= n_samples:
        raise InvalidParameterError(
            f"k must be in (0, {n_samples - 1}] for {n_samples} points, got {k}."
        )
    return int(k)

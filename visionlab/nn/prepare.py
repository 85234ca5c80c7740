"""Synthetic clustered data for classifier experiments."""

from __future__ import annotations

import numpy as np

_MEANS = np.array([[1.0, 1.0], [1.0, 6.0], [6.0, 1.0], [6.0, 6.0]])
_COVARIANCE = np.eye(2)


def prepare(
    n: int,
    groups: int,
    d: int = 2,
    rng: np.random.Generator | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Draw ``n`` shuffled points from ``groups`` Gaussian clusters.

    Returns the points, shape (n, d), and their one-hot labels, shape
    (n, groups). Clusters are centred at (1, 1), (1, 6), (6, 1), (6, 6)
    with identity covariance.
    """
    if not 1 <= groups <= len(_MEANS):
        raise ValueError(f"groups must be between 1 and {len(_MEANS)}")
    if d != _MEANS.shape[1]:
        raise ValueError(f"d must be {_MEANS.shape[1]}")
    if n <= 0 or n % groups != 0:
        raise ValueError("n must be a positive multiple of groups")
    rng = rng if rng is not None else np.random.default_rng()

    per_group = n // groups
    points = np.vstack(
        [rng.multivariate_normal(mean, _COVARIANCE, size=per_group) for mean in _MEANS[:groups]]
    )
    labels = np.repeat(np.arange(groups), per_group)

    order = rng.permutation(n)
    x = points[order]
    y = np.zeros((n, groups))
    y[np.arange(n), labels[order]] = 1.0
    return x, y
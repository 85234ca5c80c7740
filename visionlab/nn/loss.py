"""Loss functions for training networks."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class Loss(ABC):
    """A loss function and its derivative with respect to the predictions."""

    @abstractmethod
    def __call__(self, y: np.ndarray, a: np.ndarray) -> float:
        """Return the loss of predictions ``a`` against targets ``y``."""

    @abstractmethod
    def derivative(self, y: np.ndarray, a: np.ndarray) -> np.ndarray:
        """Return the gradient of the loss with respect to ``a``."""


class CrossEntropyLoss(Loss):
    """Categorical cross-entropy, -mean(sum(y * log(a)))."""

    epsilon: float = 1e-15

    def __call__(self, y: np.ndarray, a: np.ndarray) -> float:
        y = np.asarray(y, dtype=float)
        clipped = np.clip(np.asarray(a, dtype=float), self.epsilon, 1.0 - self.epsilon)
        per_row = (y * np.log(clipped)).sum(axis=1)
        return float(-per_row.mean())

    def derivative(self, y: np.ndarray, a: np.ndarray) -> np.ndarray:
        """A - Y; valid only when the final activation is softmax."""
        return np.asarray(a, dtype=float) - np.asarray(y, dtype=float)
"""Element-wise activation functions used by network layers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class Activation(ABC):
    """An activation function together with its derivative."""

    @abstractmethod
    def __call__(self, x: np.ndarray) -> np.ndarray:
        """Apply the activation to ``x``."""

    @abstractmethod
    def derivative(self, x: np.ndarray) -> np.ndarray:
        """Return the derivative of the activation evaluated on ``x``."""


class ReLUActivation(Activation):
    """f(x) = max(0, x)."""

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return np.maximum(np.asarray(x, dtype=float), 0.0)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        """1 where x > 0, else 0."""
        return (np.asarray(x, dtype=float) > 0.0).astype(float)


class SigmoidActivation(Activation):
    """f(x) = 1 / (1 + exp(-x))."""

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))

    def derivative(self, x: np.ndarray) -> np.ndarray:
        """x * (1 - x), which is f'(z) when ``x`` already holds f(z)."""
        arr = np.asarray(x, dtype=float)
        return arr * (1.0 - arr)


class SoftmaxActivation(Activation):
    """Row-wise softmax: exp(x) / sum(exp(x))."""

    def __call__(self, x: np.ndarray) -> np.ndarray:
        arr = np.asarray(x, dtype=float)
        shifted = arr - arr.max(axis=1, keepdims=True)
        exp = np.exp(shifted)
        return exp / exp.sum(axis=1, keepdims=True)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        """Ones: the softmax gradient is folded into the cross-entropy derivative."""
        return np.ones_like(np.asarray(x, dtype=float))
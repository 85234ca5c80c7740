"""Fully connected layers with a fixed activation."""

from __future__ import annotations

import numpy as np

from visionlab.nn.activation import (
    Activation,
    ReLUActivation,
    SigmoidActivation,
    SoftmaxActivation,
)


class Layer:
    """A dense layer computing ``activation(x @ w + b)``.

    Weights start uniformly in [-1, 1], biases at zero. The pre-activation
    ``z``, the output ``a`` and the gradients ``dw`` and ``db`` are kept for
    backpropagation.
    """

    def __init__(
        self,
        input_dim: int,
        output_dim: int,
        activation: Activation,
        rng: np.random.Generator | None = None,
    ) -> None:
        if input_dim <= 0 or output_dim <= 0:
            raise ValueError("layer dimensions must be positive")
        rng = rng if rng is not None else np.random.default_rng()
        self.input_dim = input_dim
        self.output_dim = output_dim
        self.activation = activation

        self.w = rng.uniform(-1.0, 1.0, size=(input_dim, output_dim))
        self.b = np.zeros((1, output_dim))

        self.z = np.zeros((output_dim, 1))
        self.a = np.zeros((output_dim, 1))

        self.dw = np.zeros((input_dim, output_dim))
        self.db = np.zeros((1, output_dim))

    @property
    def name(self) -> str:
        """Name shown in model summaries."""
        return type(self).__name__

    def forward(self, x: np.ndarray) -> np.ndarray:
        """Run a batch of rows through the layer and return its output."""
        x = np.asarray(x, dtype=float)
        if x.ndim != 2 or x.shape[1] != self.input_dim:
            raise ValueError(
                f"expected input of shape (N, {self.input_dim}), got {x.shape}"
            )
        self.z = x @ self.w + self.b
        self.a = self.activation(self.z)
        return self.a

    def activation_derivative(self) -> np.ndarray:
        """Derivative of the activation evaluated on the last pre-activation."""
        return self.activation.derivative(self.z.copy())


class ReLU(Layer):
    """Dense layer with ReLU activation."""

    def __init__(self, input_dim: int, output_dim: int, rng: np.random.Generator | None = None) -> None:
        super().__init__(input_dim, output_dim, ReLUActivation(), rng)


class Sigmoid(Layer):
    """Dense layer with sigmoid activation."""

    def __init__(self, input_dim: int, output_dim: int, rng: np.random.Generator | None = None) -> None:
        super().__init__(input_dim, output_dim, SigmoidActivation(), rng)


class Softmax(Layer):
    """Dense layer with softmax activation."""

    def __init__(self, input_dim: int, output_dim: int, rng: np.random.Generator | None = None) -> None:
        super().__init__(input_dim, output_dim, SoftmaxActivation(), rng)
"""Early stopping of training when a monitored score stops improving."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

import numpy as np


class Monitor(enum.Enum):
    """Which score is watched: loss (lower is better) or accuracy (higher)."""

    VALIDATION_LOSS = "validation_loss"
    VALIDATION_ACCURACY = "validation_accuracy"


class EarlyStopping:
    """Stops training after ``patience`` checks without improvement."""

    def __init__(
        self,
        patience: int = 10,
        min_delta: float = 1e-3,
        store: bool = False,
        monitor: Monitor = Monitor.VALIDATION_LOSS,
    ) -> None:
        self.patience = patience
        self.min_delta = min_delta
        self.store = store
        self.monitor = monitor

        self.wait = 0
        self.stopped_epoch = -1
        self.best_score = math.inf if monitor is Monitor.VALIDATION_LOSS else -math.inf
        self.weights: list[np.ndarray] = []
        self.biases: list[np.ndarray] = []

    def _improved(self, score: float) -> bool:
        if self.monitor is Monitor.VALIDATION_LOSS:
            return score < self.best_score - self.min_delta
        return score > self.best_score + self.min_delta

    def on_epoch_end(
        self,
        epoch: int,
        score: float,
        weights: Sequence[np.ndarray],
        biases: Sequence[np.ndarray],
    ) -> bool:
        """Record the score for ``epoch``; return True when training should stop."""
        if self._improved(score):
            self.best_score = score
            self.wait = 0
            if self.store:
                self.weights = [np.array(w, copy=True) for w in weights]
                self.biases = [np.array(b, copy=True) for b in biases]
        else:
            self.wait += 1

        if self.wait >= self.patience:
            self.stopped_epoch = epoch
            return True
        return False
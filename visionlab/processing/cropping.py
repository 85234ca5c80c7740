"""Cropping of images to fixed or random regions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Rect:
    """An axis-aligned region: top-left corner (x, y) and its size."""

    x: int
    y: int
    width: int
    height: int


def _image(src: np.ndarray) -> np.ndarray:
    arr = np.asarray(src, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("input image must not be empty")
    if arr.ndim not in (2, 3):
        raise ValueError("input image must have 2 or 3 dimensions")
    return arr


def crop(src: np.ndarray, roi: Rect) -> np.ndarray:
    """Return a copy of the part of a 1- or 3-channel image covered by ``roi``."""
    arr = np.asarray(src, dtype=np.float32)
    if arr.ndim not in (2, 3):
        raise ValueError("input image must have 2 or 3 dimensions")
    height, width = arr.shape[:2]
    if roi.width < 0 or roi.height < 0:
        raise ValueError("ROI size must not be negative")
    if (
        roi.x < 0
        or roi.y < 0
        or roi.x + roi.width > width
        or roi.y + roi.height > height
    ):
        raise ValueError("ROI is out of bounds of the input image")
    channels = 1 if arr.ndim == 2 else arr.shape[2]
    if channels not in (1, 3):
        raise ValueError("unsupported number of channels for cropping")
    return arr[roi.y:roi.y + roi.height, roi.x:roi.x + roi.width].copy()


def random_crop(
    src: np.ndarray,
    width: int,
    height: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Crop a ``width`` x ``height`` region at a uniformly random position."""
    arr = _image(src)
    if width > arr.shape[1] or height > arr.shape[0]:
        raise ValueError("crop size must not exceed the input image size")
    rng = rng if rng is not None else np.random.default_rng()
    x = int(rng.integers(0, arr.shape[1] - width, endpoint=True))
    y = int(rng.integers(0, arr.shape[0] - height, endpoint=True))
    return crop(arr, Rect(x, y, width, height))
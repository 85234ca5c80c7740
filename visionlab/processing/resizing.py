"""Resizing, per-channel normalisation and constant padding of images."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _image(src: np.ndarray) -> np.ndarray:
    arr = np.asarray(src, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("input image must not be empty")
    if arr.ndim not in (2, 3):
        raise ValueError("input image must have 2 or 3 dimensions")
    return arr


def _channels(arr: np.ndarray) -> int:
    return 1 if arr.ndim == 2 else arr.shape[2]


def resize(src: np.ndarray, width: int, height: int) -> np.ndarray:
    """Nearest-neighbour resize of a 1- or 3-channel image to ``width`` x ``height``."""
    arr = _image(src)
    if width <= 0 or height <= 0:
        raise ValueError("new size must be positive")
    if _channels(arr) not in (1, 3):
        raise ValueError("unsupported number of channels for resizing")

    src_h, src_w = arr.shape[:2]
    scale_y = src_h / height
    scale_x = src_w / width
    rows = np.minimum((np.arange(height) * scale_y).astype(np.intp), src_h - 1)
    cols = np.minimum((np.arange(width) * scale_x).astype(np.intp), src_w - 1)
    return arr[rows[:, None], cols[None, :]].copy()


def normalize(src: np.ndarray, mean: Sequence[float], std: Sequence[float]) -> np.ndarray:
    """Return ``(pixel - mean[c]) / std[c]`` for every channel ``c``."""
    arr = _image(src)
    channels = _channels(arr)
    if len(mean) < channels or len(std) < channels:
        raise ValueError("mean and std need a value for every channel")
    mean_arr = np.asarray(mean[:channels], dtype=np.float32)
    std_arr = np.asarray(std[:channels], dtype=np.float32)
    if arr.ndim == 2:
        return ((arr - mean_arr[0]) / std_arr[0]).astype(np.float32)
    return ((arr - mean_arr) / std_arr).astype(np.float32)


def pad(src: np.ndarray, padding: int, value: float = 0.0) -> np.ndarray:
    """Surround the image with ``padding`` pixels of ``value`` on each side.

    Single-channel images come back as (height, width) arrays.
    """
    arr = _image(src)
    if padding < 0:
        raise ValueError("padding must not be negative")
    channels = _channels(arr)
    if channels not in (1, 3):
        raise ValueError("unsupported number of channels for padding")

    plane = arr.reshape(arr.shape[0], arr.shape[1]) if channels == 1 else arr
    shape = (plane.shape[0] + 2 * padding, plane.shape[1] + 2 * padding) + plane.shape[2:]
    dst = np.full(shape, value, dtype=np.float32)
    dst[padding:padding + plane.shape[0], padding:padding + plane.shape[1]] = plane
    return dst
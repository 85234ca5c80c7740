"""Smoothing and sharpening filters for (height, width, channels) images.

Neighbours that fall outside the image repeat the nearest edge pixel.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def _image(src: np.ndarray) -> np.ndarray:
    arr = np.asarray(src, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("image tensor should not be empty")
    if arr.ndim != 3:
        raise ValueError("image tensor must have 3 dimensions (height, width, channels)")
    return arr


def _check_ksize(ksize: int) -> None:
    if ksize <= 0 or ksize % 2 == 0:
        raise ValueError("kernel size must be a positive odd number")


def _windows(arr: np.ndarray, ksize: int) -> np.ndarray:
    """Edge-replicated neighbourhoods, shape (height, width, channels, ksize, ksize)."""
    half = ksize // 2
    padded = np.pad(arr, ((half, half), (half, half), (0, 0)), mode="edge")
    return sliding_window_view(padded, (ksize, ksize), axis=(0, 1))


def gaussian_kernel(ksize: int, sigma: float) -> np.ndarray:
    """Normalised ``ksize`` x ``ksize`` Gaussian kernel."""
    _check_ksize(ksize)
    half = ksize // 2
    offsets = np.arange(-half, half + 1)
    squared = offsets[:, None] ** 2 + offsets[None, :] ** 2
    kernel = np.exp(-squared / (2.0 * sigma * sigma)).astype(np.float32)
    return (kernel / kernel.astype(np.float64).sum()).astype(np.float32)


def gaussian_blur(src: np.ndarray, ksize: int = 5) -> np.ndarray:
    """Blur with a Gaussian kernel of size ``ksize`` and sigma ``ksize / 3``."""
    arr = _image(src)
    kernel = gaussian_kernel(ksize, ksize / 3.0)
    windows = _windows(arr, ksize)
    return np.einsum("hwcij,ij->hwc", windows, kernel).astype(np.float32)


def median_blur(src: np.ndarray, ksize: int = 5) -> np.ndarray:
    """Replace each pixel by the median of its ``ksize`` x ``ksize`` neighbourhood."""
    arr = _image(src)
    _check_ksize(ksize)
    windows = _windows(arr, ksize).reshape(arr.shape + (ksize * ksize,))
    middle = (ksize * ksize) // 2
    return np.partition(windows, middle, axis=-1)[..., middle].astype(np.float32)


def unsharp_mask(src: np.ndarray, sigma: float = 1.0, alpha: float = 1.5) -> np.ndarray:
    """Sharpen: ``src + alpha * (src - blurred)``, clamped to [0, 255].

    The blur kernel size is ``round(3 * sigma) * 2 + 1``.
    """
    arr = _image(src)
    if sigma < 0:
        raise ValueError("sigma must not be negative")
    ksize = int(math.floor(sigma * 3 + 0.5)) * 2 + 1
    blurred = gaussian_blur(arr, ksize)
    sharp = arr + np.float32(alpha) * (arr - blurred)
    return np.clip(sharp, 0.0, 255.0).astype(np.float32)


def bilateral_filter(
    src: np.ndarray,
    ksize: int = 5,
    sigma_spatial: float = 75.0,
    sigma_range: float = 75.0,
) -> np.ndarray:
    """Edge-preserving smoothing weighted by distance and intensity difference."""
    arr = _image(src)
    _check_ksize(ksize)
    half = ksize // 2
    spatial_coeff = -0.5 / (sigma_spatial * sigma_spatial)
    range_coeff = -0.5 / (sigma_range * sigma_range)

    offsets = np.arange(-half, half + 1)
    spatial = (offsets[:, None] ** 2 + offsets[None, :] ** 2).astype(np.float64)

    windows = _windows(arr, ksize).astype(np.float64)
    center = arr.astype(np.float64)[..., None, None]
    weights = np.exp(spatial_coeff * spatial + range_coeff * (center - windows) ** 2)
    total = (weights * windows).sum(axis=(-2, -1))
    return (total / weights.sum(axis=(-2, -1))).astype(np.float32)
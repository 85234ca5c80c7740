"""Colour space conversions for BGR images stored as (height, width, 3) arrays."""

from __future__ import annotations

import enum

import numpy as np


class ColorSpace(enum.Enum):
    """Supported colour space conversions."""

    BGR_TO_HSV = "bgr_to_hsv"
    HSV_TO_BGR = "hsv_to_bgr"


def _three_channel(src: np.ndarray, kind: str) -> np.ndarray:
    arr = np.asarray(src, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("input image must not be empty")
    if arr.ndim != 3:
        raise ValueError("input image must have 3 dimensions (height, width, channels)")
    if arr.shape[2] != 3:
        raise ValueError(f"input image must be in {kind} format (3 channels)")
    return arr


def convert_color_space(src: np.ndarray, color_space: ColorSpace) -> np.ndarray:
    """Convert ``src`` with the conversion named by ``color_space``."""
    if color_space is ColorSpace.BGR_TO_HSV:
        return bgr_to_hsv(src)
    if color_space is ColorSpace.HSV_TO_BGR:
        return hsv_to_bgr(src)
    raise ValueError("unsupported color space conversion")


def bgr_to_hsv(src: np.ndarray) -> np.ndarray:
    """Convert a BGR image in [0, 255] to HSV with every channel scaled to [0, 255]."""
    arr = _three_channel(src, "BGR")
    scale = np.float32(255.0)
    b = arr[..., 0] / scale
    g = arr[..., 1] / scale
    r = arr[..., 2] / scale

    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin

    with np.errstate(divide="ignore", invalid="ignore"):
        hue_r = np.fmod(60 * ((g - b) / delta), 360)
        hue_g = np.fmod(60 * ((b - r) / delta + 2), 360)
        hue_b = np.fmod(60 * ((r - g) / delta + 4), 360)
        sat = np.where(cmax == 0, 0, delta / cmax)

    hue = np.select(
        [delta == 0, cmax == r, cmax == g],
        [np.zeros_like(delta), hue_r, hue_g],
        default=hue_b,
    )

    dst = np.empty_like(arr)
    dst[..., 0] = hue * 255 / 360
    dst[..., 1] = sat * 255
    dst[..., 2] = cmax * 255
    return dst


def hsv_to_bgr(src: np.ndarray) -> np.ndarray:
    """Convert an HSV image with channels in [0, 255] back to BGR.

    Output values are truncated to whole numbers in [0, 255].
    """
    arr = _three_channel(src, "HSV")
    h = arr[..., 0] * 360 / np.float32(255.0)
    s = arr[..., 1] / np.float32(255.0)
    v = arr[..., 2] / np.float32(255.0)

    c = v * s
    x = c * (1 - np.abs(np.fmod(h / np.float32(60.0), 2) - 1))
    m = v - c
    zero = np.zeros_like(c)

    conditions = [h < 60, h < 120, h < 180, h < 240, h < 300]
    r_prime = np.select(conditions, [c, x, zero, zero, x], default=c)
    g_prime = np.select(conditions, [x, c, c, x, zero], default=zero)
    b_prime = np.select(conditions, [zero, zero, x, c, c], default=x)

    def to_byte(channel: np.ndarray) -> np.ndarray:
        return np.clip(np.trunc((channel + m) * 255), 0, 255)

    dst = np.empty_like(arr)
    dst[..., 0] = to_byte(b_prime)
    dst[..., 1] = to_byte(g_prime)
    dst[..., 2] = to_byte(r_prime)
    return dst


def to_grayscale(src: np.ndarray) -> np.ndarray:
    """Convert a BGR image to a (height, width) luma image: 0.299 R + 0.587 G + 0.114 B."""
    arr = _three_channel(src, "BGR")
    return (
        np.float32(0.299) * arr[..., 2]
        + np.float32(0.587) * arr[..., 1]
        + np.float32(0.114) * arr[..., 0]
    ).astype(np.float32)
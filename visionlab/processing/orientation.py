"""Rotation by right angles and mirroring of images."""

from __future__ import annotations

import enum

import numpy as np


class FlipCode(enum.Enum):
    """Mirror direction: up-down, left-right or both."""

    VERTICAL = 0
    HORIZONTAL = 1
    BOTH = -1


class RotateAngle(enum.Enum):
    """Clockwise rotation by a multiple of 90 degrees."""

    CLOCKWISE_90 = 0
    CLOCKWISE_180 = 1
    CLOCKWISE_270 = 2


# Number of counter-clockwise quarter turns for np.rot90.
_QUARTER_TURNS = {
    RotateAngle.CLOCKWISE_90: -1,
    RotateAngle.CLOCKWISE_180: 2,
    RotateAngle.CLOCKWISE_270: 1,
}


def _image(src: np.ndarray, action: str) -> np.ndarray:
    arr = np.asarray(src, dtype=np.float32)
    if arr.size == 0:
        raise ValueError("input image is empty")
    if arr.ndim not in (2, 3):
        raise ValueError("input image must have 2 or 3 dimensions")
    channels = 1 if arr.ndim == 2 else arr.shape[2]
    if channels not in (1, 3):
        raise ValueError(f"unsupported number of channels for {action}")
    return arr


def rotate(src: np.ndarray, angle: RotateAngle) -> np.ndarray:
    """Rotate a 1- or 3-channel image clockwise by ``angle``."""
    arr = _image(src, "rotation")
    try:
        turns = _QUARTER_TURNS[angle]
    except KeyError:
        raise ValueError("only 90, 180, 270 degrees supported for rotation") from None
    return np.rot90(arr, k=turns, axes=(0, 1)).copy()


def flip(src: np.ndarray, flip_code: FlipCode) -> np.ndarray:
    """Mirror a 1- or 3-channel image vertically, horizontally or both."""
    arr = _image(src, "flipping")
    if not isinstance(flip_code, FlipCode):
        raise ValueError("unsupported flip code")
    out = arr
    if flip_code in (FlipCode.VERTICAL, FlipCode.BOTH):
        out = out[::-1, :]
    if flip_code in (FlipCode.HORIZONTAL, FlipCode.BOTH):
        out = out[:, ::-1]
    return out.copy()
import numpy as np
import pytest

from visionlab.processing.resizing import normalize, pad, resize


def test_resize_same_size_is_identity():
    img = np.arange(24, dtype=np.float32).reshape(2, 4, 3)
    np.testing.assert_array_equal(resize(img, 4, 2), img)


def test_resize_upscale_repeats_pixels():
    img = np.array([[1, 2], [3, 4]], dtype=np.float32)
    out = resize(img, 4, 4)
    expected = np.array([[1, 1, 2, 2], [1, 1, 2, 2], [3, 3, 4, 4], [3, 3, 4, 4]], dtype=np.float32)
    np.testing.assert_array_equal(out, expected)


def test_resize_downscale_picks_pixels():
    img = np.arange(16, dtype=np.float32).reshape(4, 4)
    out = resize(img, 2, 2)
    np.testing.assert_array_equal(out, img[::2, ::2])


def test_resize_shape_for_color():
    img = np.zeros((5, 7, 3), dtype=np.float32)
    assert resize(img, 3, 9).shape == (9, 3, 3)


@pytest.mark.parametrize(
    "img, width, height",
    [
        (np.zeros((0, 0, 3)), 2, 2),
        (np.zeros((2, 2, 3)), 0, 2),
        (np.zeros((2, 2, 3)), 2, -1),
        (np.zeros((2, 2, 2)), 2, 2),
    ],
)
def test_resize_errors(img, width, height):
    with pytest.raises(ValueError):
        resize(img, width, height)


def test_normalize_round_trip():
    rng = np.random.default_rng(0)
    img = rng.uniform(0, 255, size=(3, 4, 3)).astype(np.float32)
    mean = [10.0, 20.0, 30.0]
    std = [2.0, 4.0, 8.0]
    out = normalize(img, mean, std)
    np.testing.assert_allclose(out * np.array(std) + np.array(mean), img, rtol=1e-5)


def test_normalize_per_channel_values():
    img = np.full((1, 1, 3), 10.0, dtype=np.float32)
    out = normalize(img, [10.0, 0.0, 5.0], [1.0, 2.0, 5.0])
    np.testing.assert_allclose(out[0, 0], [0.0, 5.0, 1.0])


def test_normalize_missing_channel_stats():
    with pytest.raises(ValueError):
        normalize(np.zeros((2, 2, 3)), [0.0], [1.0])


def test_normalize_empty():
    with pytest.raises(ValueError):
        normalize(np.zeros((0, 2, 3)), [0.0, 0.0, 0.0], [1.0, 1.0, 1.0])


def test_pad_color_image():
    img = np.arange(12, dtype=np.float32).reshape(2, 2, 3)
    out = pad(img, 2, 7.0)
    assert out.shape == (6, 6, 3)
    np.testing.assert_array_equal(out[2:4, 2:4], img)
    border = np.ones(out.shape[:2], dtype=bool)
    border[2:4, 2:4] = False
    assert np.all(out[border] == 7.0)


def test_pad_single_channel_becomes_plane():
    img = np.arange(6, dtype=np.float32).reshape(2, 3, 1)
    out = pad(img, 1, 0.0)
    assert out.shape == (4, 5)
    np.testing.assert_array_equal(out[1:3, 1:4], img[..., 0])
    assert out[0].sum() == 0.0


def test_pad_zero_is_identity():
    img = np.arange(9, dtype=np.float32).reshape(3, 3)
    np.testing.assert_array_equal(pad(img, 0), img)


@pytest.mark.parametrize("img, padding", [(np.zeros((2, 2, 2)), 1), (np.zeros((2, 2, 3)), -1)])
def test_pad_errors(img, padding):
    with pytest.raises(ValueError):
        pad(img, padding)
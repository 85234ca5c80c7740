import numpy as np
import pytest

from visionlab.processing.blur import (
    bilateral_filter,
    gaussian_blur,
    gaussian_kernel,
    median_blur,
    unsharp_mask,
)


def _random_image(seed=0, shape=(6, 7, 3)):
    rng = np.random.default_rng(seed)
    return rng.uniform(0, 255, size=shape).astype(np.float32)


def test_gaussian_kernel_sums_to_one():
    kernel = gaussian_kernel(5, 5 / 3.0)
    assert kernel.shape == (5, 5)
    assert kernel.sum() == pytest.approx(1.0, abs=1e-6)


def test_gaussian_kernel_symmetric_with_peak_at_centre():
    kernel = gaussian_kernel(7, 2.0)
    np.testing.assert_allclose(kernel, kernel.T)
    np.testing.assert_allclose(kernel, kernel[::-1, ::-1])
    assert kernel[3, 3] == kernel.max()


def test_gaussian_kernel_size_one():
    np.testing.assert_allclose(gaussian_kernel(1, 1.0), [[1.0]])


@pytest.mark.parametrize("ksize", [0, 2, -3])
def test_gaussian_kernel_rejects_bad_size(ksize):
    with pytest.raises(ValueError):
        gaussian_kernel(ksize, 1.0)


def test_gaussian_blur_keeps_constant_image():
    img = np.full((5, 6, 3), 42.0, dtype=np.float32)
    np.testing.assert_allclose(gaussian_blur(img, 5), img, rtol=1e-5)


def test_gaussian_blur_preserves_shape_and_range():
    img = _random_image()
    out = gaussian_blur(img, 3)
    assert out.shape == img.shape
    assert out.dtype == np.float32
    assert out.min() >= img.min() - 1e-3
    assert out.max() <= img.max() + 1e-3


def test_gaussian_blur_reduces_variance():
    img = _random_image(1, (10, 10, 1))
    assert gaussian_blur(img, 5).var() < img.var()


def test_gaussian_blur_ksize_one_is_identity():
    img = _random_image(2)
    np.testing.assert_allclose(gaussian_blur(img, 1), img, rtol=1e-6)


def test_gaussian_blur_rejects_two_dimensions():
    with pytest.raises(ValueError):
        gaussian_blur(np.zeros((4, 4)), 3)


def test_gaussian_blur_rejects_empty():
    with pytest.raises(ValueError):
        gaussian_blur(np.zeros((0, 4, 3)), 3)


def test_median_blur_removes_impulse():
    img = np.full((5, 5, 1), 10.0, dtype=np.float32)
    img[2, 2, 0] = 200.0
    out = median_blur(img, 3)
    np.testing.assert_array_equal(out, np.full_like(img, 10.0))


def test_median_blur_output_values_come_from_input():
    img = _random_image(3)
    out = median_blur(img, 3)
    assert out.shape == img.shape
    for c in range(3):
        assert np.isin(out[..., c], img[..., c]).all()


def test_median_blur_rejects_even_kernel():
    with pytest.raises(ValueError):
        median_blur(_random_image(), 4)


def test_unsharp_mask_keeps_constant_image():
    img = np.full((6, 6, 3), 100.0, dtype=np.float32)
    np.testing.assert_allclose(unsharp_mask(img, 1.0, 1.5), img, rtol=1e-5)


def test_unsharp_mask_clamps_to_valid_range():
    img = np.zeros((7, 7, 1), dtype=np.float32)
    img[3, 3, 0] = 255.0
    out = unsharp_mask(img, 1.0, 5.0)
    assert out.min() >= 0.0
    assert out.max() <= 255.0
    assert out[3, 3, 0] == 255.0


def test_unsharp_mask_with_zero_alpha_is_identity():
    img = _random_image(4)
    np.testing.assert_allclose(unsharp_mask(img, 1.0, 0.0), img, rtol=1e-6)


def test_bilateral_filter_keeps_constant_image():
    img = np.full((5, 5, 3), 77.0, dtype=np.float32)
    np.testing.assert_allclose(bilateral_filter(img, 5, 75.0, 75.0), img, rtol=1e-5)


def test_bilateral_filter_preserves_strong_edge():
    img = np.zeros((6, 6, 1), dtype=np.float32)
    img[:, 3:] = 255.0
    out = bilateral_filter(img, 3, 2.0, 1.0)
    np.testing.assert_allclose(out, img, atol=1e-3)


def test_bilateral_filter_stays_within_input_range():
    img = _random_image(5)
    out = bilateral_filter(img, 5)
    assert out.shape == img.shape
    assert out.min() >= img.min() - 1e-3
    assert out.max() <= img.max() + 1e-3


def test_bilateral_filter_rejects_two_dimensions():
    with pytest.raises(ValueError):
        bilateral_filter(np.zeros((3, 3)), 3)
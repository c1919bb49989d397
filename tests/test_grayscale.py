import numpy as np
import pytest

from errors import EmptyInputError, RenderContextError
from grayscale import extract_grayscale


def test_single_channel_is_kept(gray_image):
    samples = extract_grayscale(gray_image)

    assert samples.shape == (8, 16)
    assert samples.dtype == np.float64
    assert np.array_equal(samples, gray_image.astype(np.float64))


def test_single_channel_with_axis(gray_image):
    samples = extract_grayscale(gray_image[..., np.newaxis])
    assert np.array_equal(samples, gray_image.astype(np.float64))


def test_luminance_weights():
    # BGR: pure blue, pure green, pure red
    image = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8)
    samples = extract_grayscale(image)
    assert samples.reshape(-1).tolist() == [29.0, 150.0, 76.0]


def test_color_values_in_range(color_image):
    samples = extract_grayscale(color_image)
    assert samples.shape == (16, 8)
    assert samples.min() >= 0
    assert samples.max() <= 255


def test_alpha_composited_over_black():
    image = np.array([[[255, 255, 255, 255], [255, 255, 255, 0], [200, 200, 200, 128]]], dtype=np.uint8)
    samples = extract_grayscale(image)
    assert samples.reshape(-1).tolist() == [255.0, 0.0, 100.0]


def test_sixteen_bit_is_scaled():
    image = np.array([[0, 65535, 257 * 10]], dtype=np.uint16)
    assert extract_grayscale(image).reshape(-1).tolist() == [0.0, 255.0, 10.0]


def test_float_image_is_scaled():
    image = np.array([[0.0, 1.0, 0.5, 2.0]], dtype=np.float32)
    assert extract_grayscale(image).reshape(-1).tolist() == [0.0, 255.0, 128.0, 255.0]


def test_result_is_read_only(gray_image):
    samples = extract_grayscale(gray_image)
    with pytest.raises(ValueError):
        samples[0, 0] = 1.0


@pytest.mark.parametrize("shape", [(0, 4), (4, 0), (0, 0, 3)])
def test_zero_size_fails(shape):
    with pytest.raises(EmptyInputError):
        extract_grayscale(np.zeros(shape, dtype=np.uint8))


@pytest.mark.parametrize("image", [
    None,
    [[1, 2], [3, 4]],
    np.zeros(4, dtype=np.uint8),
    np.zeros((2, 2, 2), dtype=np.uint8),
    np.zeros((2, 2, 0), dtype=np.uint8),
    np.zeros((2, 2), dtype=np.int64),
])
def test_unrenderable_input_fails(image):
    with pytest.raises(RenderContextError):
        extract_grayscale(image)

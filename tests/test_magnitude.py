import numpy as np
import pytest

from dft import fft_2d
from errors import EmptyInputError
from magnitude import normalize_magnitude

EPSILON = 1e-6


def test_uniform_grid_concentrates_in_dc():
    magnitude = normalize_magnitude(fft_2d(np.ones((4, 4))))

    assert magnitude[0, 0] == pytest.approx(1.0, abs=EPSILON)
    others = np.delete(magnitude.reshape(-1), 0)
    assert len(others) == 15
    assert np.all(np.abs(others) < EPSILON)


def test_impulse_spectrum_is_flat():
    magnitude = normalize_magnitude(fft_2d(np.array([[1.0, 0.0], [0.0, 0.0]])))
    assert np.allclose(magnitude, 1.0, atol=EPSILON)


def test_zero_grid_gives_zero_magnitude():
    magnitude = normalize_magnitude(fft_2d(np.zeros((8, 8))))
    assert magnitude.shape == (8, 8)
    assert not magnitude.any()


def test_normalization_bound(rng):
    magnitude = normalize_magnitude(fft_2d(rng.random((16, 8)) * 255))

    assert magnitude.shape == (16, 8)
    assert magnitude.max() == pytest.approx(1.0, abs=EPSILON)
    assert magnitude.min() >= 0.0
    assert magnitude.max() <= 1.0


def test_magnitude_is_squared():
    spectrum = np.array([[3 + 4j, 1 + 0j]])
    # |3+4i|^2 = 25, |1|^2 = 1
    assert np.allclose(normalize_magnitude(spectrum), [[1.0, 1.0 / 25.0]])


def test_result_is_read_only():
    magnitude = normalize_magnitude(np.array([[1 + 1j, 2 + 0j]]))
    with pytest.raises(ValueError):
        magnitude[0, 0] = 0.5


def test_empty_spectrum_is_rejected():
    with pytest.raises(EmptyInputError):
        normalize_magnitude(np.zeros((0, 4), dtype=complex))

"""
Модуль нормализации амплитудного спектра
"""
from typing import TypeAlias

import numpy as np

from errors import EmptyInputError

magnitude_grid_type: TypeAlias = np.ndarray


def normalize_magnitude(spectrum: np.ndarray) -> magnitude_grid_type:
    """
    Вычисляет квадрат модуля re² + im² каждого коэффициента и делит на максимум.

    Квадрат модуля сохранен намеренно: он определяет контраст итогового изображения.
    Логарифм и центрирование спектра не применяются.

    Parameters:
    spectrum : numpy.ndarray
        Комплексная матрица после fft_2d

    Returns:
    numpy.ndarray
        Матрица значений в [0, 1]; нули, если спектр полностью нулевой
    """
    spectrum = np.asarray(spectrum)
    if spectrum.size == 0:
        raise EmptyInputError("Spectrum is empty")

    magnitude = spectrum.real ** 2 + spectrum.imag ** 2

    max_magnitude = magnitude.max()
    if max_magnitude == 0:
        normalized = np.zeros_like(magnitude, dtype=np.float64)
    else:
        normalized = (magnitude / max_magnitude).astype(np.float64)

    normalized.flags.writeable = False
    return normalized

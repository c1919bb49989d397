"""
Модуль получения полутонового изображения
"""
from typing import TypeAlias

import cv2
import numpy as np

from errors import EmptyInputError, RenderContextError

sample_grid_type: TypeAlias = np.ndarray

SUPPORTED_CHANNELS = (1, 3, 4)


def to_8bit_scale(image: np.ndarray) -> np.ndarray:
    """
    Приводит значения пикселей к шкале [0, 255] в float32.

    :param image: изображение uint8, uint16 или с плавающей точкой в [0, 1]
    :return: изображение float32 той же формы
    """
    if image.dtype == np.uint8:
        return image.astype(np.float32)
    if image.dtype == np.uint16:
        return image.astype(np.float32) / 257.0
    if np.issubdtype(image.dtype, np.floating):
        return np.clip(np.nan_to_num(image.astype(np.float32)), 0.0, 1.0) * 255.0

    raise RenderContextError(f"Unsupported pixel type: {image.dtype}")


def extract_grayscale(image: np.ndarray) -> sample_grid_type:
    """
    Отрисовка изображения в 8-битный контекст оттенков серого без альфа-канала.

    Цвет сводится по яркостным весам (как cv2.COLOR_BGR2GRAY), альфа-канал
    накладывается на черный фон контекста.

    :param image: изображение OpenCV формы (h, w), (h, w, 1), (h, w, 3) или (h, w, 4)
    :return: матрица (h, w) float64 со значениями в [0, 255], только для чтения
    """
    if not isinstance(image, np.ndarray):
        raise RenderContextError(f"Cannot render object of type {type(image).__name__}")

    if image.ndim not in (2, 3):
        raise RenderContextError(f"Cannot render array of shape {image.shape}")

    height, width = image.shape[:2]
    if height == 0 or width == 0:
        raise EmptyInputError(f"Image has zero size: {width}x{height}")

    channels = 1 if image.ndim == 2 else image.shape[2]
    if channels not in SUPPORTED_CHANNELS:
        raise RenderContextError(f"Cannot render image with {channels} channels")

    pixels = to_8bit_scale(image)

    try:
        if channels == 1:
            gray = pixels.reshape(height, width)
        elif channels == 3:
            gray = cv2.cvtColor(pixels, cv2.COLOR_BGR2GRAY)
        else:
            # Контекст без альфы: смешиваем с черным фоном
            gray = cv2.cvtColor(pixels, cv2.COLOR_BGRA2GRAY) * (pixels[..., 3] / 255.0)
    except cv2.error as error:
        raise RenderContextError(f"Grayscale conversion failed: {error}") from error

    # Квантование в 8-битный канал
    samples = np.clip(np.rint(gray), 0, 255).astype(np.float64)
    samples.flags.writeable = False
    return samples

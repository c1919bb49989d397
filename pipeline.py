"""
Конвейер: оттенки серого -> FFT -> нормализация -> растр
"""
import logging
from typing import Callable, Iterable, TypeAlias

import numpy as np

from dft import fft_2d, PlanCache
from errors import SpectrumError
from grayscale import extract_grayscale
from magnitude import normalize_magnitude
from raster import Raster, encode_grayscale

logger = logging.getLogger(__name__)

error_callback_type: TypeAlias = Callable[[int, SpectrumError], None]


def process_image(image: np.ndarray, plan_cache: PlanCache | None = None) -> Raster:
    """
    Строит изображение спектра для одного изображения.

    При ошибке любого этапа поднимается SpectrumError, частичный результат не создается.

    :param image: изображение OpenCV
    :param plan_cache: необязательный кэш планов FFT
    :return: растр спектра того же размера
    """
    samples = extract_grayscale(image)
    spectrum = fft_2d(samples, plan_cache)
    magnitude = normalize_magnitude(spectrum)
    return encode_grayscale(magnitude)


def process_batch(
        images: Iterable[np.ndarray],
        on_error: error_callback_type | None = None,
        plan_cache: PlanCache | None = None,
) -> list[Raster]:
    """
    Последовательно обрабатывает изображения, пропуская неудачные.

    :param images: изображения в порядке обработки
    :param on_error: вызывается с (индекс, ошибка) для каждого пропущенного изображения
    :param plan_cache: необязательный кэш планов FFT
    :return: успешные растры в исходном порядке
    """
    rasters = []
    for index, image in enumerate(images):
        try:
            rasters.append(process_image(image, plan_cache))
        except SpectrumError as error:
            logger.warning("Image %d skipped: %s", index, error)
            if on_error is not None:
                on_error(index, error)
    return rasters

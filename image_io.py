"""
Чтение исходных изображений и запись растров спектра
"""
import os

import cv2
import numpy as np

from errors import EncodingError, ImageLoadError
from raster import Raster

IMAGE_EXTENSIONS = (".tif", ".tiff")


def load_image(path: str) -> np.ndarray:
    """
    Загружает изображение без преобразования глубины и числа каналов.

    :param path: путь к файлу
    :return: изображение OpenCV
    """
    if not os.path.isfile(path):
        raise ImageLoadError(f"File not found: {path}")

    image = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageLoadError(f"Cannot decode image: {path}")

    return image


def collect_images(directory: str, extensions: tuple[str, ...] = IMAGE_EXTENSIONS) -> list[str]:
    """
    Список файлов изображений в папке, отсортированный по имени.

    :param directory: папка с изображениями
    :param extensions: допустимые расширения (без учета регистра)
    """
    extensions = tuple(extension.lower() for extension in extensions)
    return sorted(
        os.path.join(directory, f)
        for f in os.listdir(directory)
        if f.lower().endswith(extensions) and os.path.isfile(os.path.join(directory, f))
    )


def save_raster(raster: Raster, path: str) -> str:
    """
    Сохраняет растр как одноканальное 8-битное изображение.

    :param raster: растр спектра
    :param path: путь к выходному файлу, формат по расширению
    :return: путь к сохраненному файлу
    """
    directory = os.path.dirname(path)
    if directory:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as error:
            raise EncodingError(f"Cannot create output directory {directory}: {error}") from error

    try:
        ok = cv2.imwrite(path, raster.to_array())
    except cv2.error as error:
        raise EncodingError(f"Cannot write raster to {path}: {error}") from error

    if not ok:
        raise EncodingError(f"Cannot write raster to {path}")

    return path

"""
Модуль кодирования спектра в 8-битный полутоновый растр
"""
from dataclasses import dataclass

import numpy as np

from errors import EncodingError


@dataclass(frozen=True)
class Raster:
    """
    Одноканальный 8-битный растр без альфа-канала, строки подряд.
    """
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise EncodingError(f"Cannot allocate raster of size {self.width}x{self.height}")
        if len(self.data) != self.width * self.height:
            raise EncodingError(
                f"Raster {self.width}x{self.height} needs {self.width * self.height} bytes, "
                f"got {len(self.data)}"
            )

    def to_array(self) -> np.ndarray:
        """
        Представление растра как изображения OpenCV (height, width) uint8.
        """
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width)


def encode_grayscale(grid: np.ndarray, width: int = None, height: int = None) -> Raster:
    """
    Квантует нормализованную матрицу в байты: floor(v * 255), без округления.

    :param grid: матрица значений в [0, 1] формы (height, width) или плоская последовательность
    :param width: ширина (по умолчанию из формы матрицы)
    :param height: высота (по умолчанию из формы матрицы)
    :return: растр
    """
    grid = np.asarray(grid, dtype=np.float64)

    if width is None or height is None:
        if grid.ndim != 2:
            raise EncodingError(f"Cannot infer raster size from shape {grid.shape}")
        height, width = grid.shape

    if width <= 0 or height <= 0:
        raise EncodingError(f"Cannot allocate raster of size {width}x{height}")

    if grid.ndim == 2 and grid.shape != (height, width):
        raise EncodingError(f"Grid of shape {grid.shape} does not match {width}x{height}")

    if grid.size != width * height:
        raise EncodingError(f"Grid of {grid.size} values does not match {width}x{height}")

    if not np.all(np.isfinite(grid)):
        raise EncodingError("Grid contains non-finite values")

    # Отсечение защищает от выхода за 255 из-за погрешности при v == 1.0
    pixels = np.clip(np.floor(grid * 255.0), 0, 255).astype(np.uint8)

    return Raster(width=int(width), height=int(height), data=pixels.reshape(-1).tobytes())

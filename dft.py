"""
Модуль с дискретным преобразованием Фурье
"""
import logging
from typing import TypeAlias

import numpy as np

from errors import EmptyInputError, UnsupportedSizeError

logger = logging.getLogger(__name__)

complex_grid_type: TypeAlias = np.ndarray


def is_power_of_two(value: int) -> bool:
    return value >= 1 and value & (value - 1) == 0


def check_size(size: int, axis: str = "size") -> None:
    """
    Проверяет, что длина преобразования допустима для алгоритма radix-2.

    :param size: длина оси
    :param axis: имя оси для сообщения об ошибке
    """
    if size == 0:
        raise EmptyInputError(f"{axis} must be greater than zero")
    if not is_power_of_two(size):
        raise UnsupportedSizeError(f"{axis} of input must be a power of 2, got {size}")


def bit_reversal_indices(n: int) -> np.ndarray:
    """
    Перестановка индексов с обращенным порядком бит для длины n = 2^k.

    Parameters:
    n : int
        Длина преобразования

    Returns:
    numpy.ndarray
    """
    bits = n.bit_length() - 1
    indices = np.arange(n)
    reversed_indices = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        reversed_indices = (reversed_indices << 1) | (indices & 1)
        indices = indices >> 1
    return reversed_indices


def twiddle_factors(n: int) -> np.ndarray:
    """
    Поворачивающие множители e^(-2πik/N) для k = 0 .. N/2 - 1
    """
    k = np.arange(n // 2)
    return np.exp(-2j * np.pi * k / n)


class AxisPlan:
    """
    Таблицы для одномерного FFT длины n: перестановка бит и поворачивающие множители.
    """

    def __init__(self, n: int):
        self.n = n
        self.log2n = n.bit_length() - 1
        self.permutation = bit_reversal_indices(n)
        self.twiddles = twiddle_factors(n)

    def execute(self, data: np.ndarray) -> np.ndarray:
        """
        Проводит прямое FFT по последней оси для каждой строки матрицы,
        используя итеративный алгоритм Кули-Тьюки с прореживанием по времени.

        Parameters:
        data : numpy.ndarray
            Комплексная матрица (строки, n)

        Returns:
        numpy.ndarray
        """
        n = self.n
        rows = data.shape[0]

        # Перестановка с обращением бит создает копию, исходный буфер не меняется
        data = data[:, self.permutation]

        # log2(n) этапов "бабочек"
        size = 2
        while size <= n:
            half = size // 2
            w = self.twiddles[::n // size]

            blocks = data.reshape(rows, n // size, size)
            even = blocks[..., :half]
            odd = blocks[..., half:] * w

            data = np.concatenate((even + odd, even - odd), axis=-1).reshape(rows, n)
            size *= 2

        return data


class FFTPlan:
    """
    План двумерного преобразования для сетки width x height.

    Хранит таблицы для строк и столбцов. Освобождается явно через release()
    или при выходе из блока with.
    """

    def __init__(self, width: int, height: int):
        check_size(width, "width")
        check_size(height, "height")

        self.width = width
        self.height = height
        self._rows = AxisPlan(width)
        self._columns = AxisPlan(height)
        logger.debug("FFT plan created for %dx%d", width, height)

    @property
    def key(self) -> (int, int):
        return self.width.bit_length() - 1, self.height.bit_length() - 1

    @property
    def released(self) -> bool:
        return self._rows is None

    def execute(self, grid: np.ndarray) -> complex_grid_type:
        """
        Проводит быстрое преобразование Фурье (FFT) для матрицы

        :param grid: вещественная матрица (height, width)
        :return: комплексная матрица того же размера, без сдвига спектра
        """
        if self.released:
            raise RuntimeError("FFT plan has been released")

        if grid.shape != (self.height, self.width):
            raise ValueError(
                f"Grid shape {grid.shape} does not match plan {self.height}x{self.width}"
            )

        # Мнимая часть обнуляется до преобразования
        data = np.asarray(grid, dtype=np.float64).astype(np.complex128)

        # Применить fft для каждой строки
        data = self._rows.execute(data)

        # Применить fft для каждого столбца, только после всех строк
        data = self._columns.execute(data.T).T

        return np.ascontiguousarray(data)

    def release(self) -> None:
        if self._rows is not None:
            logger.debug("FFT plan released for %dx%d", self.width, self.height)
        self._rows = None
        self._columns = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


class PlanCache:
    """
    Кэш планов по ключу (log2 width, log2 height) с явной инвалидацией.
    """

    def __init__(self):
        self._plans: dict[(int, int), FFTPlan] = {}

    def acquire(self, width: int, height: int) -> FFTPlan:
        check_size(width, "width")
        check_size(height, "height")

        key = (width.bit_length() - 1, height.bit_length() - 1)
        plan = self._plans.get(key)
        if plan is None:
            plan = FFTPlan(width, height)
            self._plans[key] = plan
        return plan

    def invalidate(self) -> None:
        for plan in self._plans.values():
            plan.release()
        self._plans.clear()

    def __contains__(self, key) -> bool:
        return key in self._plans

    def __len__(self) -> int:
        return len(self._plans)


def fft(x: np.ndarray) -> np.ndarray:
    """
    Проводит быстрое преобразование Фурье (FFT) для одномерного массива, используя алгоритм Кули-Тьюки.

    Parameters:
    x : numpy.ndarray
        Входящий массив

    Returns:
    numpy.ndarray
    """
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError("Input must be one-dimensional")
    check_size(x.shape[0])

    return AxisPlan(x.shape[0]).execute(x.astype(np.complex128)[np.newaxis, :])[0]


def fft_2d(matrix: np.ndarray, plan_cache: PlanCache | None = None) -> complex_grid_type:
    """
    Проводит быстрое преобразование Фурье (FFT) для матрицы

    Parameters:
    matrix : numpy.ndarray
        Входящая матрица (height, width), обе стороны - степени двойки
    plan_cache : PlanCache
        Необязательный кэш планов. Без него план освобождается сразу после вызова.

    Returns:
    numpy.ndarray
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError("Input must be two-dimensional")

    height, width = matrix.shape

    if plan_cache is not None:
        return plan_cache.acquire(width, height).execute(matrix)

    with FFTPlan(width, height) as plan:
        return plan.execute(matrix)


def transform_2d(
        grid,
        width: int,
        height: int,
        plan_cache: PlanCache | None = None,
) -> complex_grid_type:
    """
    То же, что fft_2d, но для построчной последовательности с явными размерами.

    :param grid: последовательность длины width * height или матрица (height, width)
    :param width: ширина
    :param height: высота
    :param plan_cache: необязательный кэш планов
    """
    check_size(width, "width")
    check_size(height, "height")

    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim == 2 and grid.shape != (height, width):
        raise ValueError(f"Grid of shape {grid.shape} does not match {width}x{height}")
    if grid.size != width * height:
        raise ValueError(f"Grid of {grid.size} samples does not match {width}x{height}")

    return fft_2d(grid.reshape(height, width), plan_cache)


if __name__ == "__main__":
    # Тест, что результат нашего преобразования совпадает с реализацией NumPy
    x = np.random.random((512, 256))
    my_fft = fft_2d(x)
    num = np.fft.fft2(x)
    print(num)
    print(np.allclose(my_fft, num))

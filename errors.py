"""
Ошибки конвейера построения спектра
"""


class SpectrumError(Exception):
    """
    Базовая ошибка обработки одного изображения.
    """


class EmptyInputError(SpectrumError, ValueError):
    """
    Нулевая ширина или высота на любом этапе.
    """


class RenderContextError(SpectrumError):
    """
    Изображение нельзя отрисовать в 8-битный контекст оттенков серого.
    """


class UnsupportedSizeError(SpectrumError, ValueError):
    """
    Размер не является степенью двойки.
    """


class EncodingError(SpectrumError):
    """
    Невозможно построить выходной растр.
    """


class ImageLoadError(SpectrumError, OSError):
    """
    Файл не найден или не декодируется.
    """

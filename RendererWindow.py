import cv2
import numpy as np

from AbstractRenderer import AbstractRenderer
from raster import Raster


class RendererWindow(AbstractRenderer):
    _window_name: str
    _tile_size: (int, int)
    _delay: int
    _opened: bool
    _closed: bool

    def __init__(
            self,
            window_name: str = "Image and FFT Viewer",
            tile_size: (int, int) = (256, 256),
            delay: int = 0,
    ):
        self._window_name = window_name
        self._tile_size = tile_size
        self._delay = delay
        self._opened = False
        self._closed = False

    def __display_text(self, text: str, frame: np.ndarray) -> None:
        cv2.putText(
            frame,
            text,
            (10, 25),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.6,
            (250, 0, 250),
            1,
            cv2.LINE_AA
        )

    def __to_tile(self, image: np.ndarray) -> np.ndarray:
        """
        Приводит изображение к 8-битному BGR и размеру плитки.
        """
        if image.dtype != np.uint8:
            image = cv2.normalize(image, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)

        if image.ndim == 2 or image.shape[2] == 1:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        elif image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

        return cv2.resize(image, self._tile_size, interpolation=cv2.INTER_NEAREST)

    def render(self, name: str, image: np.ndarray, raster: Raster) -> None:
        """
        Показывает исходное изображение и спектр рядом. Esc закрывает окно до конца пакета.
        """
        if self._closed:
            return

        original = self.__to_tile(image)
        spectrum = self.__to_tile(raster.to_array())

        self.__display_text(f"Original: {name}", original)
        self.__display_text("FFT", spectrum)

        cv2.namedWindow(self._window_name, cv2.WINDOW_NORMAL)
        self._opened = True
        cv2.imshow(self._window_name, cv2.hconcat([original, spectrum]))

        key = cv2.waitKey(self._delay) & 0xFF
        if key == 27:
            self.close()

    def close(self) -> None:
        if self._opened and not self._closed:
            cv2.destroyWindow(self._window_name)
        self._closed = True

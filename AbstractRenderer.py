import numpy as np
from abc import ABC, abstractmethod

from raster import Raster


class AbstractRenderer(ABC):
    @abstractmethod
    def render(
            self,
            name: str,
            image: np.ndarray,
            raster: Raster
    ) -> None:
        """
        Показ пары: исходное изображение и его спектр.

        :param name: имя исходного файла.
        :param image: исходное изображение (как загружено).
        :param raster: растр спектра.
        """
        pass

    def close(self) -> None:
        """
        Завершение показа после обработки всех файлов.
        """
        pass

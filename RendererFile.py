import os

import numpy as np

from AbstractRenderer import AbstractRenderer
from image_io import save_raster
from raster import Raster


class RendererFile(AbstractRenderer):
    def __init__(self, output_dir: str, suffix: str = "_fft", extension: str = ".png"):
        self.output_dir = output_dir
        self.suffix = suffix
        self.extension = extension
        self.saved: list[str] = []

    def output_path(self, name: str) -> str:
        base_name = os.path.splitext(os.path.basename(name))[0]
        return os.path.join(self.output_dir, f"{base_name}{self.suffix}{self.extension}")

    def render(self, name: str, image: np.ndarray, raster: Raster) -> None:
        """
        Сохраняет спектр в папку вывода как <имя>_fft.png.
        """
        self.saved.append(save_raster(raster, self.output_path(name)))

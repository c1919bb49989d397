import os
from typing import Callable

import numpy as np

from AbstractRenderer import AbstractRenderer
from dft import PlanCache
from errors import SpectrumError
from image_io import IMAGE_EXTENSIONS, collect_images, load_image
from pipeline import process_batch
from raster import Raster


class SpectrumApplication:
    _renderer_factory: Callable[[], AbstractRenderer]
    _extensions: tuple[str, ...]
    _plan_cache: PlanCache | None
    _debug: bool

    def __init__(
            self,
            renderer_factory: Callable[[], AbstractRenderer],
            extensions: tuple[str, ...] = IMAGE_EXTENSIONS,
            cache_plans: bool = False,
            debug: bool = False,
    ):
        self._renderer_factory = renderer_factory
        self._extensions = extensions
        self._plan_cache = PlanCache() if cache_plans else None
        self._debug = debug
        self.failures: dict[str, SpectrumError] = {}

    def __describe(self, path: str, image: np.ndarray) -> str:
        height, width = image.shape[:2]
        channels = 1 if image.ndim == 2 else image.shape[2]
        return f'{path} | {width}x{height} | {channels} ch | {image.dtype}'

    def __report_failure(self, path: str, error: SpectrumError) -> None:
        self.failures[path] = error
        print(f'{path} | skipped: {type(error).__name__}: {error}')

    def expand(self, inputs: list[str]) -> list[str]:
        """
        Раскрывает папки в списки файлов с допустимыми расширениями.

        :param inputs: пути к файлам или папкам
        :return: пути к файлам в исходном порядке
        """
        paths = []
        for item in inputs:
            if os.path.isdir(item):
                paths.extend(collect_images(item, self._extensions))
            else:
                paths.append(item)
        return paths

    def process(self, inputs: list[str]) -> list[Raster]:
        """
        Метод запуска построения спектров для набора файлов

        Неудачные файлы пропускаются, остальные обрабатываются дальше.

        :param inputs: пути к файлам или папкам
        :return: успешные растры спектров в исходном порядке
        """
        self.failures = {}

        names = []
        images = []
        for path in self.expand(inputs):
            try:
                image = load_image(path)
            except SpectrumError as error:
                self.__report_failure(path, error)
                continue

            print(self.__describe(path, image))
            names.append(path)
            images.append(image)

        failed = set()

        def on_error(index: int, error: SpectrumError) -> None:
            failed.add(index)
            self.__report_failure(names[index], error)

        rasters = process_batch(images, on_error, self._plan_cache)

        rendered = []
        renderer = self._renderer_factory()
        try:
            succeeded = [index for index in range(len(images)) if index not in failed]
            for index, raster in zip(succeeded, rasters):
                try:
                    renderer.render(names[index], images[index], raster)
                except SpectrumError as error:
                    self.__report_failure(names[index], error)
                    continue
                rendered.append(raster)
        finally:
            renderer.close()
            if self._plan_cache is not None:
                self._plan_cache.invalidate()

        if self._debug:
            print(f'Processed {len(rendered)} of {len(rendered) + len(self.failures)} files')

        return rendered

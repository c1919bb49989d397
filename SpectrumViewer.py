import logging
import sys

from RendererFile import RendererFile
from RendererWindow import RendererWindow
from SpectrumApplication import SpectrumApplication

OUTPUT_DIR = "resources/fft"

images_to_process = [
    "resources",
]


def main(argv: list[str]) -> int:
    show = "--show" in argv
    inputs = [item for item in argv if item != "--show"] or images_to_process

    logging.basicConfig(level=logging.INFO, format='%(name)s - %(levelname)s - %(message)s')

    app = SpectrumApplication(
        renderer_factory=(lambda: RendererWindow()) if show else (lambda: RendererFile(OUTPUT_DIR)),
        cache_plans=True,
        debug=True,
    )
    app.process(inputs)

    print("Spectrum processing finished")
    return 1 if app.failures else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

import sys
import time
import warnings
from argparse import ArgumentParser, ArgumentTypeError
from dataclasses import dataclass
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}
VERBOSE = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


import numpy as np
import PIL.Image

from fractal import (
    PARALLEL,
    SEQUENTIAL,
    ImageBounds,
    PlaneRectangle,
    RenderParameters,
    allocate_pixels,
    parse_complex,
    parse_mode,
    parse_pair,
    render_parallel,
    render_sequential,
)
from fractal.parsing import mode_tokens


@dataclass
class RenderConfig:
    output_path: Path
    image_format: str
    bounds: ImageBounds
    rectangle: PlaneRectangle
    mode: str
    params: RenderParameters


def _typed(parse, message):
    def convert(value):
        parsed = parse(value)
        if parsed is None:
            raise ArgumentTypeError(f"{message}: {value!r}")
        return parsed

    return convert


def build_parser():
    parser = ArgumentParser(
        description='Render a region of the Mandelbrot set to an image file.',
        epilog='Example: mandel.py --output mandel.png --size 1000x750 '
               '--upper-left=-1.20,0.35 --lower-right=-1,0.20 --mode Multi',
    )

    parser.add_argument('--output', type=str, dest='output',
                        help='image file to write', metavar='FILE', default='mandel.png')

    parser.add_argument('--size', type=_typed(lambda s: parse_pair(s, 'x', int), 'error parsing image dimensions'),
                        dest='size', help='image size in pixels, e.g. 1000x750',
                        metavar='WIDTHxHEIGHT', default='1000x750')

    parser.add_argument('--upper-left', type=_typed(parse_complex, 'error parsing upper left corner point'),
                        dest='upper_left', help='upper-left corner as RE,IM (use --upper-left=-1.2,0.35 for negatives)',
                        metavar='RE,IM', default='-1.20,0.35')

    parser.add_argument('--lower-right', type=_typed(parse_complex, 'error parsing lower right corner point'),
                        dest='lower_right', help='lower-right corner as RE,IM',
                        metavar='RE,IM', default='-1,0.20')

    parser.add_argument('--mode', type=_typed(parse_mode, "error parsing mode - can only be 'Single' or 'Multi'"),
                        dest='mode', help=f'rendering strategy. Choices: {", ".join(mode_tokens())}.',
                        metavar='MODE', default=PARALLEL)

    parser.add_argument('--iterations', type=int, dest='iterations',
                        help='escape-time iteration limit', metavar='N', default=255)

    parser.add_argument('--rows-per-band', type=int, dest='rows_per_band',
                        help='number of image rows per unit of parallel work', metavar='N', default=1)

    parser.add_argument('--format', type=str, dest='format',
                        help='file format for the image. Can be any extension supported by Pillow. Default: "png".',
                        metavar='FORMAT', default='png')

    parser.add_argument('--alpha', action='store_true',
                        help='write an RGBA image with an opaque alpha channel instead of RGB.')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging of the render.')

    return parser


def resolve_render_config(opt, parser: ArgumentParser) -> RenderConfig:
    width, height = opt.size
    if width <= 0 or height <= 0:
        parser.error(f"Image dimensions must be positive, got {width}x{height}.")
    if opt.iterations < 1:
        parser.error("--iterations must be at least 1.")
    if opt.rows_per_band < 1:
        parser.error("--rows-per-band must be at least 1.")

    image_format = (opt.format or "png").lower().lstrip(".") or "png"
    output_path = Path(opt.output).expanduser()
    if not output_path.suffix:
        output_path = output_path.with_suffix(f".{image_format}")

    rectangle = PlaneRectangle(upper_left=opt.upper_left, lower_right=opt.lower_right)
    if rectangle.is_inverted():
        warnings.warn(
            "Upper-left corner is not above and to the left of the lower-right corner; "
            "the image will be mirrored.",
            UserWarning,
            stacklevel=2,
        )

    return RenderConfig(
        output_path=output_path.resolve(),
        image_format=image_format,
        bounds=ImageBounds(width, height),
        rectangle=rectangle,
        mode=opt.mode,
        params=RenderParameters(
            iteration_limit=opt.iterations,
            channels=4 if opt.alpha else 3,
            rows_per_band=opt.rows_per_band,
        ),
    )


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def write_single_image(pixels: np.ndarray, output_path: Path, image_format: str) -> None:
    """Write ``pixels`` to ``output_path`` using the provided format."""

    image = PIL.Image.fromarray(pixels)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=_pil_format_name(image_format))


def render(config: RenderConfig) -> np.ndarray:
    pixels = allocate_pixels(config.bounds, config.params.channels)
    log("Rendering %dx%d over %s .. %s (%s)" % (
        config.bounds.width, config.bounds.height,
        config.rectangle.upper_left, config.rectangle.lower_right, config.mode))

    start = time.perf_counter()
    if config.mode == SEQUENTIAL:
        render_sequential(pixels, config.bounds, config.rectangle, config.params)
    else:
        total = -(-config.bounds.height // config.params.rows_per_band)
        done = 0

        def progress(band):
            nonlocal done
            done += 1
            log("band {0} out of {1}".format(done, total), end='\r')

        render_parallel(pixels, config.bounds, config.rectangle, config.params, on_band=progress)
        log("")
    log("Rendered in %.2f seconds" % (time.perf_counter() - start))
    return pixels


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    config = resolve_render_config(opt, parser)
    pixels = render(config)

    try:
        write_single_image(pixels, config.output_path, config.image_format)
    except (OSError, ValueError, KeyError) as exc:
        raise SystemExit(f"error writing image file {config.output_path}: {exc}") from exc
    log("Wrote %s" % config.output_path)


if __name__ == '__main__':
    main()

import argparse
import sys
import time
from pathlib import Path

import humanize

from errors import GrowthError, ResourceExhaustion
from growth import grow
from raster import grid_to_pixels, save_image
from settings import Settings


def print_status(percent, index, total, start_time):
    print(
        f"{percent}%"
        f", {humanize.precisedelta(time.time() - start_time)}"
        f", {humanize.intword(index)} of {humanize.intword(total)} locations"
    )


def generate(settings, output_image_path=None, quiet=False):
    start_time = time.time()

    settings.validate()

    if output_image_path is None:
        output_image_path = Path(settings.default_filename)

    print(f"Start {output_image_path}")

    if quiet:
        on_progress = None
    else:

        def on_progress(percent, index, total):
            print_status(percent, index, total, start_time)

    try:
        grid = grow(settings, on_progress)

        print("Saving image...")
        pixels = grid_to_pixels(grid, settings.color_size)
    except ResourceExhaustion:
        raise
    except MemoryError as error:
        raise ResourceExhaustion(
            f"Ran out of memory while growing scale {settings.scale}"
        ) from error

    save_image(pixels, output_image_path)

    print(
        f"🎉 Placed all {humanize.intcomma(settings.color_count)} colors"
        f" in {humanize.precisedelta(time.time() - start_time)}"
    )

    return output_image_path


def add_parser_arguments(parser):
    parser.add_argument(
        "scale",
        type=int,
        help="The image is scale**3 pixels wide and high, with scale**2 levels per color channel",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=0,
        help="The seed of the random number generator; the same seed always gives the same image",
    )
    parser.add_argument(
        "-n",
        "--num-seeds",
        type=int,
        default=None,
        help="How many random colors the image starts growing from; defaults to 2 * scale",
    )
    parser.add_argument(
        "-o",
        "--output-image-path",
        type=Path,
        default=None,
        help="The path where to save the output image to; defaults to img-{scale}-{num_seeds}-{seed}.png",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't print the progress",
    )


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_parser_arguments(parser)
    args = parser.parse_args()

    settings = Settings(args.scale, seed=args.seed, num_seeds=args.num_seeds)

    try:
        generate(settings, args.output_image_path, args.quiet)
    except GrowthError as error:
        print(f"❌ {error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

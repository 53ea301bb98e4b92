import argparse
from pathlib import Path

import numpy as np
from PIL import Image
from skimage import color

from raster import color_base_to_color
from settings import Settings


def _get_colors_and_counts(arr):
    # Arrange all pixels into a tall column of 3 RGB values and find unique rows (colors)
    colors, counts = np.unique(arr.reshape(-1, 3), axis=0, return_counts=1)

    return colors, counts


def _get_expected_colors(settings):
    levels = np.arange(settings.color_size)

    # Sorted the same way as np.unique() sorts rows
    color_bases = np.stack(
        np.meshgrid(levels, levels, levels, indexing="ij"), axis=-1
    ).reshape(-1, 3)

    return color_base_to_color(color_bases, settings.color_size)


def verify(image_path, scale):
    print("Verifying...")

    settings = Settings(scale).validate()

    arr = np.array(Image.open(image_path).convert("RGB"))

    assert arr.shape[:2] == (
        settings.size,
        settings.size,
    ), f"❌ The image is {arr.shape[1]}x{arr.shape[0]} instead of {settings.size}x{settings.size}!"

    colors, counts = _get_colors_and_counts(arr)

    assert (counts == 1).all(), "❌ The image has a color more than once!"

    assert np.array_equal(
        colors, _get_expected_colors(settings)
    ), "❌ The colors of the image aren't the colors of the color cube!"

    print("🎉 Every color appears exactly once!")


def smoothness(image_path):
    """
    Returns the mean CIE76 color difference between horizontally
    and vertically adjacent pixels; lower means smoother.
    """
    arr = np.array(Image.open(image_path).convert("RGB"), dtype=np.float32)

    # "rgb2lab() expects RGB values between 0 and 1"
    lab = color.rgb2lab(arr / 255)

    horizontal = color.deltaE_cie76(lab[:, :-1], lab[:, 1:])
    vertical = color.deltaE_cie76(lab[:-1, :], lab[1:, :])

    differences = np.concatenate((horizontal.ravel(), vertical.ravel()))

    # A 1x1 image has no neighbors
    if differences.size == 0:
        return 0.0

    return float(differences.mean())


def add_parser_arguments(parser):
    parser.add_argument(
        "image_path",
        type=Path,
        help="Path to the generated image",
    )
    parser.add_argument(
        "scale",
        type=int,
        help="The scale the image was generated with",
    )


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_parser_arguments(parser)
    args = parser.parse_args()

    verify(args.image_path, args.scale)

    print(f"Mean neighbor difference: {smoothness(args.image_path):.3f} ΔE")


if __name__ == "__main__":
    main()

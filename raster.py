import os
from pathlib import Path

import numpy as np
from PIL import Image

from errors import PreconditionViolation


def color_base_to_color(color_bases, color_size):
    """Stretches color bases in [0, color_size) to 8-bit channels in [0, 255]."""
    color_bases = np.asarray(color_bases, dtype=np.float64)

    # A single level can't be stretched, so it becomes black
    if color_size == 1:
        return np.zeros(color_bases.shape, dtype=np.uint8)

    return np.round(color_bases * 255 / (color_size - 1)).astype(np.uint8)


def grid_to_pixels(grid, color_size):
    """
    Returns the (height, width, 3) uint8 pixels of a fully colored grid.

    Grid rows become image columns, so location (row, col) ends up at x=row, y=col.
    """
    if any(color is None for row in grid for color in row):
        raise PreconditionViolation("The grid still has locations without a color")

    color_bases = np.array(grid, dtype=np.uint8)

    # Swap the row and col axes
    color_bases = np.transpose(color_bases, (1, 0, 2))

    return color_base_to_color(color_bases, color_size)


def save_image(pixels, output_image_path):
    """
    Saves the pixels as an RGB image.

    The image is written next to output_image_path first,
    so a failed save never leaves a partial image behind.
    """
    output_image_path = Path(output_image_path)
    tmp_path = output_image_path.with_name(f".{output_image_path.name}.tmp")

    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))

    try:
        # The format has to be given, since the .tmp suffix hides it from Pillow
        image_format = Image.registered_extensions().get(
            output_image_path.suffix.lower(), "PNG"
        )
        img.save(tmp_path, format=image_format)
        os.replace(tmp_path, output_image_path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

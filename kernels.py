import numpy as np


def squared_lengths(offsets):
    # int64, since the color kernel at scale 16 already reaches 3 * 255**2
    offsets = np.asarray(offsets, dtype=np.int64)
    return np.sum(offsets * offsets, axis=-1)


def get_offsets(radius, dimensions):
    """
    Returns every offset in [-radius, radius] along each of the dimensions,
    sorted by their distance to the origin.

    Offsets are generated in row-major order, and the sort is stable,
    so offsets with the same distance keep that order.
    """
    axis = np.arange(-radius, radius + 1, dtype=np.int32)

    grids = np.meshgrid(*([axis] * dimensions), indexing="ij")
    offsets = np.stack(grids, axis=-1).reshape(-1, dimensions)

    order = np.argsort(squared_lengths(offsets), kind="stable")

    return offsets[order]


def spatial_offsets(size):
    """All (dr, dc) that can connect two locations on a size x size canvas."""
    return get_offsets(size - 1, 2)


def color_offsets(color_size):
    """All (dr, dg, db) that can connect two colors of the color cube."""
    return get_offsets(color_size - 1, 3)

"""
Grows an image in which every color of the color cube appears exactly once.

Rather than placing random colors at the best fitting location,
this visits the locations in a random order and gives each one
the unused color that is most similar to the nearest placed color:
1. Pick the next location
2. Find the closest location that already has a color
3. Take the color of that location
4. Find the nearest unused color
5. Put that color in the location

The first num_seeds locations get a uniformly random color instead,
so the image grows from several unrelated starting points.
"""

from itertools import islice

import numpy as np

import kernels
from errors import PreconditionViolation, ResourceExhaustion
from frontier import Frontier
from sampler import SlotSet


class Growth:
    def __init__(self, settings):
        self.settings = settings.validate()

        self.size = settings.size
        self.color_size = settings.color_size
        self.location_count = settings.location_count

        try:
            self.rng = np.random.default_rng(settings.seed)

            # Drawn before any seed color, so the order only depends on the seed
            self.order = self.rng.permutation(self.location_count)

            self.location_offsets = [
                tuple(offset) for offset in kernels.spatial_offsets(self.size).tolist()
            ]
            self.color_offsets = [
                tuple(offset)
                for offset in kernels.color_offsets(self.color_size).tolist()
            ]

            self.grid = [[None] * self.size for _ in range(self.size)]

            self.unused_colors = SlotSet(
                (r, g, b)
                for r in range(self.color_size)
                for g in range(self.color_size)
                for b in range(self.color_size)
            )
        except MemoryError as error:
            raise ResourceExhaustion(
                f"Not enough memory for scale {settings.scale}"
                f" ({settings.location_count} locations)"
            ) from error

        self.frontier = Frontier(self.color_size)

        self.index = 0

    @property
    def done(self):
        return self.index >= self.location_count

    def location(self, index):
        return divmod(int(self.order[index]), self.size)

    def step(self):
        """Colors the next location, and returns that location and its color."""
        location = self.location(self.index)

        if self.index < self.settings.num_seeds:
            color = self.unused_colors.remove_random(self.rng)
            if color is None:
                raise PreconditionViolation(
                    f"No unused color was left for seed {self.index}"
                )
        else:
            reference = self.reference_color(location)
            color = self.nearest_unused_color(reference)

        self.frontier.discard(color)
        self.unused_colors.discard(color)
        self.frontier.expand(color, self.unused_colors)

        row, col = location
        self.grid[row][col] = color

        self.index += 1

        return location, color

    def reference_color(self, location):
        row, col = location

        for dr, dc in self.location_offsets:
            r = row + dr
            c = col + dc

            if 0 <= r < self.size and 0 <= c < self.size:
                color = self.grid[r][c]
                if color is not None:
                    return color

        raise PreconditionViolation(
            f"No colored location was found around {location}"
        )

    def nearest_unused_color(self, reference):
        ref_r, ref_g, ref_b = reference

        # The frontier size bounds how far the kernel is worth scanning
        for dr, dg, db in islice(self.color_offsets, len(self.frontier)):
            r = ref_r + dr
            g = ref_g + dg
            b = ref_b + db

            if (
                0 <= r < self.color_size
                and 0 <= g < self.color_size
                and 0 <= b < self.color_size
                and (r, g, b) in self.unused_colors
            ):
                return (r, g, b)

        color = self.frontier.nearest(reference)
        if color is None:
            raise PreconditionViolation(
                f"The frontier was empty while growing from {reference}"
            )

        return color

    def run(self, on_progress=None):
        """
        Colors all remaining locations and returns the grid.

        on_progress(percent, index, total) gets called about every 1% of locations.
        """
        progress_interval = max(1, self.location_count // 100)

        while not self.done:
            if on_progress is not None and self.index % progress_interval == 0:
                on_progress(
                    self.index * 100 // self.location_count,
                    self.index,
                    self.location_count,
                )

            self.step()

        assert not self.unused_colors, "❌ Not every color got used!"
        assert all(
            color is not None for row in self.grid for color in row
        ), "❌ Not every location got a color!"

        return self.grid


def grow(settings, on_progress=None):
    return Growth(settings).run(on_progress)

from dataclasses import dataclass
from typing import Optional

from errors import ConfigurationError

# Every channel gets scale**2 levels, which have to fit in a uint8
MAX_SCALE = 16

MAX_SEED = 2**64


@dataclass(frozen=True)
class Settings:
    scale: int
    seed: int = 0
    num_seeds: Optional[int] = None

    def __post_init__(self):
        if self.num_seeds is None:
            # Two seeds per scale, unless there aren't that many colors
            num_seeds = min(2 * self.scale, self.color_count)

            # Frozen dataclasses need object.__setattr__() to fill in defaults
            object.__setattr__(self, "num_seeds", num_seeds)

    @property
    def size(self):
        """The side length of the canvas."""
        return self.scale**3

    @property
    def color_size(self):
        """The number of levels per color channel."""
        return self.scale**2

    @property
    def color_count(self):
        return self.color_size**3

    @property
    def location_count(self):
        return self.size**2

    @property
    def default_filename(self):
        return f"img-{self.scale}-{self.num_seeds}-{self.seed}.png"

    def validate(self):
        if self.scale < 1:
            raise ConfigurationError(f"scale must be at least 1, got {self.scale}")

        if self.scale > MAX_SCALE:
            raise ConfigurationError(
                f"scale must be at most {MAX_SCALE}, since {self.scale}**2 color"
                " levels per channel don't fit in 8 bits"
            )

        if self.num_seeds < 1:
            raise ConfigurationError(
                f"num_seeds must be at least 1, got {self.num_seeds}"
            )

        if self.num_seeds > self.color_count:
            raise ConfigurationError(
                f"num_seeds {self.num_seeds} exceeds the {self.color_count}"
                f" available colors at scale {self.scale}"
            )

        if not 0 <= self.seed < MAX_SEED:
            raise ConfigurationError(
                f"seed must be an unsigned 64-bit integer, got {self.seed}"
            )

        return self

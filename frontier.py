def color_neighbors(color, color_size):
    """The colors that differ from color by one level in exactly one channel."""
    r, g, b = color

    neighbors = []

    if r > 0:
        neighbors.append((r - 1, g, b))
    if r < color_size - 1:
        neighbors.append((r + 1, g, b))
    if g > 0:
        neighbors.append((r, g - 1, b))
    if g < color_size - 1:
        neighbors.append((r, g + 1, b))
    if b > 0:
        neighbors.append((r, g, b - 1))
    if b < color_size - 1:
        neighbors.append((r, g, b + 1))

    return neighbors


def squared_color_distance(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


class Frontier:
    """The unused colors that neighbor at least one placed color."""

    def __init__(self, color_size):
        self.color_size = color_size
        self._colors = set()

    def __len__(self):
        return len(self._colors)

    def __contains__(self, color):
        return color in self._colors

    def __iter__(self):
        return iter(self._colors)

    def discard(self, color):
        self._colors.discard(color)

    def expand(self, placed_color, unused_colors):
        for neighbor in color_neighbors(placed_color, self.color_size):
            if neighbor in unused_colors:
                self._colors.add(neighbor)

    def nearest(self, reference):
        """
        Returns the frontier color closest to reference,
        preferring the lexicographically smallest color on ties.
        """
        if not self._colors:
            return None

        return min(
            self._colors,
            key=lambda color: (squared_color_distance(color, reference), color),
        )

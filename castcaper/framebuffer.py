"""A flat 32-bit pixel buffer that the renderer draws into."""

COLOUR_MASK = 0xFFFFFFFF


class FrameBuffer:
    """A width x height grid of 32-bit colours stored row by row."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def clear(self, colour):
        """Fill every pixel with one colour."""
        self.pixels[:] = [colour & COLOUR_MASK] * len(self.pixels)

    def _index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return y * self.width + x

    def get(self, x, y):
        """Return the colour at (x, y)."""
        return self.pixels[self._index(x, y)]

    def set(self, x, y, colour):
        """Store a colour at (x, y)."""
        self.pixels[self._index(x, y)] = colour & COLOUR_MASK
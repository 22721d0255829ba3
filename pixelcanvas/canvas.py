"""RGB pixel buffer with line and circle rasterization.

Logical coordinates are Cartesian: (0, 0) is the bottom-left pixel and y grows
upward. Storage is a flat bytearray in RGB order, top-down row-major, so
logical (x, y) lives at ((height - y - 1) * width + x) * 3.
"""

import colorsys
import math

from pixelcanvas import config
from pixelcanvas.snapshot import Snapshot

# Type aliases for RGB triples and integer points
Color = tuple[int, int, int]
Point = tuple[int, int]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _column_roots(edge: float, center: tuple[float, float], radius_squared: float) -> tuple[float, float]:
    """Upper and lower y where the circle boundary crosses the vertical x = edge.

    Solves (x - h)^2 + (y - k)^2 = r^2 for y. An edge outside the circle
    collapses both roots onto the center row.
    """
    h, k = center
    delta_y = math.sqrt(max(0.0, radius_squared - (edge - h) * (edge - h)))
    return k + delta_y, k - delta_y


class PixelCanvas:
    """Fixed-size RGB canvas with a drawing cursor.

    Every primitive writes through set_pixel, which is the only bounds check:
    out-of-range writes are dropped silently, never raised.
    """

    def __init__(self, width: int, height: int, negative_coords: str | None = None):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        if negative_coords is None:
            negative_coords = config.NEGATIVE_COORDS
        self._negative_coords = config.parse_negative_coords(negative_coords, strict=True)
        self._width = width
        self._height = height
        self._buffer = bytearray(width * height * 3)
        self._cursor: Point = (0, 0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cursor(self) -> Point:
        """Endpoint of the most recent line, or center of the most recent circle."""
        return self._cursor

    @property
    def negative_coords(self) -> str:
        return self._negative_coords

    def _offset(self, x: int, y: int) -> int:
        return ((self._height - y - 1) * self._width + x) * 3

    def _coord(self, value: float) -> int:
        """Convert a computed float coordinate to a pixel coordinate."""
        coord = _round_half_away(value)
        if coord < 0 and self._negative_coords == "clamp":
            return 0
        return coord

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel at logical (x, y). Out-of-bounds writes are silently ignored."""
        if 0 <= x < self._width and 0 <= y < self._height:
            r, g, b = color
            idx = self._offset(x, y)
            # bytes() rejects bad channels before the buffer is touched
            self._buffer[idx:idx + 3] = bytes((r, g, b))

    def get_pixel(self, x: int, y: int) -> Color:
        """Get the color at logical (x, y). Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self._width and 0 <= y < self._height:
            idx = self._offset(x, y)
            return (self._buffer[idx], self._buffer[idx + 1], self._buffer[idx + 2])
        return (0, 0, 0)

    def line_from_to(self, start: Point, end: Point, color: Color) -> None:
        """Draw a line from start to end using y = mx + b, then move the cursor to end.

        The span runs from the smaller to the larger coordinate, excluding the
        larger one: a vertical line never plots its topmost point and any
        other line never plots its rightmost column.
        """
        start_x, start_y = start
        end_x, end_y = end
        if start_x == end_x:
            for y in range(min(start_y, end_y), max(start_y, end_y)):
                self.set_pixel(start_x, y, color)
        else:
            m = (end_y - start_y) / (end_x - start_x)
            b = start_y - m * start_x
            for x in range(min(start_x, end_x), max(start_x, end_x)):
                self.set_pixel(x, self._coord(m * x + b), color)
        self._cursor = (end_x, end_y)

    def line_to(self, end: Point, color: Color) -> None:
        """Draw a line from the cursor to end."""
        self.line_from_to(self._cursor, end, color)

    def circle(self, center: Point, radius: float, color: Color) -> None:
        """Draw a filled circle as per-column vertical spans, then move the cursor to center.

        Column i spans the boundary between its edges i - 0.5 and i + 0.5,
        once for the upper half and once for the lower half. Columns run from
        trunc(x - radius) to round(x + radius), exclusive, clipped to the canvas.
        """
        x, y = center
        if not math.isfinite(radius):
            self._cursor = (x, y)
            return
        first = max(int(x - radius), 0)
        last = min(max(_round_half_away(x + radius), 0), self._width)
        radius_squared = radius * radius
        origin = (float(x), float(y))
        for i in range(first, last):
            left_upper, left_lower = _column_roots(i - 0.5, origin, radius_squared)
            right_upper, right_lower = _column_roots(i + 0.5, origin, radius_squared)
            self.line_from_to((i, self._coord(left_upper)), (i, self._coord(right_upper)), color)
            self.line_from_to((i, self._coord(left_lower)), (i, self._coord(right_lower)), color)
        self._cursor = (x, y)

    def snapshot(self) -> Snapshot:
        """Copy the current buffer into an immutable Snapshot."""
        return Snapshot(self._width, self._height, bytes(self._buffer))

    @staticmethod
    def hsv(h: float, s: float = 1.0, v: float = 1.0) -> Color:
        """Convert HSV to RGB color tuple. h is 0-360, s and v are 0-1."""
        r, g, b = colorsys.hsv_to_rgb(h / 360.0, s, v)
        return (int(r * 255), int(g * 255), int(b * 255))

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Clamp each channel to 0-255."""
        return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

"""Immutable copies of canvas contents for display and export."""

from dataclasses import dataclass

import numpy as np
from PIL import Image

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Snapshot:
    """Frozen RGB frame: top-down row-major bytes, 3 per pixel.

    Coordinates here are storage coordinates (row 0 is the top of the
    image), which is what display and image libraries expect.
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if len(self.data) != self.width * self.height * 3:
            raise ValueError(
                f"Snapshot data is {len(self.data)} bytes, expected {self.width * self.height * 3}"
            )

    def pixel(self, col: int, row: int) -> Color:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"Pixel ({col}, {row}) outside {self.width}x{self.height} snapshot")
        idx = (row * self.width + col) * 3
        return (self.data[idx], self.data[idx + 1], self.data[idx + 2])

    def row(self, row: int) -> bytes:
        """Raw RGB bytes for a single row."""
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} outside {self.width}x{self.height} snapshot")
        start = row * self.width * 3
        return self.data[start:start + self.width * 3]

    def pixels(self) -> list[Color]:
        data = self.data
        return [(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3)]

    def to_array(self) -> np.ndarray:
        """Fresh (height, width, 3) uint8 array; safe to mutate."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 3).copy()

    def to_image(self, scale: int = 1) -> Image.Image:
        """Convert to a PIL image, nearest-neighbour upscaled by scale."""
        img = Image.frombytes("RGB", (self.width, self.height), self.data)
        if scale > 1:
            img = img.resize((self.width * scale, self.height * scale), Image.NEAREST)
        return img

"""Rotating star traced with cursor-relative lines, plus a spoke fan from the center."""

import math

from pixelcanvas import PixelCanvas, run

POINTS = 5


def _star_vertex(cx: int, cy: int, radius: float, angle: float) -> tuple[int, int]:
    return (round(cx + radius * math.cos(angle)), round(cy + radius * math.sin(angle)))


def render(canvas: PixelCanvas, t: float, frame: int) -> None:
    cx, cy = canvas.width // 2, canvas.height // 2
    radius = min(cx, cy) - 4

    # Spokes
    for i in range(16):
        angle = i * math.pi / 8 + t * 0.5
        end = _star_vertex(cx, cy, radius, angle)
        canvas.line_from_to((cx, cy), end, (40, 40, 80))

    # Star outline: every second vertex, closed back to the first
    hue = (t * 40) % 360
    vertices = [
        _star_vertex(cx, cy, radius, t + i * 4 * math.pi / POINTS)
        for i in range(POINTS)
    ]
    canvas.line_from_to(vertices[-1], vertices[0], canvas.hsv(hue))
    for vertex in vertices[1:]:
        canvas.line_to(vertex, canvas.hsv(hue))


if __name__ == "__main__":
    run(render, fps=30, title="Lines")

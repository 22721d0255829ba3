"""Pulsing circle with a color-cycling fill."""

import math

from pixelcanvas import PixelCanvas, run


def render(canvas: PixelCanvas, t: float, frame: int) -> None:
    # Pulsing radius
    r = 10 + 8 * math.sin(t * 2)
    color = canvas.hsv((t * 60) % 360)
    canvas.circle((canvas.width // 2, canvas.height // 2), r, color)


if __name__ == "__main__":
    run(render, fps=30, title="Circle")

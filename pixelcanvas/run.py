"""Main run loop - draws a fresh canvas each frame and shows it in the simulator."""

import time
from typing import Callable

from pixelcanvas import config
from pixelcanvas.canvas import PixelCanvas
from pixelcanvas.simulator import Simulator

# Callback type: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[PixelCanvas, float, int], None]


def run(render: RenderFn, fps: int = config.FPS, title: str = "Pixel Canvas",
        scale: int = config.SCALE, width: int = config.WIDTH, height: int = config.HEIGHT) -> None:
    """Run the render loop with a simulator preview.

    Args:
        render: Callback called each frame with (canvas, elapsed_time, frame_number).
                The canvas is new and black every frame; there is no clear().
        fps: Target frames per second.
        title: Window title.
        scale: Pixel scale factor for the simulator window.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """
    sim = Simulator(width, height, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            canvas = PixelCanvas(width, height)
            render(canvas, t, frame)

            if not sim.update(canvas.snapshot()):
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        print(f"[sim] Closed after {frame} frames")
        sim.close()

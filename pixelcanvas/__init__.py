"""Minimal CPU rasterizer: an RGB pixel canvas with line and circle primitives."""

from pixelcanvas.canvas import PixelCanvas
from pixelcanvas.snapshot import Snapshot
from pixelcanvas.run import run

__all__ = ["PixelCanvas", "Snapshot", "run"]

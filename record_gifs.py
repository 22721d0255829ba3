#!/usr/bin/env python3
"""Record animated GIFs from each demo app by rendering frames headlessly.

Usage: python record_gifs.py
Output: media/demo-*.gif
"""

import os
import sys
import traceback

# Prevent pygame from opening windows or printing its banner
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from pathlib import Path

# Add project root to path so apps/ is importable
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from pixelcanvas import config
from pixelcanvas.canvas import PixelCanvas

MEDIA_DIR = ROOT / "media"

# GIF settings
SCALE = 6          # Upscale factor (64*6 = 384px)
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def render_gif(name: str, render_fn, fps: float = GIF_FPS, duration: float = DURATION_S,
               width: int = config.WIDTH, height: int = config.HEIGHT,
               out_dir: Path = MEDIA_DIR) -> Path:
    """Render frames and save as animated GIF."""
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"demo-{name}.gif"
    n_frames = max(1, int(duration * fps))
    dt = 1.0 / fps
    frames = []

    for i in range(n_frames):
        canvas = PixelCanvas(width, height)
        render_fn(canvas, i * dt, i)
        frames.append(canvas.snapshot().to_image(scale=SCALE))

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {duration}s)")
    return out_path


def record_circle():
    from apps.circle import render
    render_gif("circle", render)


def record_lines():
    from apps.lines import render
    render_gif("lines", render, duration=6.0)


RECORDINGS = [
    ("circle", record_circle),
    ("lines",  record_lines),
]


def main(recordings=RECORDINGS) -> list[str]:
    """Run each recording, reporting failures and carrying on. Returns failed names."""
    print(f"\n[record] Recording demo GIFs to {MEDIA_DIR}/\n")

    failed = []
    for name, fn in recordings:
        try:
            print(f"[record] Recording {name}...")
            fn()
        except Exception as e:
            print(f"[record] ERROR recording {name}: {e}")
            traceback.print_exc()
            failed.append(name)

    print(f"\n[record] Done! GIFs saved to {MEDIA_DIR}/")
    return failed


if __name__ == "__main__":
    sys.exit(1 if main() else 0)

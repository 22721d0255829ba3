"""Environment-driven defaults for the canvas, simulator and recorder.

Values come from the process environment, or from a `.env` file at the
project root (PIXELCANVAS_ENV_FILE points elsewhere). Real environment
variables win over the file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE = Path(os.getenv("PIXELCANVAS_ENV_FILE", Path(__file__).parent.parent / ".env"))
load_dotenv(ENV_FILE)

NEGATIVE_POLICIES = ("skip", "clamp")


def parse_negative_coords(value: str, strict: bool = False) -> str:
    """Normalize a negative-coordinate policy name.

    "skip" leaves a negative computed coordinate as-is so set_pixel drops it,
    "clamp" pins it to 0. Unknown names fall back to "skip" unless strict.
    """
    policy = value.strip().lower()
    if policy in NEGATIVE_POLICIES:
        return policy
    if strict:
        raise ValueError(f"Unknown negative coordinate policy: {value!r}")
    print(f"[config] Unknown PIXELCANVAS_NEGATIVE_COORDS={value!r}, using 'skip'")
    return "skip"


WIDTH = int(os.getenv("PIXELCANVAS_WIDTH", "64"))
HEIGHT = int(os.getenv("PIXELCANVAS_HEIGHT", "64"))
SCALE = int(os.getenv("PIXELCANVAS_SCALE", "10"))
FPS = int(os.getenv("PIXELCANVAS_FPS", "30"))
NEGATIVE_COORDS = parse_negative_coords(os.getenv("PIXELCANVAS_NEGATIVE_COORDS", "skip"))

"""Tests for environment-driven configuration."""

import importlib
import os

import pytest

from pixelcanvas import config
from pixelcanvas.canvas import PixelCanvas


@pytest.mark.parametrize("value, expected", [
    ("skip", "skip"),
    ("clamp", "clamp"),
    (" CLAMP ", "clamp"),
])
def test_parse_negative_coords(value, expected):
    assert config.parse_negative_coords(value) == expected


def test_unknown_policy_falls_back_to_skip(capsys):
    assert config.parse_negative_coords("wrap") == "skip"
    assert "[config]" in capsys.readouterr().out


def test_unknown_policy_strict_raises():
    with pytest.raises(ValueError):
        config.parse_negative_coords("wrap", strict=True)


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)
    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for key in ("PIXELCANVAS_WIDTH", "PIXELCANVAS_HEIGHT", "PIXELCANVAS_SCALE",
                "PIXELCANVAS_FPS", "PIXELCANVAS_NEGATIVE_COORDS"):
        monkeypatch.delenv(key, raising=False)
    cfg = reload_config()
    assert (cfg.WIDTH, cfg.HEIGHT, cfg.SCALE, cfg.FPS) == (64, 64, 10, 30)
    assert cfg.NEGATIVE_COORDS == "skip"


def test_env_overrides(reload_config):
    cfg = reload_config(PIXELCANVAS_WIDTH="16", PIXELCANVAS_NEGATIVE_COORDS="clamp")
    assert cfg.WIDTH == 16
    assert cfg.NEGATIVE_COORDS == "clamp"
    assert PixelCanvas(4, 4).negative_coords == "clamp"


def test_env_file_values_loaded(reload_config, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PIXELCANVAS_HEIGHT=24\nPIXELCANVAS_FPS=12\n")
    monkeypatch.delenv("PIXELCANVAS_HEIGHT", raising=False)
    monkeypatch.setenv("PIXELCANVAS_FPS", "50")
    try:
        cfg = reload_config(PIXELCANVAS_ENV_FILE=str(env_file))
        assert cfg.ENV_FILE == env_file
        assert cfg.HEIGHT == 24
        # Real environment wins over the file
        assert cfg.FPS == 50
    finally:
        # load_dotenv writes os.environ directly, outside monkeypatch
        os.environ.pop("PIXELCANVAS_HEIGHT", None)

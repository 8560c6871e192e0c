import copy
import json
import math
from typing import Any, Dict, Optional

DEFAULTS: Dict[str, Any] = {
    "width": 1280,
    "height": 720,
    "frames": 2,
    "center": [-0.5, 0.0],
    "final_zoom": 4.0,
    "max_iter": 16000,
    "frames_dir": "frames",
    "output_video": "mandelbrot_zoom.mp4",
    "fps": 30,
    "progress": True,
}


class ConfigError(ValueError):
    """A render configuration that cannot produce a valid zoom sequence."""


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULTS)
    if not config_path:
        return cfg

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config {config_path} is not valid JSON: {e}") from e
    if not isinstance(loaded, dict):
        raise ConfigError("Config JSON must be an object.")
    cfg.update(loaded)
    return cfg


def normalise_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce config values to their expected types and reject values for which the
    zoom geometry or the palette would divide by zero.
    """
    for r in DEFAULTS:
        if r not in cfg:
            raise ConfigError(f"Missing config field: {r}")

    try:
        width = int(cfg["width"])
        height = int(cfg["height"])
        frames = int(cfg["frames"])
        max_iter = int(cfg["max_iter"])
        fps = int(cfg["fps"])
        final_zoom = float(cfg["final_zoom"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid numeric config value: {e}") from e

    if width < 2 or height < 2:
        raise ConfigError("width/height must be at least 2.")
    if frames < 2:
        raise ConfigError("frames must be at least 2.")
    if max_iter < 2:
        raise ConfigError("max_iter must be at least 2.")
    if fps <= 0:
        raise ConfigError("fps must be positive.")
    if not math.isfinite(final_zoom) or final_zoom < 1.0:
        raise ConfigError("final_zoom must be a finite number >= 1.0.")

    center = cfg["center"]
    if not (isinstance(center, (list, tuple)) and len(center) == 2):
        raise ConfigError("center must be [re, im].")
    try:
        xcenter, ycenter = float(center[0]), float(center[1])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"center must be numeric: {e}") from e
    if not (math.isfinite(xcenter) and math.isfinite(ycenter)):
        raise ConfigError("center must be finite.")

    out = dict(cfg)
    out["width"] = width
    out["height"] = height
    out["frames"] = frames
    out["max_iter"] = max_iter
    out["fps"] = fps
    out["final_zoom"] = final_zoom
    out["center"] = [xcenter, ycenter]
    out["frames_dir"] = str(cfg["frames_dir"])
    out["output_video"] = str(cfg["output_video"])
    out["progress"] = bool(cfg["progress"])
    return out

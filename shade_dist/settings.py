import os
from dotenv import load_dotenv

# Picks up a .env from the working directory (or any parent); real env vars win.
load_dotenv()

ENV_PREFIX = "SHADE_DIST_"


# --- small helpers for env parsing ---
def _env_str(name: str, default: str) -> str:
    v = os.getenv(ENV_PREFIX + name)
    if v is None or not v.strip():
        return default
    return v.strip()


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(ENV_PREFIX + name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    v = os.getenv(ENV_PREFIX + name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(ENV_PREFIX + name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


# --- Logging ---
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO")

# --- Shading defaults (read explicitly through ShadeConfig.from_settings) ---
SHADE_COLOR = _env_str("SHADE_COLOR", "skyblue")
LINE_COLOR = _env_str("LINE_COLOR", "black")
LINE_WIDTH = _env_float("LINE_WIDTH", 3.0)
BREAK_COUNT = _env_int("BREAK_COUNT", 1000)
Y_LABEL = _env_str("Y_LABEL", "Density")

# Colour used to overpaint the middle of a two-tailed region; should match the plot background
ERASE_COLOR = _env_str("ERASE_COLOR", "white")

# Samples used to stroke the density curve itself (not the shaded polygons)
CURVE_POINTS = _env_int("CURVE_POINTS", 101)

# --- Figure size for surfaces created on the caller's behalf (inches) ---
FIGURE_WIDTH = _env_float("FIGURE_WIDTH", 7.0)
FIGURE_HEIGHT = _env_float("FIGURE_HEIGHT", 5.0)

# Show tick numbers on the restored axes (off gives a "read the shape" figure)
SHOW_AXIS_NUMBERS = _env_bool("SHOW_AXIS_NUMBERS", True)

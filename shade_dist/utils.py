import logging
import math
from typing import Any, Optional

from . import settings


# -------- logging setup --------

def setup_logger(name, level_str=settings.LOG_LEVEL):
    """
    Sets up a module logger with a console stream handler.
    Propagation stays ON so an application can still attach its own
    handlers to the root logger.
    """
    log_level = getattr(logging, str(level_str).upper(), logging.INFO)
    formatter = logging.Formatter('%(asctime)s - %(levelname)5s | %(name)s | %(message)s')

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Avoid duplicate console handlers on repeated imports
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        logger.addHandler(handler)

    logger.propagate = True
    return logger


# -------- small numeric helpers --------

def safe_float(x: Any) -> Optional[float]:
    """float(x) for finite numbers; None for anything else (None, bools, NaN, junk strings)."""
    if x is None or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def fmt_num(x: float) -> str:
    """Compact number for log lines: 0.5, -3, 1.25e-07."""
    return f"{x:.6g}"

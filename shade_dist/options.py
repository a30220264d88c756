"""
options.py — Explicit rendering configuration for shade_region.

Defaults here are plain literals. Environment overrides only apply when a
caller asks for them with ShadeConfig.from_settings().
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from . import settings
from .errors import InvalidArgument


@dataclass(frozen=True)
class ShadeConfig:
    shade_color: str = "skyblue"
    line_color: str = "black"
    line_width: float = 3.0
    break_count: int = 1000
    y_label: str = "Density"
    erase_color: str = "white"
    curve_points: int = 101

    @classmethod
    def from_settings(cls) -> "ShadeConfig":
        """Build a config from the SHADE_DIST_* environment (see settings.py)."""
        return cls(
            shade_color=settings.SHADE_COLOR,
            line_color=settings.LINE_COLOR,
            line_width=settings.LINE_WIDTH,
            break_count=settings.BREAK_COUNT,
            y_label=settings.Y_LABEL,
            erase_color=settings.ERASE_COLOR,
            curve_points=settings.CURVE_POINTS,
        )

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in dataclasses.fields(cls))

    def replace(self, **changes: Any) -> "ShadeConfig":
        unknown = set(changes) - self.field_names()
        if unknown:
            raise InvalidArgument(f"Unknown ShadeConfig field(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    def validate(self) -> "ShadeConfig":
        if isinstance(self.break_count, bool) or not isinstance(self.break_count, int):
            raise InvalidArgument(f"break_count must be an integer, got {self.break_count!r}")
        if self.break_count < 1:
            raise InvalidArgument(f"break_count must be >= 1, got {self.break_count}")
        if isinstance(self.curve_points, bool) or not isinstance(self.curve_points, int) or self.curve_points < 2:
            raise InvalidArgument(f"curve_points must be an integer >= 2, got {self.curve_points!r}")
        if not self.line_width > 0:
            raise InvalidArgument(f"line_width must be positive, got {self.line_width!r}")
        return self

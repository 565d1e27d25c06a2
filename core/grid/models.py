"""
5e Reference: PHB ch.9 (grid movement).
Purpose: Immutable value types for measuring between tokens.
Dependencies: core/errors.py.
Ext Hooks: Hex grids (cell_size per axis).
"""

import math
from dataclasses import dataclass
from core.errors import ConfigurationError


@dataclass(frozen=True)
class Position:
    """Token snapshot: x/y in scene pixels, elevation already in grid units (ft)."""
    x: float = 0.0
    y: float = 0.0
    elevation: float = 0.0

    def __post_init__(self):
        for field_name in ("x", "y", "elevation"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{field_name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class GridConfig:
    """
    Scene grid parameters.
    - cell_size: pixels per grid square.
    - unit_distance: real distance one square represents (5 for 5 ft).
    - unit_label: label shown next to distances ('ft', 'm').
    """
    cell_size: float = 100
    unit_distance: float = 5
    unit_label: str = "ft"

    def __post_init__(self):
        for field_name in ("cell_size", "unit_distance"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{field_name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{field_name} must be finite and positive, got {value!r}")


@dataclass(frozen=True)
class DistanceResult:
    euclid: float
    phb: float
    dmg: float

    def to_dict(self):
        return {"euclid": self.euclid, "phb": self.phb, "dmg": self.dmg}

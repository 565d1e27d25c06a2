"""
5e Reference: PHB ch.9 (5 ft squares).
Purpose: Configs for the default scene grid and the distance service.
Dependencies: os, core/grid/models.py.
Ext Hooks: Per-scene grid overrides.
"""

import os
from core.grid.models import GridConfig

GRID_SIZE = 100  # pixels per square
GRID_DISTANCE = 5  # ft per square
GRID_UNITS = "ft"

ASSISTANT_ROLE = 3  # players below this fall back to their owned tokens

SERVER_URL = os.environ.get("TABLETOP_SERVER_URL", "http://localhost:5000")
LOG_LEVEL = os.environ.get("TABLETOP_LOG_LEVEL", "INFO").upper()


def default_grid():
    return GridConfig(cell_size=GRID_SIZE, unit_distance=GRID_DISTANCE, unit_label=GRID_UNITS)

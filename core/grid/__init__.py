"""
Square grid measurement: positions, grid parameters and the three distance rules.
"""

from core.grid.models import Position, GridConfig, DistanceResult
from core.grid.distance import euclidean_distance, phb_distance, dmg_distance, measure

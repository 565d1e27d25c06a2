"""
5e Reference: PHB ch.9 (grid movement, diagonals cost 1 square); DMG ch.8 (variant: every second diagonal costs 2).
Purpose: Token-to-token distance under Euclidean, PHB and DMG rules, with elevation.
Dependencies: math, core/grid/models.py.
Ext Hooks: Hex grid rules.

Any move not on a single axis counts as diagonal, so for PHB and DMG a move
east + north + up costs the same as east + north.
"""

import math
from core.grid.models import DistanceResult


def round_half_up(value):
    """Nearest integer, halves away from zero. Inputs here are always >= 0."""
    return int(math.floor(value + 0.5))


def grid_spaces(source, target, grid):
    """Whole squares moved along x, y and elevation, sorted ascending."""
    spaces_x = round_half_up(abs(target.x - source.x) / grid.cell_size)
    spaces_y = round_half_up(abs(target.y - source.y) / grid.cell_size)
    # elevation is stored in grid units, not pixels
    spaces_z = round_half_up(abs(target.elevation - source.elevation) / grid.unit_distance)
    return sorted([spaces_x, spaces_y, spaces_z])


def euclidean_distance(source, target, grid):
    """Straight-line 3D distance in grid units, unrounded."""
    lateral_x = abs(target.x - source.x) / grid.cell_size * grid.unit_distance
    lateral_y = abs(target.y - source.y) / grid.cell_size * grid.unit_distance
    lateral = math.hypot(lateral_x, lateral_y)
    vertical = abs(target.elevation - source.elevation)
    return math.hypot(lateral, vertical)


def phb_distance(source, target, grid):
    """Longest axis wins; diagonal steps are free."""
    spaces = grid_spaces(source, target, grid)
    return spaces[2] * grid.unit_distance


def dmg_distance(source, target, grid):
    """Longest axis plus one square for every second diagonal step."""
    spaces = grid_spaces(source, target, grid)
    # the median axis is the fewest diagonal moves that get you there
    diagonal_moves = spaces[1]
    extra_spaces = diagonal_moves // 2
    return (spaces[2] + extra_spaces) * grid.unit_distance


def measure(source, target, grid):
    """All three distances from the same position snapshot."""
    return DistanceResult(
        euclid=euclidean_distance(source, target, grid),
        phb=phb_distance(source, target, grid),
        dmg=dmg_distance(source, target, grid),
    )

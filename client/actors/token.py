"""
5e Reference: PHB ch.9 (creatures occupy squares, flying adds elevation).
Purpose: Token and User dataclasses - what the distance macro reads off the scene.
Dependencies: core/grid/models.py for Position.
Ext Hooks: Token size (large creatures span several squares).
Game Loop: Owned by client/scene.py; no rendering here.
"""

from dataclasses import dataclass, field
from typing import FrozenSet
from core.config import ASSISTANT_ROLE
from core.grid.models import Position

PLAYER, TRUSTED, ASSISTANT, GAMEMASTER = 1, 2, 3, 4


@dataclass
class Token:
    """
    A token on the scene.
    - x/y: top-left corner in scene pixels.
    - elevation: in scene units (ft), not squares.
    - owner_ids: users who own this token (players fall back to these).
    """
    name: str = "Token"
    x: float = 0.0
    y: float = 0.0
    elevation: float = 0.0
    owner_ids: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def position(self) -> Position:
        """Immutable snapshot so all three distances see the same coordinates."""
        return Position(self.x, self.y, self.elevation)

    def is_owned_by(self, user) -> bool:
        return user.id in self.owner_ids

    @classmethod
    def from_dict(cls, data):
        """Raises ValueError for non-numeric or non-finite coordinates."""
        token = cls(
            name=str(data["name"]),
            x=float(data["x"]),
            y=float(data["y"]),
            elevation=float(data.get("elevation", 0.0)),
        )
        token.position  # validates the coordinates
        return token

    def to_dict(self):
        return {"name": self.name, "x": self.x, "y": self.y, "elevation": self.elevation}


@dataclass
class User:
    id: str = "player"
    name: str = "Player"
    role: int = PLAYER

    def is_assistant(self) -> bool:
        """Assistant GMs and GMs get no owned-token fallback."""
        return self.role >= ASSISTANT_ROLE

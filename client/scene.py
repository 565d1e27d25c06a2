"""
5e Reference: N/A (virtual tabletop glue).
Purpose: Scene state the distance macro reads: tokens, selection, targets, grid.
Dependencies: client/actors/token.py, client/ui/manager.py, core/grid/models.py.
Ext Hooks: Multiple scenes, per-user selection.
Client Only: Replaces the host's ambient canvas/game globals with an explicit object.
"""

from dataclasses import dataclass, field
from typing import List
from client.actors.token import Token
from core.config import default_grid
from core.grid.models import GridConfig

NO_SOURCES = "No tokens selected, and no controlled token fallback for GMs"
NO_TARGETS = "No targets selected"


@dataclass
class Scene:
    tokens: List[Token] = field(default_factory=list)
    controlled: List[Token] = field(default_factory=list)  # currently selected by the user
    targets: List[Token] = field(default_factory=list)
    grid: GridConfig = field(default_factory=default_grid)

    def owned_tokens(self, user) -> List[Token]:
        return [token for token in self.tokens if token.is_owned_by(user)]

    def get_source_tokens(self, user, ui=None) -> List[Token]:
        """
        Tokens to measure from.
        - Selected tokens if there are any.
        - Otherwise players (below assistant GM) fall back to the tokens they own.
        - Otherwise warn and return nothing.
        """
        if self.controlled:
            return list(self.controlled)
        if not user.is_assistant():
            return self.owned_tokens(user)
        if ui is not None:
            ui.warn(NO_SOURCES)
        return []

    def get_targets(self, ui=None) -> List[Token]:
        targets = list(self.targets)
        if not targets and ui is not None:
            ui.warn(NO_TARGETS)
        return targets

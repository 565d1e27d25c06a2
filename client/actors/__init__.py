"""
Actor-related modules for the tabletop client.

This package contains the token dataclass placed on a scene and the user
who controls and targets tokens.
"""

from client.actors.token import Token, User

"""
5e Reference: N/A (measurement preconditions).
Purpose: Errors raised when a scene grid makes distances undefined.
Dependencies: None.
Ext Hooks: Token placement errors.
"""


class ConfigurationError(ValueError):
    """Grid parameters that make distance measurement undefined."""

"""
Tabletop client: scene state, token selection, chat log and the distance macro.
"""

"""
5e Reference: PHB ch.9; DMG ch.8 (variant diagonals).
Purpose: Whisper the caller the distances from each selected token to each target.
Dependencies: client/scene.py, client/chat.py, client/ui/manager.py, core/report.py.
Ext Hooks: Bind to a hotkey.
Client Only: Glue between scene state, the distance engine and the chat log.

Distances take elevation into account and are given PHB / Euclidean / DMG style.
"""

from typing import List
from client.chat import ChatLog, ChatMessage
from client.ui.manager import UIManager
from core.log import setup_logger
from core.report import build_reports, format_report

logger = setup_logger("tabletop.macro")


def run_distance_macro(scene, user, chat_log: ChatLog, ui: UIManager = None) -> List[ChatMessage]:
    """
    One private message per source token.
    - Sources: selection, else owned tokens for players (scene.get_source_tokens).
    - Missing sources/targets only warn; nothing is posted.
    """
    ui = ui or UIManager()
    sources = scene.get_source_tokens(user, ui)
    targets = scene.get_targets(ui)

    messages = []
    for source, pairs in build_reports(sources, targets, scene.grid):
        content = format_report(pairs, scene.grid)
        messages.append(chat_log.create(content, whisper=[user.id], author=user.id))
        logger.info("Whispered %d distances from %s to %s", len(pairs), source.name, user.name)
    return messages

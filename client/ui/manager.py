"""
5e Reference: N/A (virtual tabletop UI).
Purpose: UIManager for warning notifications and drawing the chat log.
Dependencies: pygame, core/log.py.
Ext Hooks: Fade-out timers, scrollable chat.
Client Only: UI drawing abstraction.
"""

import re
import pygame
from typing import List, Tuple
from core.log import setup_logger

logger = setup_logger("tabletop.ui")

PARAGRAPH = re.compile(r"<p>(.*?)</p>", re.S)
TAG = re.compile(r"<[^>]+>")

WARN_PREFIX = "Pythagoras | "


def message_lines(content: str) -> List[str]:
    """Split '<p>..</p><p>..</p>' chat content into plain text lines."""
    lines = PARAGRAPH.findall(content)
    if not lines:
        lines = [content]
    return [TAG.sub("", line).strip() for line in lines]


class UIManager:
    def __init__(self, font=None):
        self.font = font
        self.notifications: List[Tuple[str, str]] = []  # (level, text)

    def warn(self, message: str):
        """Non-fatal, user-visible warning."""
        text = WARN_PREFIX + message
        logger.warning(text)
        self.notifications.append(("warning", text))

    def warnings(self) -> List[str]:
        return [text for level, text in self.notifications if level == "warning"]

    def draw_message(self, screen: pygame.Surface, message: str, color: Tuple[int, int, int], pos: Tuple[int, int]):
        text_surface = self.font.render(message, True, color)
        screen.blit(text_surface, pos)
        return text_surface.get_height()

    def draw_chat_message(self, screen: pygame.Surface, chat_message, pos: Tuple[int, int], color=(255, 255, 255), spacing=2):
        """Draw one chat message line by line; returns the height used."""
        x, y = pos
        used = 0
        for line in message_lines(chat_message.content):
            used += self.draw_message(screen, line, color, (x, y + used)) + spacing
        return used

    def draw_chat_log(self, screen: pygame.Surface, messages, pos: Tuple[int, int], whisper_color=(200, 160, 255)):
        """
        Draw the messages top to bottom.
        - Whispered messages use whisper_color, public ones white.
        """
        x, y = pos
        for message in messages:
            color = whisper_color if message.whisper else (255, 255, 255)
            y += self.draw_chat_message(screen, message, (x, y), color=color)
        return y - pos[1]

# Usage: ui = UIManager(pygame.font.Font(None, 18)); ui.draw_chat_log(screen, chat_log.visible_to(user), (10, 10))

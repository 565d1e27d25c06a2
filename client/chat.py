"""
5e Reference: N/A (virtual tabletop chat).
Purpose: Chat messages and the chat log the distance macro publishes to.
Dependencies: None.
Ext Hooks: Persist to the server, speaker aliases.
Client Only: In-memory log.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class ChatMessage:
    content: str
    whisper: Tuple[str, ...] = ()  # user ids; empty means public
    author: str = ""

    def is_visible_to(self, user) -> bool:
        if not self.whisper:
            return True
        return user.id in self.whisper or user.id == self.author


@dataclass
class ChatLog:
    messages: List[ChatMessage] = field(default_factory=list)

    def create(self, content: str, whisper=(), author: str = "") -> ChatMessage:
        message = ChatMessage(content=content, whisper=tuple(whisper), author=author)
        self.messages.append(message)
        return message

    def visible_to(self, user) -> List[ChatMessage]:
        return [message for message in self.messages if message.is_visible_to(user)]

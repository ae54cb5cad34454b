"""Chat message records and an in-memory chat sink."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List


@dataclass(frozen=True, slots=True)
class ChatMessage:
    speaker: str
    content: str


ChatSink = Callable[[ChatMessage], None]


class ChatLog:
    """Chat sink that keeps every posted message in order."""

    def __init__(self) -> None:
        self.messages: List[ChatMessage] = []

    def __call__(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def contents(self) -> List[str]:
        return [message.content for message in self.messages]

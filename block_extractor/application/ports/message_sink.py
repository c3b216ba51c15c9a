"""Message Sink port - user-visible messages for the host session."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class MessageSink(Protocol):
    """Port for writing messages to the interactive session."""

    def write_message(self, text: str) -> None:
        """Write one message line."""
        ...


class MessageLog:
    """Message sink that keeps every message and mirrors it to the log."""

    def __init__(self):
        self.messages: list[str] = []

    def write_message(self, text: str) -> None:
        logger.info(text)
        self.messages.append(text)

    @property
    def last(self) -> str | None:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.messages.clear()

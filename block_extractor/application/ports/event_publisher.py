"""Event Publisher port - interface for publishing extraction events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, runtime_checkable


class ExtractionStage(str, Enum):
    """States of the extraction state machine."""
    SELECT_BOUNDARY = "select_boundary"
    RESOLVE_LABEL = "resolve_label"
    VALIDATE_NAME = "validate_name"
    QUERY_CONTENTS = "query_contents"
    BUILD_DEFINITION = "build_definition"
    SUBSTITUTE = "substitute"
    COMMIT = "commit"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class ExtractionEvent:
    """Event during extraction."""
    stage: ExtractionStage
    message: str
    block_name: str | None = None


@runtime_checkable
class EventPublisher(Protocol):
    """Port for publishing extraction events."""

    def publish(self, event: ExtractionEvent) -> None:
        """Publish an event."""
        ...

    def subscribe(self, callback: Callable[[ExtractionEvent], None]) -> None:
        """Subscribe to events."""
        ...


class SimpleEventPublisher:
    """Simple synchronous event publisher."""

    def __init__(self):
        self._subscribers: list[Callable[[ExtractionEvent], None]] = []

    def publish(self, event: ExtractionEvent) -> None:
        for callback in self._subscribers:
            callback(event)

    def subscribe(self, callback: Callable[[ExtractionEvent], None]) -> None:
        self._subscribers.append(callback)

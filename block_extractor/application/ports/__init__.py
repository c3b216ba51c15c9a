"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .geometry_store import GeometryStore, Transaction
from .boundary_selector import BoundarySelector, SelectionResult, SelectionStatus
from .message_sink import MessageSink, MessageLog
from .event_publisher import (
    EventPublisher, ExtractionEvent, ExtractionStage, SimpleEventPublisher
)

__all__ = [
    'GeometryStore',
    'Transaction',
    'BoundarySelector',
    'SelectionResult',
    'SelectionStatus',
    'MessageSink',
    'MessageLog',
    'EventPublisher',
    'ExtractionEvent',
    'ExtractionStage',
    'SimpleEventPublisher',
]

"""Domain entities."""

from .entity import Entity, EntityId, Label, Definition
from .result import ExtractionResult, ExtractionStatus

__all__ = [
    'Entity',
    'EntityId',
    'Label',
    'Definition',
    'ExtractionResult',
    'ExtractionStatus',
]

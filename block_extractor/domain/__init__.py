"""Domain layer - pure business logic."""

from .entities.entity import Entity, EntityId, Label, Definition
from .entities.result import ExtractionResult, ExtractionStatus
from .value_objects.config import ExtractionConfig
from .value_objects.entity_kind import EntityKind
from .value_objects.geometry import Point3D, Extents, ORIGIN

__all__ = [
    # Entities
    'Entity',
    'EntityId',
    'Label',
    'Definition',
    'ExtractionResult',
    'ExtractionStatus',
    # Value Objects
    'ExtractionConfig',
    'EntityKind',
    'Point3D',
    'Extents',
    'ORIGIN',
]

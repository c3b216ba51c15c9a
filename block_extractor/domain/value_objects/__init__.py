"""Value objects - immutable data with validation."""

from .geometry import Point3D, Extents, ORIGIN
from .entity_kind import EntityKind
from .config import ExtractionConfig

__all__ = [
    'Point3D',
    'Extents',
    'ORIGIN',
    'EntityKind',
    'ExtractionConfig',
]

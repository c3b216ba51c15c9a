"""Entity kind value object."""

from enum import Enum


class EntityKind(str, Enum):
    """Entity categories known to the geometry store."""
    SOLID = "3DSOLID"
    TEXT = "TEXT"
    LINE = "LINE"
    POLYLINE = "POLYLINE"
    INSERT = "INSERT"

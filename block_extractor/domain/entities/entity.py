"""Scene entities."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from ..value_objects.entity_kind import EntityKind
from ..value_objects.geometry import Extents, Point3D

EntityId = int


@dataclass(frozen=True, slots=True)
class Entity:
    """A geometric object held by the store.

    Text entities carry their string in ``text`` and their anchor in
    ``position``. Instances (``INSERT``) carry the referenced definition
    name and their insertion point.
    """
    id: EntityId
    kind: EntityKind
    layer: str = "0"
    vertices: tuple[Point3D, ...] = ()
    text: str | None = None
    position: Point3D | None = None
    definition_name: str | None = None

    @property
    def extents(self) -> Extents | None:
        """Extents of the entity's own geometry.

        Instances report None here; their extents depend on the referenced
        definition and are resolved by the store.
        """
        if self.vertices:
            return Extents.from_points(self.vertices)
        if self.kind is EntityKind.TEXT and self.position is not None:
            return Extents(self.position, self.position)
        return None

    def with_id(self, entity_id: EntityId) -> Entity:
        """Copy of this entity under a new identity."""
        return dataclasses.replace(self, id=entity_id)

    @classmethod
    def solid_box(cls, entity_id: EntityId, extents: Extents, layer: str = "0") -> Entity:
        """Box-shaped solid spanning extents."""
        return cls(entity_id, EntityKind.SOLID, layer=layer, vertices=extents.corners())

    @classmethod
    def text_label(
        cls,
        entity_id: EntityId,
        text: str,
        position: Point3D,
        layer: str = "0"
    ) -> Entity:
        return cls(entity_id, EntityKind.TEXT, layer=layer, text=text, position=position)

    @classmethod
    def line(cls, entity_id: EntityId, start: Point3D, end: Point3D, layer: str = "0") -> Entity:
        return cls(entity_id, EntityKind.LINE, layer=layer, vertices=(start, end))


@dataclass(frozen=True, slots=True)
class Label:
    """Title text resolved at a region's corner."""
    entity_id: EntityId
    name: str
    anchor: Point3D


@dataclass(slots=True)
class Definition:
    """Named, reusable container of entity clones."""
    name: str
    origin: Point3D
    entity_ids: list[EntityId] = field(default_factory=list)

    @property
    def entity_count(self) -> int:
        return len(self.entity_ids)

    def copy(self) -> Definition:
        return Definition(self.name, self.origin, list(self.entity_ids))

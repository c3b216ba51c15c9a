"""In-memory geometry store - implements GeometryStore port."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Iterator

import numpy as np

from ...application.ports.geometry_store import GeometryStore, Transaction
from ...config import MODEL_SPACE
from ...domain.entities.entity import Definition, Entity, EntityId
from ...domain.value_objects.entity_kind import EntityKind
from ...domain.value_objects.geometry import Extents, Point3D
from ...exceptions import (
    DefinitionNotFoundError,
    DuplicateDefinitionError,
    EntityNotFoundError,
    StoreError,
    TransactionError,
)

logger = logging.getLogger(__name__)


@dataclass
class _StoreState:
    """Everything a transaction has to be able to restore."""
    entities: dict[EntityId, Entity] = field(default_factory=dict)
    owners: dict[EntityId, str] = field(default_factory=dict)
    model_space: list[EntityId] = field(default_factory=list)
    # Keyed by folded name; Definition.name keeps the spelling it was created with
    definitions: dict[str, Definition] = field(default_factory=dict)
    next_id: EntityId = 1

    def copy(self) -> _StoreState:
        # Entities are immutable; only the containers need copying
        return _StoreState(
            entities=dict(self.entities),
            owners=dict(self.owners),
            model_space=list(self.model_space),
            definitions={key: d.copy() for key, d in self.definitions.items()},
            next_id=self.next_id
        )


class MemoryTransaction(Transaction):
    """Snapshot transaction over an InMemoryGeometryStore."""

    def __init__(self, store: InMemoryGeometryStore):
        self._store = store
        self._snapshot = store._state.copy()
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def commit(self) -> None:
        if not self._active:
            raise TransactionError("Transaction is no longer active")
        self._close()
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        if not self._active:
            raise TransactionError("Transaction is no longer active")
        self._store._state = self._snapshot
        self._close()
        logger.debug("Transaction rolled back")

    def _close(self) -> None:
        self._active = False
        self._store._transaction = None

    def __enter__(self) -> MemoryTransaction:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None
    ) -> bool:
        if self._active:
            self.rollback()
        return False  # Don't suppress exceptions


class InMemoryGeometryStore(GeometryStore):
    """Entity store kept in process memory.

    Scene setup (``add_*``) is allowed at any time. Definition creation,
    cloning, insertion and erasure require an open transaction.
    """

    def __init__(self):
        self._state = _StoreState()
        self._transaction: MemoryTransaction | None = None

    @property
    def name(self) -> str:
        return "memory"

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    def transaction(self) -> MemoryTransaction:
        if self._transaction is not None:
            raise TransactionError("A transaction is already active")
        self._transaction = MemoryTransaction(self)
        logger.debug("Transaction opened")
        return self._transaction

    def _require_transaction(self, operation: str) -> None:
        if self._transaction is None:
            raise TransactionError(f"{operation} requires an active transaction")

    # Scene setup

    def add_entity(self, entity: Entity) -> EntityId:
        """Add an entity to model space under a fresh id."""
        entity = entity.with_id(self._allocate_id())
        self._state.entities[entity.id] = entity
        self._state.owners[entity.id] = MODEL_SPACE
        self._state.model_space.append(entity.id)
        return entity.id

    def add_solid_box(self, min_point: Point3D, max_point: Point3D, layer: str = "0") -> EntityId:
        return self.add_entity(Entity.solid_box(0, Extents(min_point, max_point), layer=layer))

    def add_text(self, text: str, position: Point3D, layer: str = "0") -> EntityId:
        return self.add_entity(Entity.text_label(0, text, position, layer=layer))

    def add_line(self, start: Point3D, end: Point3D, layer: str = "0") -> EntityId:
        return self.add_entity(Entity.line(0, start, end, layer=layer))

    def _allocate_id(self) -> EntityId:
        entity_id = self._state.next_id
        self._state.next_id += 1
        return entity_id

    # Queries

    def get_entity(self, entity_id: EntityId) -> Entity:
        try:
            return self._state.entities[entity_id]
        except KeyError:
            raise EntityNotFoundError(entity_id) from None

    def owner_of(self, entity_id: EntityId) -> str:
        """Name of the container holding the entity."""
        self.get_entity(entity_id)
        return self._state.owners[entity_id]

    def get_extents(self, entity_id: EntityId) -> Extents:
        entity = self.get_entity(entity_id)
        if entity.kind is EntityKind.INSERT:
            return self._instance_extents(entity)
        extents = entity.extents
        if extents is None:
            raise StoreError("Entity has no geometric extents", entity_id=entity_id)
        return extents

    def _instance_extents(self, entity: Entity) -> Extents:
        definition = self.get_definition(entity.definition_name)
        if not definition.entity_ids:
            raise StoreError("Instance of an empty definition has no extents", entity_id=entity.id)
        extents = [self.get_extents(eid) for eid in definition.entity_ids]
        merged = extents[0]
        for other in extents[1:]:
            merged = merged.union(other)
        return merged.translated(entity.position - definition.origin)

    def iter_entities(
        self,
        kind: EntityKind | None = None,
        layer: str | None = None
    ) -> Iterator[Entity]:
        for entity_id in list(self._state.model_space):
            entity = self._state.entities[entity_id]
            if kind is not None and entity.kind is not kind:
                continue
            if layer is not None and entity.layer != layer:
                continue
            yield entity

    def select_crossing(self, region: Extents) -> list[EntityId]:
        ids: list[EntityId] = []
        boxes: list[tuple[float, ...]] = []
        for entity_id in self._state.model_space:
            try:
                extents = self.get_extents(entity_id)
            except StoreError:
                continue
            ids.append(entity_id)
            boxes.append((*extents.min_point, *extents.max_point))

        if not ids:
            return []

        table = np.asarray(boxes, dtype=float)
        lo = np.asarray(region.min_point.as_tuple())
        hi = np.asarray(region.max_point.as_tuple())
        # Crossing window: overlap on every axis, touching included
        mask = np.all(table[:, :3] <= hi, axis=1) & np.all(table[:, 3:] >= lo, axis=1)
        return [ids[i] for i in np.flatnonzero(mask)]

    @staticmethod
    def _definition_key(name: str) -> str:
        """Block names are unique regardless of case."""
        return name.casefold()

    def _find_definition(self, name: str) -> Definition:
        try:
            return self._state.definitions[self._definition_key(name)]
        except KeyError:
            raise DefinitionNotFoundError(name) from None

    def has_definition(self, name: str) -> bool:
        return self._definition_key(name) in self._state.definitions

    def get_definition(self, name: str) -> Definition:
        return self._find_definition(name).copy()

    def definition_names(self) -> list[str]:
        return [definition.name for definition in self._state.definitions.values()]

    # Transactional mutations

    def create_definition(self, name: str, origin: Point3D) -> Definition:
        self._require_transaction("create_definition")
        if not name:
            raise StoreError("Definition name must not be empty")
        if self.has_definition(name):
            raise DuplicateDefinitionError(name)
        definition = Definition(name=name, origin=origin)
        self._state.definitions[self._definition_key(name)] = definition
        return definition.copy()

    def clone_into(self, entity_id: EntityId, definition_name: str) -> EntityId:
        self._require_transaction("clone_into")
        source = self.get_entity(entity_id)
        definition = self._find_definition(definition_name)

        clone = source.with_id(self._allocate_id())
        self._state.entities[clone.id] = clone
        self._state.owners[clone.id] = definition.name
        definition.entity_ids.append(clone.id)
        return clone.id

    def insert_instance(self, definition_name: str, position: Point3D) -> EntityId:
        self._require_transaction("insert_instance")
        definition = self._find_definition(definition_name)
        instance = Entity(
            0,
            EntityKind.INSERT,
            position=position,
            definition_name=definition.name
        )
        return self.add_entity(instance)

    def erase(self, entity_id: EntityId) -> None:
        self._require_transaction("erase")
        self.get_entity(entity_id)
        if self._state.owners[entity_id] != MODEL_SPACE:
            raise StoreError("Only model-space entities can be erased", entity_id=entity_id)
        self._state.model_space.remove(entity_id)
        del self._state.entities[entity_id]
        del self._state.owners[entity_id]

    # Inspection

    def snapshot(self) -> dict[str, object]:
        """Copy of the visible state, for comparing before and after."""
        return {
            "entities": dict(self._state.entities),
            "model_space": list(self._state.model_space),
            "definitions": {
                definition.name: definition.copy()
                for definition in self._state.definitions.values()
            },
        }

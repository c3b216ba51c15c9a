"""Geometry Store port - interface to the host's entity database."""

from __future__ import annotations

from types import TracebackType
from typing import Iterator, Protocol, runtime_checkable

from ...domain.entities.entity import Definition, Entity, EntityId
from ...domain.value_objects.entity_kind import EntityKind
from ...domain.value_objects.geometry import Extents, Point3D


@runtime_checkable
class Transaction(Protocol):
    """Scope of pending store mutations.

    Leaving the ``with`` block without ``commit()`` rolls back every
    mutation made since the transaction was opened.
    """

    @property
    def is_active(self) -> bool:
        """True until committed or rolled back."""
        ...

    def commit(self) -> None:
        """Make all pending mutations permanent."""
        ...

    def rollback(self) -> None:
        """Discard all pending mutations."""
        ...

    def __enter__(self) -> Transaction: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None
    ) -> bool: ...


@runtime_checkable
class GeometryStore(Protocol):
    """Port for the entity store the extraction runs against.

    Implementations: in-memory store, host CAD database bindings.
    Failures raise ``StoreError`` subclasses.
    """

    @property
    def name(self) -> str:
        """Backend name."""
        ...

    def transaction(self) -> Transaction:
        """Open a transaction. Only one may be active at a time."""
        ...

    def get_entity(self, entity_id: EntityId) -> Entity:
        """Look up a live entity by id."""
        ...

    def owner_of(self, entity_id: EntityId) -> str:
        """Name of the container holding the entity (model space or a definition)."""
        ...

    def get_extents(self, entity_id: EntityId) -> Extents:
        """Geometric extents of a live entity."""
        ...

    def iter_entities(
        self,
        kind: EntityKind | None = None,
        layer: str | None = None
    ) -> Iterator[Entity]:
        """Iterate model-space entities in store order, optionally filtered."""
        ...

    def select_crossing(self, region: Extents) -> list[EntityId]:
        """Ids of model-space entities inside or crossing region."""
        ...

    def has_definition(self, name: str) -> bool:
        """Check if a definition name is registered."""
        ...

    def get_definition(self, name: str) -> Definition:
        """Look up a registered definition."""
        ...

    def create_definition(self, name: str, origin: Point3D) -> Definition:
        """Register an empty definition anchored at origin."""
        ...

    def clone_into(self, entity_id: EntityId, definition_name: str) -> EntityId:
        """Deep-copy an entity and append the copy to a definition."""
        ...

    def insert_instance(self, definition_name: str, position: Point3D) -> EntityId:
        """Place an instance of a definition in model space."""
        ...

    def erase(self, entity_id: EntityId) -> None:
        """Remove a model-space entity."""
        ...

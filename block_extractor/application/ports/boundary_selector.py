"""Boundary Selector port - interactive pick of the boundary entity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from ...domain.entities.entity import EntityId
from ...domain.value_objects.entity_kind import EntityKind


class SelectionStatus(str, Enum):
    OK = "ok"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of an entity pick."""
    status: SelectionStatus
    entity_id: EntityId | None = None

    @property
    def is_ok(self) -> bool:
        return self.status is SelectionStatus.OK and self.entity_id is not None

    @classmethod
    def picked(cls, entity_id: EntityId) -> SelectionResult:
        return cls(SelectionStatus.OK, entity_id)

    @classmethod
    def cancelled(cls) -> SelectionResult:
        return cls(SelectionStatus.CANCELLED)


@runtime_checkable
class BoundarySelector(Protocol):
    """Port for prompting the user to pick one entity."""

    def select_entity(
        self,
        prompt: str,
        allowed_kinds: tuple[EntityKind, ...],
        reject_message: str
    ) -> SelectionResult:
        """Prompt until an allowed entity is picked or the user cancels.

        Picks of any other kind are answered with ``reject_message`` and
        the prompt repeats.
        """
        ...

"""Scripted selector - implements BoundarySelector port from queued picks."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from ...application.ports.boundary_selector import BoundarySelector, SelectionResult
from ...application.ports.geometry_store import GeometryStore
from ...application.ports.message_sink import MessageSink
from ...config import MODEL_SPACE
from ...domain.entities.entity import EntityId
from ...domain.value_objects.entity_kind import EntityKind
from ...exceptions import EntityNotFoundError, SelectionError

logger = logging.getLogger(__name__)


class ScriptedSelector(BoundarySelector):
    """Selector that replays a fixed sequence of picks.

    Stands in for the host's pick prompt when driving the extraction
    without a user. A ``None`` pick, or running out of picks, cancels.
    """

    def __init__(
        self,
        store: GeometryStore,
        picks: Iterable[EntityId | None],
        messages: MessageSink
    ):
        self._store = store
        self._picks = deque(picks)
        self._messages = messages

    @property
    def remaining(self) -> int:
        return len(self._picks)

    def select_entity(
        self,
        prompt: str,
        allowed_kinds: tuple[EntityKind, ...],
        reject_message: str
    ) -> SelectionResult:
        while self._picks:
            self._messages.write_message(prompt)
            entity_id = self._picks.popleft()
            if entity_id is None:
                return SelectionResult.cancelled()

            try:
                entity = self._store.get_entity(entity_id)
            except EntityNotFoundError as e:
                raise SelectionError("Picked entity does not exist", entity_id=entity_id) from e

            if entity.kind not in allowed_kinds:
                logger.debug(f"Rejected pick {entity_id} of kind {entity.kind.value}")
                self._messages.write_message(reject_message)
                continue
            if self._store.owner_of(entity_id) != MODEL_SPACE:
                # Definition contents are not pickable in the drawing
                logger.debug(f"Rejected pick {entity_id} outside model space")
                self._messages.write_message(reject_message)
                continue
            return SelectionResult.picked(entity_id)

        return SelectionResult.cancelled()

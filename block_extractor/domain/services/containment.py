"""Containment filtering over crossing-window selections."""

from __future__ import annotations

from typing import Iterable

from ..entities.entity import EntityId


def collect_contents(
    candidate_ids: Iterable[EntityId],
    boundary_id: EntityId,
    label_id: EntityId | None = None
) -> list[EntityId]:
    """Reduce a crossing selection to the entities to be extracted.

    The boundary and its label always fall inside their own region, so
    they are dropped here. Order of first appearance is kept.
    """
    excluded = {boundary_id}
    if label_id is not None:
        excluded.add(label_id)

    contents: list[EntityId] = []
    seen: set[EntityId] = set()
    for entity_id in candidate_ids:
        if entity_id in excluded or entity_id in seen:
            continue
        seen.add(entity_id)
        contents.append(entity_id)
    return contents

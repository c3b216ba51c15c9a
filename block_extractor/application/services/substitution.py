"""Substitution engine - swap originals for one block instance."""

from __future__ import annotations

import logging
from typing import Iterable

from ...domain.entities.entity import EntityId
from ...domain.value_objects.geometry import Point3D
from ..ports.geometry_store import GeometryStore

logger = logging.getLogger(__name__)


def substitute(
    store: GeometryStore,
    definition_name: str,
    insertion_point: Point3D,
    erase_ids: Iterable[EntityId]
) -> EntityId:
    """Insert an instance of the definition, then erase the originals.

    The instance goes in before anything is erased. Errors propagate so
    the enclosing transaction can undo both steps.

    Returns:
        Id of the new instance
    """
    instance_id = store.insert_instance(definition_name, insertion_point)
    logger.debug(f"Inserted instance {instance_id} of '{definition_name}'")

    erased = 0
    for entity_id in erase_ids:
        store.erase(entity_id)
        erased += 1

    logger.info(f"Replaced {erased} entities with instance of '{definition_name}'")
    return instance_id

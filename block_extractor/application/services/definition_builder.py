"""Definition builder - package entity clones into a named block."""

from __future__ import annotations

import logging
from typing import Sequence

from ...domain.entities.entity import Definition, EntityId
from ...domain.value_objects.geometry import Point3D
from ...exceptions import DuplicateDefinitionError, ValidationError
from ..ports.geometry_store import GeometryStore

logger = logging.getLogger(__name__)


def build_definition(
    store: GeometryStore,
    name: str,
    origin: Point3D,
    entity_ids: Sequence[EntityId]
) -> Definition:
    """Create a definition holding one clone per input entity.

    Must run inside an open store transaction: if any clone fails the
    half-filled definition is only removed by rolling that transaction back.

    Args:
        store: Store to create the definition in
        name: Definition name, must not be registered yet
        origin: Base point of the definition
        entity_ids: Entities to clone, boundary first

    Returns:
        The registered definition, clones in input order

    Raises:
        DuplicateDefinitionError: If the name already exists
        ValidationError: If there is nothing to clone
    """
    if store.has_definition(name):
        raise DuplicateDefinitionError(name)
    if not entity_ids:
        raise ValidationError("A block needs at least its boundary entity", field="entity_ids")

    store.create_definition(name, origin)
    for entity_id in entity_ids:
        clone_id = store.clone_into(entity_id, name)
        logger.debug(f"Cloned entity {entity_id} into '{name}' as {clone_id}")

    definition = store.get_definition(name)
    logger.info(f"Built definition '{name}' with {definition.entity_count} entities")
    return definition

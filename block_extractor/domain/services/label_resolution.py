"""Label resolution - name a region by the text sitting on its corner."""

from __future__ import annotations

from typing import Iterable

from ..entities.entity import Entity, Label
from ..value_objects.entity_kind import EntityKind
from ..value_objects.geometry import Point3D


def resolve_label(
    candidates: Iterable[Entity],
    corner: Point3D,
    tolerance: float
) -> Label | None:
    """Find the title text anchored at a region corner.

    Scans candidates in the given order and stops at the first text whose
    anchor matches ``corner`` within ``tolerance`` on every axis. Later
    coincident texts are never considered.

    Args:
        candidates: Entities on the marker layer, in store order
        corner: Min corner of the boundary region
        tolerance: Absolute per-axis tolerance

    Returns:
        The resolved label, or None if nothing matches or the matching
        text is empty. Whitespace-only text is a valid name and is kept
        verbatim
    """
    for entity in candidates:
        if entity.kind is not EntityKind.TEXT or entity.position is None:
            continue
        if not entity.position.is_equal_to(corner, tolerance):
            continue

        if not entity.text:
            return None
        return Label(entity_id=entity.id, name=entity.text, anchor=entity.position)

    return None

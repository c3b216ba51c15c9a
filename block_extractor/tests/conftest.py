"""Shared fixtures: a unit cube titled on its min corner with two entities inside."""

from dataclasses import dataclass, field

import pytest

from block_extractor.adapters.store.memory_store import InMemoryGeometryStore
from block_extractor.application.ports.message_sink import MessageLog
from block_extractor.config import MARKER_LAYER
from block_extractor.domain.value_objects.geometry import ORIGIN, Point3D


@dataclass
class Scene:
    store: InMemoryGeometryStore
    cube: int
    label: int | None
    inside: list[int] = field(default_factory=list)
    outside: list[int] = field(default_factory=list)


def _build_scene(
    label_text: str | None = "Widget",
    label_position: Point3D = ORIGIN,
    label_layer: str = MARKER_LAYER,
) -> Scene:
    store = InMemoryGeometryStore()
    cube = store.add_solid_box(ORIGIN, Point3D(1, 1, 1))
    label = None
    if label_text is not None:
        label = store.add_text(label_text, label_position, layer=label_layer)
    inside = [
        store.add_line(Point3D(0.2, 0.2, 0.2), Point3D(0.8, 0.8, 0.8)),
        store.add_line(Point3D(0.5, 0.1, 0.5), Point3D(0.5, 0.9, 0.5)),
    ]
    outside = [store.add_line(Point3D(5, 5, 5), Point3D(6, 6, 6))]
    return Scene(store=store, cube=cube, label=label, inside=inside, outside=outside)


@pytest.fixture
def make_scene():
    return _build_scene


@pytest.fixture
def scene() -> Scene:
    return _build_scene()


@pytest.fixture
def messages() -> MessageLog:
    return MessageLog()


@pytest.fixture
def seed_definition():
    """Register a definition outside of any extraction run."""
    def seed(store: InMemoryGeometryStore, name: str, origin: Point3D = ORIGIN) -> None:
        with store.transaction() as tx:
            store.create_definition(name, origin)
            tx.commit()
    return seed

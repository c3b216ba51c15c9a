"""Tests for the definition builder."""

from unittest.mock import patch

import pytest

from block_extractor.application.services.definition_builder import build_definition
from block_extractor.domain.value_objects.entity_kind import EntityKind
from block_extractor.domain.value_objects.geometry import ORIGIN, Point3D
from block_extractor.exceptions import DuplicateDefinitionError, StoreError, ValidationError


class TestBuildDefinition:

    def test_one_clone_per_input_in_order(self, scene):
        store = scene.store
        ids = [scene.cube, *scene.inside]
        with store.transaction() as tx:
            definition = build_definition(store, "Widget", ORIGIN, ids)
            tx.commit()

        assert definition.name == "Widget"
        assert definition.origin == ORIGIN
        assert definition.entity_count == 3
        clones = [store.get_entity(eid) for eid in definition.entity_ids]
        originals = [store.get_entity(eid) for eid in ids]
        assert [c.kind for c in clones] == [EntityKind.SOLID, EntityKind.LINE, EntityKind.LINE]
        assert [c.vertices for c in clones] == [o.vertices for o in originals]
        assert not set(definition.entity_ids) & set(ids)

    def test_originals_untouched(self, scene):
        store = scene.store
        before = list(store.iter_entities())
        with store.transaction() as tx:
            build_definition(store, "Widget", ORIGIN, [scene.cube, *scene.inside])
            tx.commit()
        assert list(store.iter_entities()) == before

    def test_duplicate_name(self, scene, seed_definition):
        store = scene.store
        seed_definition(store, "Widget", Point3D(9, 9, 9))
        with store.transaction():
            with pytest.raises(DuplicateDefinitionError):
                build_definition(store, "Widget", ORIGIN, [scene.cube])
        assert store.get_definition("Widget").entity_ids == []
        assert store.get_definition("Widget").origin == Point3D(9, 9, 9)

    def test_nothing_to_clone(self, scene):
        with scene.store.transaction():
            with pytest.raises(ValidationError) as exc_info:
                build_definition(scene.store, "Widget", ORIGIN, [])
        assert exc_info.value.field == "entity_ids"
        assert not scene.store.has_definition("Widget")

    def test_failed_clone_leaves_no_definition(self, scene):
        store = scene.store
        real_clone = store.clone_into

        def clone_then_fail(entity_id, name):
            if entity_id == scene.inside[-1]:
                raise StoreError("clone failed", entity_id=entity_id)
            return real_clone(entity_id, name)

        before = store.snapshot()
        with patch.object(store, "clone_into", side_effect=clone_then_fail):
            with pytest.raises(StoreError):
                with store.transaction():
                    build_definition(store, "Widget", ORIGIN, [scene.cube, *scene.inside])

        assert not store.has_definition("Widget")
        assert store.snapshot() == before

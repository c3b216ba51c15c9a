"""Tests for the substitution engine."""

from unittest.mock import patch

import pytest

from block_extractor.application.services.substitution import substitute
from block_extractor.domain.value_objects.entity_kind import EntityKind
from block_extractor.domain.value_objects.geometry import ORIGIN
from block_extractor.exceptions import DefinitionNotFoundError, EntityNotFoundError, StoreError


def _define(store, name, ids):
    store.create_definition(name, ORIGIN)
    for entity_id in ids:
        store.clone_into(entity_id, name)


class TestSubstitute:

    def test_inserts_instance_and_erases(self, scene):
        store = scene.store
        erase_ids = [scene.cube, scene.label, *scene.inside]
        with store.transaction() as tx:
            _define(store, "Widget", [scene.cube, *scene.inside])
            instance_id = substitute(store, "Widget", ORIGIN, erase_ids)
            tx.commit()

        instance = store.get_entity(instance_id)
        assert instance.kind is EntityKind.INSERT
        assert instance.position == ORIGIN
        for entity_id in erase_ids:
            with pytest.raises(EntityNotFoundError):
                store.get_entity(entity_id)
        remaining = [e.id for e in store.iter_entities()]
        assert remaining == [*scene.outside, instance_id]

    def test_insertion_happens_before_erasure(self, scene):
        store = scene.store
        calls = []
        real_insert, real_erase = store.insert_instance, store.erase

        def record_insert(name, position):
            calls.append("insert")
            return real_insert(name, position)

        def record_erase(entity_id):
            calls.append("erase")
            real_erase(entity_id)

        with store.transaction():
            _define(store, "Widget", [scene.cube])
            with patch.object(store, "insert_instance", side_effect=record_insert), \
                    patch.object(store, "erase", side_effect=record_erase):
                substitute(store, "Widget", ORIGIN, [scene.cube, scene.label])

        assert calls == ["insert", "erase", "erase"]

    def test_missing_definition_erases_nothing(self, scene):
        store = scene.store
        with store.transaction():
            with pytest.raises(DefinitionNotFoundError):
                substitute(store, "Widget", ORIGIN, [scene.cube])
            assert store.get_entity(scene.cube) is not None

    def test_erase_failure_rolls_back_instance(self, scene):
        store = scene.store
        real_erase = store.erase

        def erase_then_fail(entity_id):
            if entity_id == scene.inside[0]:
                raise StoreError("locked", entity_id=entity_id)
            real_erase(entity_id)

        before = store.snapshot()
        with pytest.raises(StoreError):
            with store.transaction():
                _define(store, "Widget", [scene.cube, *scene.inside])
                with patch.object(store, "erase", side_effect=erase_then_fail):
                    substitute(store, "Widget", ORIGIN, [scene.cube, scene.label, *scene.inside])

        assert store.snapshot() == before
        assert not any(e.kind is EntityKind.INSERT for e in store.iter_entities())

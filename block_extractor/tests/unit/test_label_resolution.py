"""Unit tests for label resolution."""

import pytest
from block_extractor.domain.entities.entity import Entity, Label
from block_extractor.domain.services.label_resolution import resolve_label
from block_extractor.domain.value_objects.entity_kind import EntityKind
from block_extractor.domain.value_objects.geometry import Point3D, ORIGIN

TOL = 1e-6


class TestResolveLabel:
    """Tests for corner label lookup."""

    def test_exact_match(self):
        texts = [Entity.text_label(7, "Widget", ORIGIN)]
        assert resolve_label(texts, ORIGIN, TOL) == Label(7, "Widget", ORIGIN)

    def test_no_candidates(self):
        assert resolve_label([], ORIGIN, TOL) is None

    def test_match_within_tolerance(self):
        anchor = Point3D(9e-7, -9e-7, 0)
        texts = [Entity.text_label(1, "Widget", anchor)]
        label = resolve_label(texts, ORIGIN, TOL)
        assert label is not None
        assert label.anchor == anchor

    @pytest.mark.parametrize("anchor", [
        Point3D(1.1e-6, 0, 0),
        Point3D(0, 1.1e-6, 0),
        Point3D(0, 0, -1.1e-6),
    ])
    def test_no_match_beyond_tolerance(self, anchor):
        texts = [Entity.text_label(1, "Widget", anchor)]
        assert resolve_label(texts, ORIGIN, TOL) is None

    def test_first_coincident_label_wins(self):
        texts = [
            Entity.text_label(1, "Elsewhere", Point3D(3, 3, 3)),
            Entity.text_label(2, "First", ORIGIN),
            Entity.text_label(3, "Second", ORIGIN),
        ]
        assert resolve_label(texts, ORIGIN, TOL).name == "First"

    def test_empty_text_is_not_found(self):
        texts = [Entity.text_label(1, "", ORIGIN)]
        assert resolve_label(texts, ORIGIN, TOL) is None

    def test_whitespace_text_is_a_name(self):
        texts = [Entity.text_label(1, "   ", ORIGIN)]
        assert resolve_label(texts, ORIGIN, TOL) == Label(1, "   ", ORIGIN)

    def test_blank_first_match_stops_the_scan(self):
        texts = [
            Entity.text_label(1, "", ORIGIN),
            Entity.text_label(2, "Widget", ORIGIN),
        ]
        assert resolve_label(texts, ORIGIN, TOL) is None

    def test_non_text_entities_ignored(self):
        candidates = [
            Entity.line(1, ORIGIN, Point3D(1, 1, 1)),
            Entity(2, EntityKind.TEXT, text="No anchor"),
            Entity.text_label(3, "Widget", ORIGIN),
        ]
        assert resolve_label(candidates, ORIGIN, TOL).entity_id == 3

    def test_name_kept_verbatim(self):
        texts = [Entity.text_label(1, "Pump Housing A", ORIGIN)]
        assert resolve_label(texts, ORIGIN, TOL).name == "Pump Housing A"

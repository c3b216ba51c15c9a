"""Unit tests for extraction results and error types."""

from block_extractor.domain.entities.entity import Definition
from block_extractor.domain.entities.result import ExtractionResult, ExtractionStatus
from block_extractor.domain.value_objects.geometry import ORIGIN
from block_extractor.exceptions import (
    BlockExtractorError, DuplicateDefinitionError, EntityNotFoundError, StoreError
)


class TestExtractionResult:

    def test_success_result(self):
        definition = Definition("Widget", ORIGIN, [10, 11, 12])
        result = ExtractionResult.success_result(definition, instance_id=13, erased_ids=(1, 2))
        assert result.success
        assert result.block_name == "Widget"
        assert result.instance_id == 13
        assert result.message == "Block 'Widget' created successfully."

    def test_cancelled_is_silent(self):
        result = ExtractionResult.cancelled()
        assert result.status is ExtractionStatus.CANCELLED
        assert not result.success
        assert result.message is None

    def test_label_not_found_message(self):
        result = ExtractionResult.label_not_found("block_title")
        assert result.message == (
            "Error: Could not find title text on layer 'block_title' at the cube's corner."
        )

    def test_duplicate_name_message(self):
        result = ExtractionResult.duplicate_name("Widget")
        assert result.message == "Error: A block named 'Widget' already exists."

    def test_failure_message_carries_detail(self):
        result = ExtractionResult.failure("disk on fire")
        assert result.error_message == "disk on fire"
        assert result.message == "An error occurred while creating the block: disk on fire"


class TestErrors:

    def test_error_code_in_str(self):
        assert str(BlockExtractorError("plain")) == "plain"
        assert str(BlockExtractorError("coded", "X")) == "[X] coded"

    def test_store_errors(self):
        assert str(StoreError("bad", entity_id=4)) == "[STORE_ERROR] bad (entity: 4)"
        assert isinstance(EntityNotFoundError(4), StoreError)
        err = DuplicateDefinitionError("Widget")
        assert err.error_code == "DUPLICATE_NAME"
        assert err.name == "Widget"

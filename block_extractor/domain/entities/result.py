"""Extraction result entity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...config import MESSAGES
from .entity import Definition, EntityId


class ExtractionStatus(str, Enum):
    """Outcome of one extraction run."""
    SUCCESS = "success"
    CANCELLED = "cancelled"
    LABEL_NOT_FOUND = "label_not_found"
    DUPLICATE_NAME = "duplicate_name"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Result of extracting a block from a boundary solid."""
    status: ExtractionStatus
    block_name: str | None = None
    marker_layer: str | None = None
    error_message: str | None = None
    definition: Definition | None = None
    instance_id: EntityId | None = None
    erased_ids: tuple[EntityId, ...] = ()

    @property
    def success(self) -> bool:
        return self.status is ExtractionStatus.SUCCESS

    @property
    def message(self) -> str | None:
        """User-visible message, None when the outcome is silent."""
        if self.status is ExtractionStatus.SUCCESS:
            return MESSAGES.success.format(name=self.block_name)
        if self.status is ExtractionStatus.LABEL_NOT_FOUND:
            return MESSAGES.label_not_found.format(layer=self.marker_layer)
        if self.status is ExtractionStatus.DUPLICATE_NAME:
            return MESSAGES.duplicate_name.format(name=self.block_name)
        if self.status is ExtractionStatus.FAILED:
            return MESSAGES.failure.format(detail=self.error_message)
        return None

    @classmethod
    def cancelled(cls) -> ExtractionResult:
        return cls(status=ExtractionStatus.CANCELLED)

    @classmethod
    def label_not_found(cls, marker_layer: str) -> ExtractionResult:
        return cls(status=ExtractionStatus.LABEL_NOT_FOUND, marker_layer=marker_layer)

    @classmethod
    def duplicate_name(cls, name: str) -> ExtractionResult:
        return cls(status=ExtractionStatus.DUPLICATE_NAME, block_name=name)

    @classmethod
    def failure(cls, error: str, block_name: str | None = None) -> ExtractionResult:
        """Create a failure result."""
        return cls(status=ExtractionStatus.FAILED, block_name=block_name, error_message=error)

    @classmethod
    def success_result(
        cls,
        definition: Definition,
        instance_id: EntityId,
        erased_ids: tuple[EntityId, ...] = ()
    ) -> ExtractionResult:
        """Create a success result."""
        return cls(
            status=ExtractionStatus.SUCCESS,
            block_name=definition.name,
            definition=definition,
            instance_id=instance_id,
            erased_ids=erased_ids
        )

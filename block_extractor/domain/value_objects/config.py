"""Configuration value objects with validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ...config import MARKER_LAYER, MESSAGES, POINT_TOLERANCE
from .entity_kind import EntityKind


class ExtractionConfig(BaseModel):
    """Block extraction configuration with validation."""

    model_config = {"frozen": True}

    # Label resolution
    marker_layer: str = MARKER_LAYER
    tolerance: float = Field(default=POINT_TOLERANCE, gt=0.0, le=1.0)

    # Boundary selection
    boundary_kinds: tuple[EntityKind, ...] = (EntityKind.SOLID,)
    boundary_prompt: str = MESSAGES.boundary_prompt
    boundary_reject_message: str = MESSAGES.boundary_reject

    @field_validator('marker_layer')
    @classmethod
    def validate_marker_layer(cls, v: str) -> str:
        """Layer names are matched verbatim, so reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError("marker_layer must not be blank")
        return v

    @field_validator('boundary_kinds')
    @classmethod
    def validate_boundary_kinds(cls, v: tuple[EntityKind, ...]) -> tuple[EntityKind, ...]:
        if not v:
            raise ValueError("boundary_kinds must allow at least one kind")
        return v


__all__ = [
    'EntityKind',
    'ExtractionConfig',
]

"""Application services - orchestrate use cases."""

from .block_extraction import BlockExtractionService
from .definition_builder import build_definition
from .substitution import substitute

__all__ = ['BlockExtractionService', 'build_definition', 'substitute']

"""Application layer - use cases and orchestration."""

from .services.block_extraction import BlockExtractionService

__all__ = ['BlockExtractionService']

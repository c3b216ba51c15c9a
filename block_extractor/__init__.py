"""Block Extractor - turn a boundary solid and its contents into a reusable block."""

__version__ = "1.0.0"

from .application.services.block_extraction import BlockExtractionService
from .domain import (
    Definition,
    Entity,
    EntityKind,
    Extents,
    ExtractionConfig,
    ExtractionResult,
    ExtractionStatus,
    Point3D,
)
from .exceptions import (
    BlockExtractorError,
    ConfigurationError,
    ValidationError,
    StoreError,
    EntityNotFoundError,
    DefinitionNotFoundError,
    DuplicateDefinitionError,
    TransactionError,
    SelectionError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'BlockExtractionService',
    'Definition',
    'Entity',
    'EntityKind',
    'Extents',
    'ExtractionConfig',
    'ExtractionResult',
    'ExtractionStatus',
    'Point3D',
    'setup_logging',
    # Exceptions
    'BlockExtractorError',
    'ConfigurationError',
    'ValidationError',
    'StoreError',
    'EntityNotFoundError',
    'DefinitionNotFoundError',
    'DuplicateDefinitionError',
    'TransactionError',
    'SelectionError',
]

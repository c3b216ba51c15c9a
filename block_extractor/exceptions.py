"""Custom exceptions for Block Extractor."""

from typing import Optional


class BlockExtractorError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(BlockExtractorError):
    """Error in configuration or settings.

    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key


class ValidationError(BlockExtractorError):
    """Error validating inputs or parameters.

    Attributes:
        field: The field that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field


class StoreError(BlockExtractorError):
    """Error reading or mutating the geometry store.

    Attributes:
        entity_id: The entity involved when the error occurred (if applicable)
    """

    def __init__(
        self,
        message: str,
        entity_id: Optional[int] = None,
        error_code: str = "STORE_ERROR"
    ):
        super().__init__(message, error_code=error_code)
        self.entity_id = entity_id

    def __str__(self) -> str:
        if self.entity_id is not None:
            return f"{super().__str__()} (entity: {self.entity_id})"
        return super().__str__()


class EntityNotFoundError(StoreError):
    """Entity id is not present in the store."""

    def __init__(self, entity_id: int):
        super().__init__("Entity not found", entity_id=entity_id,
                         error_code="ENTITY_NOT_FOUND")


class DefinitionNotFoundError(StoreError):
    """Block definition name is not registered.

    Attributes:
        name: The missing definition name
    """

    def __init__(self, name: str):
        super().__init__(f"Block definition '{name}' does not exist",
                         error_code="DEFINITION_NOT_FOUND")
        self.name = name


class DuplicateDefinitionError(StoreError):
    """Block definition name is already registered.

    Attributes:
        name: The conflicting definition name
    """

    def __init__(self, name: str):
        super().__init__(f"A block named '{name}' already exists",
                         error_code="DUPLICATE_NAME")
        self.name = name


class TransactionError(BlockExtractorError):
    """Error opening, committing or rolling back a transaction."""

    def __init__(self, message: str):
        super().__init__(message, error_code="TRANSACTION_ERROR")


class SelectionError(BlockExtractorError):
    """Error obtaining an entity from the interactive selection.

    Attributes:
        entity_id: The picked entity (if applicable)
    """

    def __init__(self, message: str, entity_id: Optional[int] = None):
        super().__init__(message, error_code="SELECTION_ERROR")
        self.entity_id = entity_id

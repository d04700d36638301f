"""Custom exceptions for the recency cache."""

from typing import Optional


class RecencyCacheError(Exception):
    """Base exception for all cache errors.
    
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


class ConfigurationError(RecencyCacheError):
    """Error in configuration or settings.
    
    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """
    
    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
    ):
        super().__init__(message, error_code=error_code)
        self.config_key = config_key


class InvalidCapacityError(ConfigurationError):
    """Cache constructed with a capacity that is not positive.
    
    Attributes:
        capacity: The rejected capacity
    """
    
    def __init__(self, capacity: int):
        super().__init__(
            f"Cache capacity must be greater than 0, got {capacity}",
            config_key="capacity",
            error_code="INVALID_CAPACITY",
        )
        self.capacity = capacity


class ValidationError(RecencyCacheError):
    """Error validating inputs or parameters.
    
    Attributes:
        field: The field that failed validation (if applicable)
    """
    
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field
    
    def __str__(self) -> str:
        if self.field:
            return f"{super().__str__()} (field: {self.field})"
        return super().__str__()

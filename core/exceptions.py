"""
Centralized exception hierarchy for domain-specific errors.

The consumption engine never raises; these exceptions belong to the storage
and API layers, where they are mapped to HTTP status codes by
``core.api.api_route``.
"""


class FuelLogError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FuelLogError):
    """Exception raised when data validation fails."""


class AuthorizationError(FuelLogError):
    """Exception raised when a record belongs to another user."""


class ResourceNotFoundError(FuelLogError):
    """Exception raised when a requested resource is not found."""


class DuplicateResourceError(FuelLogError):
    """Exception raised when attempting to create a duplicate resource."""


FuelLogException = FuelLogError
ValidationException = ValidationError
AuthorizationException = AuthorizationError
ResourceNotFoundException = ResourceNotFoundError
DuplicateResourceException = DuplicateResourceError

"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ValidationError(DomainError):
    """Raised when a required value is missing at the store boundary."""

    pass

"""
Domain Exceptions.

Custom exceptions for domain-level errors.
These exceptions represent business rule violations.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            message=f"{entity_type} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND",
            details={"entity_type": entity_type, "entity_id": str(entity_id)}
        )


class EntityAlreadyExistsException(DomainException):
    """Raised when trying to create an entity that already exists."""

    def __init__(self, entity_type: str, identifier: Any):
        super().__init__(
            message=f"{entity_type} with identifier '{identifier}' already exists",
            code="ENTITY_ALREADY_EXISTS",
            details={"entity_type": entity_type, "identifier": str(identifier)}
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, message: str, current_state: Optional[str] = None):
        super().__init__(
            message=message,
            code="INVALID_OPERATION",
            details={"current_state": current_state} if current_state else {}
        )


class ValidationException(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )
        self.field = field


class CircularReferenceException(DomainException):
    """Raised when an element would become its own ancestor."""

    def __init__(self, element_type: str, element_ids: list):
        super().__init__(
            message=f"Circular reference detected in {element_type} tree",
            code="CIRCULAR_REFERENCE",
            details={
                "element_type": element_type,
                "element_ids": [str(id) for id in element_ids]
            }
        )


class AuthorizationException(DomainException):
    """Raised when user is not authorized to perform an operation."""

    def __init__(self, operation: str, resource: Optional[str] = None):
        super().__init__(
            message=f"Not authorized to perform '{operation}'" +
                    (f" on '{resource}'" if resource else ""),
            code="AUTHORIZATION_ERROR",
            details={"operation": operation, "resource": resource}
        )

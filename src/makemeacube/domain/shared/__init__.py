"""Shared domain building blocks used across all bounded contexts."""

from makemeacube.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from makemeacube.domain.shared.identity import StorageIdentity
from makemeacube.domain.shared.time import as_utc, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StorageIdentity",
    "ValidationError",
    "as_utc",
    "utc_now",
]

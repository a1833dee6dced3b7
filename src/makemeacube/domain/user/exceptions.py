"""User domain exceptions.

Ownership mismatches are reported as "not found": OwnershipViolationError
subclasses EntityNotFoundError and carries the same user-facing message, so
callers cannot discover other users' resources. Only ``code`` and
``details`` tell the two apart.
"""

from typing import Optional

from makemeacube.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class InvalidDimensionsError(ValidationError):
    """Raised when a dimension or accuracy is negative."""

    def __init__(self, axis: str, value: int) -> None:
        super().__init__(
            message=f"Dimension '{axis}' must be positive or zero, got {value}",
            code=ErrorCode.INVALID_DIMENSIONS,
            details={"axis": axis, "value": value},
        )


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, code=ErrorCode.WEAK_PASSWORD)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message=f"Email already registered: {email}",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            message=f"User '{user_id}' not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class AddressNotFoundError(EntityNotFoundError):
    """Address not found."""

    def __init__(self, address_id: int) -> None:
        self.address_id = address_id
        super().__init__(
            message=f"Address '{address_id}' not found",
            code=ErrorCode.ADDRESS_NOT_FOUND,
            details={"address_id": address_id},
        )


class MakerToolNotFoundError(EntityNotFoundError):
    """Maker tool not found."""

    def __init__(self, tool_id: int) -> None:
        self.tool_id = tool_id
        super().__init__(
            message=f"Maker tool '{tool_id}' not found",
            code=ErrorCode.MAKER_TOOL_NOT_FOUND,
            details={"tool_id": tool_id},
        )


class MaterialNotFoundError(EntityNotFoundError):
    """Material not found, or not attached to the addressed tool."""

    def __init__(self, material_id: int, tool_id: Optional[int] = None) -> None:
        self.material_id = material_id
        super().__init__(
            message=f"Material '{material_id}' not found",
            code=ErrorCode.MATERIAL_NOT_FOUND,
            details={"material_id": material_id, "tool_id": tool_id},
        )


class OwnershipViolationError(EntityNotFoundError):
    """A resource exists but its ownership chain does not end at the caller."""

    def __init__(
        self,
        resource: str,
        resource_id: Optional[int],
        expected_owner_id: Optional[int],
        actual_owner_id: Optional[int],
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource} '{resource_id}' not found",
            code=ErrorCode.OWNERSHIP_VIOLATION,
            details={
                "resource": resource,
                "resource_id": resource_id,
                "expected_owner_id": expected_owner_id,
                "actual_owner_id": actual_owner_id,
            },
        )


class NotAMakerError(BusinessRuleViolation):
    """Tool management requires a maker profile."""

    def __init__(self, user_id: Optional[int]) -> None:
        super().__init__(
            message="Only maker users can manage maker tools",
            code=ErrorCode.NOT_A_MAKER,
            details={"user_id": user_id},
        )


class MakerAddressRequiredError(BusinessRuleViolation):
    """A maker must keep at least one address."""

    def __init__(self, user_id: Optional[int]) -> None:
        super().__init__(
            message="A maker must have at least one address",
            code=ErrorCode.MAKER_ADDRESS_REQUIRED,
            details={"user_id": user_id},
        )


class AuthenticationMismatchError(DomainException):
    """The authenticated principal does not map to any user."""

    def __init__(self, message: str = "Authenticated principal has no user") -> None:
        super().__init__(message, code=ErrorCode.AUTHENTICATION_MISMATCH)

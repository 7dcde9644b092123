"""Domain exceptions for pos-payments.

Exception hierarchy:
    DomainException (base)
    ├── Entity Errors
    │   ├── InvalidStateTransitionError
    │   └── InvalidPaymentItemError
    └── Service Errors
        └── PaymentServiceError (not_found=True -> HTTP 404, else HTTP 400)

Entity errors are raised by the domain model itself. The payment service
translates them into PaymentServiceError so callers only handle one kind.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Entity Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a state transition violates the payment state machine.

    Valid transitions:
        - open → confirmed

    Examples of invalid transitions:
        - confirmed → confirmed (already confirmed)
        - confirmed → open (confirmation is irreversible)
    """


class InvalidPaymentItemError(DomainException):
    """Raised when a payment item fails validation.

    Description must be non-empty, quantity greater than 0 and
    unit price not negative. Enforced in PaymentItem.create().
    """


# =============================================================================
# Service Errors
# =============================================================================


class PaymentServiceError(DomainException):
    """Raised by PaymentService for every rejected operation.

    Attributes:
        message: Human-readable reason, safe to return to API clients.
        not_found: True when the referenced payment does not exist
            (HTTP 404); False for business rule violations (HTTP 400).
    """

    def __init__(self, message: str, *, not_found: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.not_found = not_found

    @classmethod
    def payment_not_found(cls) -> PaymentServiceError:
        return cls("Payment not found", not_found=True)

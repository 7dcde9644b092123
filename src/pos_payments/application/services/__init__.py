"""Application services - Business rules orchestrated over the ports."""

from pos_payments.application.services.payment_service import PaymentService

__all__ = ["PaymentService"]

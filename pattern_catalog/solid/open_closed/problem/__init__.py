"""Payment processing that must be edited for every new channel."""

from .payment_processor import PaymentProcessor

__all__ = ["PaymentProcessor"]

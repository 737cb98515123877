"""Payment processing open to new channels without modification."""

from .credit_card import CreditCard
from .debit_card import DebitCard
from .payment_method import PaymentMethod
from .payment_service import PaymentService

__all__ = ["CreditCard", "DebitCard", "PaymentMethod", "PaymentService"]

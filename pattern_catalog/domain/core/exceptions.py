# pattern_catalog/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnsupportedTransportError(DomainException, ValueError):
    """Raised when the transport factory is asked for an unknown type."""
    def __init__(self, transport_type: Any):
        super().__init__("unsupported type transport")
        self.transport_type = transport_type


class UnsupportedPaymentMethodError(DomainException, ValueError):
    """Raised when a payment processor does not know the payment type."""
    def __init__(self, payment_type: Any):
        super().__init__(f"unsupported payment type: {payment_type}")
        self.payment_type = payment_type

"""Core domain primitives."""

from .exceptions import (
    DomainException,
    ConfigurationError,
    UnsupportedTransportError,
    UnsupportedPaymentMethodError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnsupportedTransportError",
    "UnsupportedPaymentMethodError",
]

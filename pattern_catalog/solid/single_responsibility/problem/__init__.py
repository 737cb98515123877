"""Invoice that mixes generation, persistence and notification."""

from .invoice import Invoice

__all__ = ["Invoice"]

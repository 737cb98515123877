"""Invoice split into one class per responsibility."""

from .email_notifier import EmailNotifier
from .invoice import Invoice
from .invoice_repository import InvoiceRepository

__all__ = ["EmailNotifier", "Invoice", "InvoiceRepository"]

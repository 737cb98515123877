"""Invoice persistence."""
from pattern_catalog.solid.single_responsibility.solution.invoice import Invoice


class InvoiceRepository:
    """Saves invoices. Storage is simulated on the console."""

    def save(self, invoice: Invoice) -> None:
        print("invoice is saved to db")

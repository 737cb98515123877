"""Runs the refactored invoice flow next to the original one."""
from pattern_catalog.solid.single_responsibility.problem import invoice as problem
from pattern_catalog.solid.single_responsibility.solution.email_notifier import EmailNotifier
from pattern_catalog.solid.single_responsibility.solution.invoice import Invoice
from pattern_catalog.solid.single_responsibility.solution.invoice_repository import InvoiceRepository


def main() -> None:
    print("-- one class, three responsibilities --")
    problem.main()

    print("-- one class per responsibility --")
    invoice = Invoice(100)
    invoice.generate_invoice()
    InvoiceRepository().save(invoice)
    EmailNotifier().send(invoice)


if __name__ == "__main__":
    main()

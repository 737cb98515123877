"""Payment processor closed to extension: one branch per payment type."""
from pattern_catalog.domain.core.exceptions import UnsupportedPaymentMethodError


class PaymentProcessor:
    """Processes payments by switching on a type string."""

    def process_payment(self, payment_type: str, amount: float) -> None:
        # Adding a channel means adding a branch here.
        if payment_type == "credit":
            print(f"making payment via credit card {amount}")
        elif payment_type == "debit":
            print(f"paying via debit card {amount}")
        else:
            raise UnsupportedPaymentMethodError(payment_type)


def main() -> None:
    processor = PaymentProcessor()
    processor.process_payment("credit", 100.0)
    processor.process_payment("debit", 100.0)


if __name__ == "__main__":
    main()

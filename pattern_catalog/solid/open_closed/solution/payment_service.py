"""Payment service that depends only on the PaymentMethod abstraction."""
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.solid.open_closed.solution.credit_card import CreditCard
from pattern_catalog.solid.open_closed.solution.debit_card import DebitCard
from pattern_catalog.solid.open_closed.solution.payment_method import PaymentMethod

logger = get_logger(__name__)


class PaymentService:
    """Takes payments through whichever PaymentMethod it is given."""

    def __init__(self, payment_method: PaymentMethod):
        self.payment_method = payment_method

    def process(self, amount: float) -> None:
        logger.debug(
            "Processing payment",
            payment_method=type(self.payment_method).__name__,
            amount=amount,
        )
        self.payment_method.pay(amount)


def main() -> None:
    for method in (CreditCard(), DebitCard()):
        PaymentService(method).process(100.0)


if __name__ == "__main__":
    main()

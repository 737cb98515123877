from pattern_catalog.solid.open_closed.solution.payment_method import PaymentMethod


class CreditCard(PaymentMethod):
    def pay(self, amount: float) -> None:
        print(f"making payment via credit card {amount}")

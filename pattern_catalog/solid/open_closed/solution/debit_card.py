from pattern_catalog.solid.open_closed.solution.payment_method import PaymentMethod


class DebitCard(PaymentMethod):
    def pay(self, amount: float) -> None:
        print(f"paying via debit card {amount}")

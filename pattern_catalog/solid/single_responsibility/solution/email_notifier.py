"""Invoice notification."""
from pattern_catalog.solid.single_responsibility.solution.invoice import Invoice


class EmailNotifier:
    """Sends invoice emails. Delivery is simulated on the console."""

    def send(self, invoice: Invoice) -> None:
        print("email is sent")

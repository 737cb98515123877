"""An invoice with too many reasons to change."""


class Invoice:
    """Holds an amount and also generates, saves and emails itself."""

    def __init__(self, amount: int):
        self.amount = amount

    def generate_invoice(self) -> None:
        print("invoice is generated")

    def save_to_db(self) -> None:
        print("invoice is saved to db")

    def send_email(self) -> None:
        print("email is sent")


def main() -> None:
    invoice = Invoice(100)
    invoice.generate_invoice()
    invoice.save_to_db()
    invoice.send_email()


if __name__ == "__main__":
    main()

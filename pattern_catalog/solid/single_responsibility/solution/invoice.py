"""Invoice that only knows how to generate itself."""


class Invoice:
    def __init__(self, amount: int):
        self.amount = amount

    def generate_invoice(self) -> None:
        print("invoice is generated")

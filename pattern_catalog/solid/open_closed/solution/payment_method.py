"""Payment capability."""
from abc import ABC, abstractmethod


class PaymentMethod(ABC):
    """A channel that can take a payment."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        """
        Pay the given amount through this channel.

        Args:
            amount: Amount to pay; not validated
        """
        pass

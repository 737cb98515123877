"""Transport capability and its variants."""
from abc import ABC, abstractmethod
from enum import Enum


class TransportType(str, Enum):
    """Transport keys understood by the factory."""
    BIKE = "bike"
    CAR = "car"
    BUS = "bus"


class Transport(ABC):
    """Something that can deliver goods."""

    @abstractmethod
    def deliver(self) -> None:
        """Deliver goods using this transport."""
        pass


class Bike(Transport):
    def deliver(self) -> None:
        print("deliver by bike")


class Car(Transport):
    def deliver(self) -> None:
        print("deliver by car")


class Bus(Transport):
    def deliver(self) -> None:
        print("deliver by bus")

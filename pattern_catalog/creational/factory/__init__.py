"""Factory pattern example."""

from .transport import Bike, Bus, Car, Transport, TransportType
from .transport_factory import TransportFactory

__all__ = ["Bike", "Bus", "Car", "Transport", "TransportFactory", "TransportType"]

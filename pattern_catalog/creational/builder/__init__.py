"""Builder pattern example."""

from .house import House, HouseBuilder

__all__ = ["House", "HouseBuilder"]

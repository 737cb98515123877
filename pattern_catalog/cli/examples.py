"""Catalogue of runnable examples."""
from typing import Callable, Dict, NamedTuple

from pattern_catalog.creational.builder import house
from pattern_catalog.creational.factory import transport_service
from pattern_catalog.creational.singleton import singleton_pattern
from pattern_catalog.solid.open_closed.problem import payment_processor
from pattern_catalog.solid.open_closed.solution import payment_service
from pattern_catalog.solid.single_responsibility.solution import billing


class Example(NamedTuple):
    """A runnable example."""
    description: str
    run: Callable[[], None]


EXAMPLES: Dict[str, Example] = {
    "builder": Example("Build a House step by step with HouseBuilder", house.main),
    "factory": Example("Create a Transport from a string key", transport_service.main),
    "singleton": Example("Show AppSettings is shared process-wide", singleton_pattern.main),
    "open-closed-problem": Example("Pay through a processor that switches on type", payment_processor.main),
    "open-closed": Example("Pay through interchangeable PaymentMethods", payment_service.main),
    "single-responsibility": Example("Split an Invoice into focused classes", billing.main),
}

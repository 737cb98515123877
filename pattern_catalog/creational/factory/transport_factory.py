"""Factory that maps a transport key to its implementation."""
from typing import Any, Callable, Dict

from pattern_catalog.creational.factory.transport import Bike, Bus, Car, Transport, TransportType
from pattern_catalog.domain.core.exceptions import UnsupportedTransportError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class TransportFactory:
    """
    Creates Transport instances from a case-insensitive key.

    The set of variants is fixed: ``bike``, ``car`` and ``bus``.
    """

    _TRANSPORTS: Dict[TransportType, Callable[[], Transport]] = {
        TransportType.BIKE: Bike,
        TransportType.CAR: Car,
        TransportType.BUS: Bus,
    }

    @staticmethod
    def create_transportation(transport_type: Any) -> Transport:
        """
        Create a transport for the given type.

        Args:
            transport_type: Transport key, matched case-insensitively

        Returns:
            A new Transport instance

        Raises:
            UnsupportedTransportError: If the type is not one of the known keys
        """
        if not isinstance(transport_type, str):
            logger.info("Rejected non-string transport type", transport_type=repr(transport_type))
            raise UnsupportedTransportError(transport_type)

        try:
            key = TransportType(transport_type.lower())
        except ValueError:
            logger.info("Rejected unknown transport type", transport_type=transport_type)
            raise UnsupportedTransportError(transport_type) from None

        logger.debug("Creating transport", transport_type=key.value)
        return TransportFactory._TRANSPORTS[key]()

"""Client of the transport factory."""
from pattern_catalog.creational.factory.transport_factory import TransportFactory


def main() -> None:
    vehicle = TransportFactory.create_transportation("car")
    vehicle.deliver()


if __name__ == "__main__":
    main()

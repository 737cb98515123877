"""Builder pattern: a House assembled field by field through a HouseBuilder.

The House is a frozen value object. It can only be produced by
``HouseBuilder.build()``; direct construction fails validation.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_BUILDER_TOKEN = object()


class House(BaseModel):
    """Immutable house produced by HouseBuilder."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    roof: str
    balcony: Optional[str] = None
    bathroom: str
    has_garden: bool = False
    has_swimming_pool: bool = False

    @model_validator(mode="before")
    @classmethod
    def require_builder(cls, data: Any, info: ValidationInfo) -> Any:
        """Reject construction that does not come from HouseBuilder.build()."""
        context = info.context or {}
        if context.get("builder") is not _BUILDER_TOKEN:
            raise ValueError("House instances must be created with HouseBuilder.build()")
        return data


class HouseBuilder:
    """Accumulates House fields and produces the House in one step."""

    def __init__(self, roof: str, bathroom: str):
        self.roof = roof
        self.bathroom = bathroom
        self.balcony: Optional[str] = None
        self.has_garden = False
        self.has_swimming_pool = False

    def set_balcony(self, balcony: str) -> "HouseBuilder":
        self.balcony = balcony
        return self

    def set_garden(self, has_garden: bool) -> "HouseBuilder":
        self.has_garden = has_garden
        return self

    def set_swimming_pool(self, has_swimming_pool: bool) -> "HouseBuilder":
        self.has_swimming_pool = has_swimming_pool
        return self

    def build(self) -> House:
        """
        Build the House from the accumulated fields.

        Returns:
            A new immutable House carrying every field set on this builder
        """
        house = House.model_validate(
            {
                "roof": self.roof,
                "balcony": self.balcony,
                "bathroom": self.bathroom,
                "has_garden": self.has_garden,
                "has_swimming_pool": self.has_swimming_pool,
            },
            context={"builder": _BUILDER_TOKEN},
        )
        logger.debug("House built", roof=house.roof, bathroom=house.bathroom)
        return house


def main() -> None:
    house = (
        HouseBuilder("Tile", "Marble")
        .set_balcony("Wooden")
        .set_garden(True)
        .set_swimming_pool(True)
        .build()
    )
    print(house)


if __name__ == "__main__":
    main()

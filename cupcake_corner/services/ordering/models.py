"""Order models."""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


# Flavors offered by the store; an order's ``type`` indexes into this tuple.
FLAVORS = ("vanilla", "chocolate", "strawberry", "rainbow")

# Contact fields that must all be filled in before an order can be placed.
CONTACT_FIELDS = ("name", "address", "city", "zipcode")


class Order(BaseModel):
    """Wire record for one cupcake order.

    This is both what gets posted to the order endpoint and what the endpoint
    echoes back. Attribute names are snake_case; the JSON keys are the
    camelCase aliases, and only the aliases are accepted when building one.
    """

    model_config = ConfigDict(strict=True)

    type: int = Field(ge=0, lt=len(FLAVORS))
    quantity: int
    extra_frosting: bool = Field(alias="extraFrosting")
    add_sprinkles: bool = Field(alias="addSprinkles")
    name: str
    address: str
    city: str
    zipcode: str

    @property
    def flavor_name(self) -> str:
        """Lowercase name of the ordered flavor."""
        return FLAVORS[self.type].lower()

    def to_json(self) -> str:
        """Serialize to the compact JSON body sent over the wire."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "Order":
        """
        Decode a JSON body into an order.

        Raises:
            pydantic.ValidationError: if the body is not JSON or does not
                match the order schema
        """
        return cls.model_validate_json(data)

"""Shared model base and wire field types."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def format_decimal(value: Decimal) -> str:
    """Render a decimal as a plain string, never in exponent notation."""
    return format(value, "f")


# Decimal kept exact in Python, rendered as a plain decimal string on the wire
WireDecimal = Annotated[
    Decimal, PlainSerializer(format_decimal, return_type=str, when_used="json")
]

# Raw bytes in Python, lowercase hex on the wire
HexBytes = Annotated[
    bytes, PlainSerializer(lambda value: value.hex(), return_type=str, when_used="json")
]


class WireModel(BaseModel):
    """Base for values exchanged with the host.

    Python attributes are snake_case; the wire uses camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self, *, exclude_none: bool = False) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
